"""
Exceptions raised by xml2rdf.
"""


class Xml2RdfError(Exception):
    """Base class for all conversion errors."""


class InputOpenError(Xml2RdfError):
    """An input document could not be opened or read."""

    def __init__(self, path, cause: Exception):
        super().__init__(f"Could not open input '{path}': {cause}")
        self.path = path


class SinkWriteError(Xml2RdfError):
    """The triple sink failed to store a triple."""


class MalformedXmlError(Xml2RdfError):
    """Raised in strict mode when the parser reports malformed input."""

    def __init__(self, source, message: str):
        super().__init__(f"Malformed XML in '{source}': {message}")
        self.source = source
        self.message = message


class UnknownSinkError(Xml2RdfError, ValueError):
    pass
