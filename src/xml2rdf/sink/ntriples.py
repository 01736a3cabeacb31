# xml2rdf/sink/ntriples.py
from __future__ import annotations
import logging
import re
import sys
from pathlib import Path
from typing import TextIO
from rdflib import URIRef, Literal

from xml2rdf.common.errors import SinkWriteError
from xml2rdf.sink.base import TripleSink, Object

logger = logging.getLogger(__name__)


def _escape_string(s: str) -> str:
    """Escape a string for an N-Triples literal"""
    s = s.replace("\\", "\\\\")
    s = s.replace('"', '\\"')
    s = s.replace("\n", "\\n")
    s = s.replace("\r", "\\r")
    s = s.replace("\t", "\\t")
    return s


# characters N-Triples does not allow inside <...>
ILLEGAL_IRI_RX = re.compile(r'[\x00-\x20<>"{}|^`\\]')


def is_valid_iriref(iri: str) -> bool:
    return ILLEGAL_IRI_RX.search(iri) is None


def format_term(term: Object) -> str:
    if isinstance(term, Literal):
        return f'"{_escape_string(str(term))}"'
    return f"<{term}>"


def format_triple(subject: URIRef, predicate: URIRef, obj: Object) -> str:
    return f"{format_term(subject)} {format_term(predicate)} {format_term(obj)} .\n"


class NTriplesSink(TripleSink):
    """
    Line-oriented N-Triples writer.

    Every triple is flushed as soon as it is written, so whatever was emitted
    before a failure is on disk.
    """

    def __init__(self, stream: TextIO, close_stream: bool = False, name: str | None = None):
        self.stream = stream
        self.close_stream = close_stream
        self.name = name or getattr(stream, "name", "<stream>")
        self.count = 0
        self.invalid_iris = 0

    @classmethod
    def to_file(cls, file_path: str | Path) -> "NTriplesSink":
        """Open ``file_path`` for appending, creating it (and its directory) if needed."""
        target_path = Path(file_path)
        try:
            target_path.parent.mkdir(parents=True, exist_ok=True)
            stream = target_path.open("a", encoding="utf-8")
        except OSError as e:
            raise SinkWriteError(f"Could not open output file {target_path}: {e}") from e
        logger.debug("Appending triples to %s", target_path)
        return cls(stream, close_stream=True, name=str(target_path))

    @classmethod
    def to_stdout(cls) -> "NTriplesSink":
        return cls(sys.stdout, close_stream=False, name="<stdout>")

    def _check_iris(self, *terms: Object) -> None:
        for term in terms:
            if isinstance(term, Literal) or is_valid_iriref(str(term)):
                continue
            self.invalid_iris += 1
            if self.invalid_iris == 1:
                # warn once per sink
                logger.warning(
                    "IRI %r is not valid N-Triples; %s will not parse back cleanly", str(term), self.name
                )

    def add_triple(self, subject: URIRef, predicate: URIRef, obj: Object) -> None:
        self._check_iris(subject, predicate, obj)
        try:
            self.stream.write(format_triple(subject, predicate, obj))
            self.stream.flush()
        except OSError as e:
            raise SinkWriteError(f"Failed to write triple to {self.name}: {e}") from e
        self.count += 1

    def flush(self) -> None:
        try:
            self.stream.flush()
        except OSError as e:
            raise SinkWriteError(f"Failed to flush {self.name}: {e}") from e

    def close(self) -> None:
        if self.stream.closed:
            return
        self.flush()
        if self.close_stream:
            self.stream.close()
