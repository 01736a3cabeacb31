# xml2rdf/sink/factory.py
from __future__ import annotations
from typing import Dict, Any, Optional
import importlib

from xml2rdf.common.errors import UnknownSinkError
from xml2rdf.sink.base import TripleSink


class SinkFactory:
    """Creates triple sinks by name."""

    def __init__(self):
        self._sinks: Dict[str, Dict[str, Any]] = {
            "file": {
                "module": "xml2rdf.sink.ntriples",
                "class": "NTriplesSink",
                "constructor": "to_file",
            },
            "stdout": {
                "module": "xml2rdf.sink.ntriples",
                "class": "NTriplesSink",
                "constructor": "to_stdout",
            },
            "graph": {
                "module": "xml2rdf.sink.graph",
                "class": "GraphSink",
                "constructor": None,
            },
        }

    def register_sink(self, name: str, module: str, class_name: str, constructor: Optional[str] = None):
        """Register a new sink type."""
        self._sinks[name] = {
            "module": module,
            "class": class_name,
            "constructor": constructor,
        }

    def get_available_sinks(self) -> list[str]:
        return list(self._sinks.keys())

    def create_sink(self, sink_name: str, **kwargs) -> TripleSink:
        """Create a sink instance by name."""
        if sink_name not in self._sinks:
            available = ", ".join(self.get_available_sinks())
            raise UnknownSinkError(f"Unknown sink: {sink_name}. Available sinks: {available}")

        sink_info = self._sinks[sink_name]
        module = importlib.import_module(sink_info["module"])
        sink_class = getattr(module, sink_info["class"])
        if sink_info["constructor"]:
            return getattr(sink_class, sink_info["constructor"])(**kwargs)
        return sink_class(**kwargs)


# Global factory instance
_factory = SinkFactory()


def create_sink(sink_name: str, **kwargs) -> TripleSink:
    """Convenience function to create a sink using the global factory."""
    return _factory.create_sink(sink_name, **kwargs)


def register_sink(name: str, module: str, class_name: str, constructor: Optional[str] = None):
    _factory.register_sink(name, module, class_name, constructor)


def get_available_sinks() -> list[str]:
    return _factory.get_available_sinks()
