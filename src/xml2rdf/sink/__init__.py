# xml2rdf/sink/__init__.py
from .base import TripleSink
from .ntriples import NTriplesSink, format_triple
from .graph import GraphSink
from .factory import create_sink, register_sink, get_available_sinks, SinkFactory

__all__ = [
    "TripleSink",
    "NTriplesSink",
    "format_triple",
    "GraphSink",
    "create_sink",
    "register_sink",
    "get_available_sinks",
    "SinkFactory",
]
