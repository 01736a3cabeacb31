"""
xml2rdf - structural XML to RDF conversion.

Every element, attribute and text value of an XML document becomes an RDF
node linked through a small fixed vocabulary. Triples are streamed to a
sink: an append-only N-Triples file (or stdout) or an rdflib.Graph.
"""

from .convert import parse_xml, convert_document, xml_to_graph
from .events import XmlEventSource, iter_events
from .identity import IdentityAssignor, Node
from .sink import TripleSink, NTriplesSink, GraphSink, create_sink
from .walker import TreeWalker, ConversionStats
from .vocab import MODEL_NAMESPACE, DEFAULT_NAMESPACE

__version__ = "0.1.0"

__all__ = [
    "parse_xml", "convert_document", "xml_to_graph",
    "XmlEventSource", "iter_events",
    "IdentityAssignor", "Node",
    "TripleSink", "NTriplesSink", "GraphSink", "create_sink",
    "TreeWalker", "ConversionStats",
    "MODEL_NAMESPACE", "DEFAULT_NAMESPACE",
]
