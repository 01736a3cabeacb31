"""
XML to RDF conversion

Drives the event source and the tree walker over one or more documents.
All documents of a run share a single sink; walker state is reset between
documents so no parent links cross document boundaries.

Example:
    sink = NTriplesSink.to_file("out.nt")
    with sink:
        stats = parse_xml(["people.xml"], sink, "https://example.org/data")
"""

from __future__ import annotations
import logging
import random
from pathlib import Path
from typing import BinaryIO, Iterable, Optional, Union
from rdflib import Graph

from xml2rdf.common.errors import InputOpenError
from xml2rdf.events import XmlEventSource
from xml2rdf.identity import IdentityAssignor
from xml2rdf.sink.base import TripleSink
from xml2rdf.sink.graph import GraphSink
from xml2rdf.vocab import DEFAULT_NAMESPACE
from xml2rdf.walker import ConversionStats, TreeWalker

logger = logging.getLogger(__name__)

Source = Union[str, Path, BinaryIO]


def convert_document(source: BinaryIO, walker: TreeWalker, name: Optional[str] = None) -> None:
    """Walk a single already-open document into the walker's sink."""
    walker.reset(name or getattr(source, "name", "<document>"))
    walker.walk(XmlEventSource(source))
    walker.stats.documents += 1


def parse_xml(
    files: Iterable[Source],
    sink: TripleSink,
    namespace: str = DEFAULT_NAMESPACE,
    strict: bool = False,
    rng: Optional[random.Random] = None,
) -> ConversionStats:
    """
    Convert XML documents to RDF triples written to ``sink``.

    Args:
        files: Paths (or binary file objects) of the documents, processed in order
        sink: Destination for every triple of every document
        namespace: Prefix for minted node identifiers, used verbatim
        strict: Raise ``MalformedXmlError`` instead of skipping the rest of a broken document
        rng: Optional random source for reproducible identifiers

    Returns:
        Counters for the whole run
    """
    walker = TreeWalker(sink, IdentityAssignor(namespace, rng), strict=strict)

    for source in files:
        if hasattr(source, "read"):
            convert_document(source, walker)
            continue
        path = Path(source)
        try:
            stream = path.open("rb")
        except OSError as e:
            raise InputOpenError(path, e) from e
        logger.info("Converting %s", path)
        with stream:
            convert_document(stream, walker, str(path))

    sink.flush()
    logger.info(
        "Converted %d document(s) into %d triples", walker.stats.documents, walker.stats.triples
    )
    return walker.stats


def xml_to_graph(
    files: Iterable[Source],
    namespace: str = DEFAULT_NAMESPACE,
    graph: Optional[Graph] = None,
    strict: bool = False,
) -> Graph:
    """Convert XML documents and return the triples as an rdflib.Graph

    Example:
        graph = xml_to_graph(["people.xml"])
        for s, p, o in graph:
            print(s, p, o)
    """
    sink = GraphSink(graph)
    parse_xml(files, sink, namespace, strict=strict)
    return sink.asGraph()
