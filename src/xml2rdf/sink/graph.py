# xml2rdf/sink/graph.py
from __future__ import annotations
from typing import Optional
from rdflib import Graph, URIRef

from xml2rdf.sink.base import TripleSink, Object


class GraphSink(TripleSink):
    """Adds triples to an rdflib Graph owned by the caller."""

    def __init__(self, graph: Optional[Graph] = None):
        self.g = graph if graph is not None else Graph()

    def add_triple(self, subject: URIRef, predicate: URIRef, obj: Object) -> None:
        self.g.add((subject, predicate, obj))

    def asGraph(self) -> Graph:
        return self.g
