# xml2rdf/sink/base.py
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Union
from rdflib import URIRef, Literal

Object = Union[URIRef, Literal]


class TripleSink(ABC):
    """Destination for emitted triples. Sinks are append-only."""

    @abstractmethod
    def add_triple(self, subject: URIRef, predicate: URIRef, obj: Object) -> None:
        ...

    def flush(self) -> None:
        pass

    def close(self) -> None:
        self.flush()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
