# xml2rdf/identity.py
from __future__ import annotations
import random
import uuid
from dataclasses import dataclass
from typing import Optional, Tuple
from rdflib import URIRef

from xml2rdf.vocab import MODEL_NAMESPACE


@dataclass
class Node:
    """An open XML element: its minted IRI and its dotted structural path."""
    id: URIRef
    path: str
    name: str


class IdentityAssignor:
    """
    Mints node identifiers and structural paths.

    Identifiers are ``{namespace}/{uuid}``. Without an explicit ``rng`` the
    token comes from ``uuid.uuid4()``; passing a seeded ``random.Random``
    makes the sequence of identifiers reproducible.
    """

    def __init__(self, namespace: str, rng: Optional[random.Random] = None):
        self.namespace = namespace
        self.rng = rng

    def _token(self) -> str:
        if self.rng is None:
            return str(uuid.uuid4())
        return str(uuid.UUID(int=self.rng.getrandbits(128), version=4))

    def new_identifier(self) -> URIRef:
        return URIRef(f"{self.namespace}/{self._token()}")

    def mint(self, parent_path: Optional[str], local_name: str) -> Tuple[URIRef, str]:
        if parent_path is not None:
            path = f"{parent_path}.{local_name}"
        else:
            path = f"{MODEL_NAMESPACE}{local_name}"
        return self.new_identifier(), path

    def mint_attribute(self, owner_path: str, local_name: str) -> Tuple[URIRef, URIRef]:
        # the path is taken as an IRI without validation
        return self.new_identifier(), URIRef(f"{owner_path}.-{local_name}")
