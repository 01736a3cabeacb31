"""
Tree walker

Consumes the event stream of one document and emits the triples describing
it. Nesting is tracked with an explicit ancestor stack rather than recursion,
so depth is bounded by memory, not by the interpreter's call stack.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional
from rdflib import Literal

from xml2rdf.common.errors import MalformedXmlError
from xml2rdf.events import (
    XmlEvent, StartElement, Characters, EndElement, Ignored, ParseError
)
from xml2rdf.identity import IdentityAssignor, Node
from xml2rdf.sink.base import TripleSink
from xml2rdf.vocab import (
    TYPE, SUB_CLASS_OF, XML_NODE, XML_ATTRIBUTE,
    HAS_CHILD, HAS_ATTRIBUTE, HAS_NAME, HAS_VALUE,
)

logger = logging.getLogger(__name__)


@dataclass
class ConversionStats:
    documents: int = 0
    elements: int = 0
    attributes: int = 0
    empty_attributes: int = 0
    values: int = 0
    triples: int = 0
    parse_errors: int = 0


class TreeWalker:
    def __init__(self, sink: TripleSink, assignor: IdentityAssignor, strict: bool = False):
        self.sink = sink
        self.assignor = assignor
        self.strict = strict
        self.stack: List[Node] = []
        self.subject: Optional[Node] = None
        self.stats = ConversionStats()
        self.source_name = "<document>"

    def reset(self, source_name: str = "<document>") -> None:
        """Forget all per-document state. Counters are kept."""
        self.stack = []
        self.subject = None
        self.source_name = source_name

    def _emit(self, subject, predicate, obj) -> None:
        self.sink.add_triple(subject, predicate, obj)
        self.stats.triples += 1

    def walk(self, events: Iterable[XmlEvent]) -> None:
        for event in events:
            if not self.handle(event):
                break
        if self.stack:
            logger.warning(
                "%s ended with %d unclosed element(s)", self.source_name, len(self.stack)
            )

    def handle(self, event: XmlEvent) -> bool:
        """Process one event. Returns False once the document cannot continue."""
        if isinstance(event, StartElement):
            self.start_element(event)
        elif isinstance(event, Characters):
            self.characters(event)
        elif isinstance(event, EndElement):
            self.end_element(event)
        elif isinstance(event, ParseError):
            self.stats.parse_errors += 1
            if self.strict:
                raise MalformedXmlError(self.source_name, event.message)
            logger.warning("Stopped reading %s: %s", self.source_name, event.message)
            return False
        elif isinstance(event, Ignored):
            logger.debug("Ignoring %s event in %s", event.kind, self.source_name)
        else:
            logger.warning("Ignoring unrecognized event %r", event)
        return True

    def start_element(self, event: StartElement) -> None:
        parent = self.stack[-1] if self.stack else None
        node_id, path = self.assignor.mint(parent.path if parent else None, event.name)
        node = Node(id=node_id, path=path, name=event.name)

        if parent is not None:
            self._emit(parent.id, HAS_CHILD, node.id)
        self._emit(node.id, TYPE, Literal(node.path))
        self._emit(node.id, HAS_NAME, Literal(event.name))
        self._emit(node.id, SUB_CLASS_OF, XML_NODE)
        self.stats.elements += 1

        self.stack.append(node)
        self.subject = node

        for name, value in event.attributes:
            self._attribute(node, name, value)

    def _attribute(self, owner: Node, name: str, value: str) -> None:
        attr_id, attr_type = self.assignor.mint_attribute(owner.path, name)
        self._emit(owner.id, HAS_ATTRIBUTE, attr_id)
        self._emit(attr_id, TYPE, attr_type)
        self._emit(attr_id, SUB_CLASS_OF, XML_ATTRIBUTE)
        self.stats.attributes += 1

        if value != "":
            self._emit(attr_id, HAS_VALUE, Literal(value))
        else:
            self.stats.empty_attributes += 1
            logger.warning(
                "Skipping empty value of attribute '%s' on %s", name, owner.path
            )

    def characters(self, event: Characters) -> None:
        text = event.text.strip()
        if not text:
            return
        if self.subject is None:
            # text after a closing tag belongs to no open subject
            logger.debug("Dropping text outside of an open subject: %.40r", text)
            return
        self._emit(self.subject.id, HAS_VALUE, Literal(text))
        self.stats.values += 1

    def end_element(self, event: EndElement) -> None:
        if self.stack:
            self.stack.pop()
        self.subject = None
