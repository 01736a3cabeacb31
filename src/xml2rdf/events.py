"""
XML event source

Turns an XML byte stream into a flat sequence of structural events in
document order, driven by lxml's feed parser with a parser target. The
document is never materialised as a tree.
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from typing import BinaryIO, Iterator, List, Optional, Tuple, Union

from lxml import etree

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class StartElement:
    name: str
    attributes: List[Tuple[str, str]] = field(default_factory=list)


@dataclass(frozen=True)
class Characters:
    text: str


@dataclass(frozen=True)
class EndElement:
    name: str


@dataclass(frozen=True)
class Ignored:
    """Comments, processing instructions and doctype declarations."""
    kind: str
    detail: str = ""


@dataclass(frozen=True)
class ParseError:
    """The parser gave up; no further events follow for this document."""
    message: str
    line: Optional[int] = None


XmlEvent = Union[StartElement, Characters, EndElement, Ignored, ParseError]


def local_name(tag: str) -> str:
    """Strip the ``{namespace}`` part lxml puts in front of qualified names."""
    return etree.QName(tag).localname


class _EventCollector:
    """lxml parser target buffering events until the caller drains them."""

    def __init__(self):
        self.events: List[XmlEvent] = []
        self._text: List[str] = []

    def _flush_text(self):
        if self._text:
            self.events.append(Characters("".join(self._text)))
            self._text = []

    def start(self, tag, attrib, nsmap=None):
        self._flush_text()
        attributes = [(local_name(k), v) for k, v in attrib.items()]
        self.events.append(StartElement(local_name(tag), attributes))

    def end(self, tag):
        self._flush_text()
        self.events.append(EndElement(local_name(tag)))

    def data(self, data):
        self._text.append(data)

    def comment(self, text):
        self._flush_text()
        self.events.append(Ignored("comment", text or ""))

    def pi(self, target, data=None):
        self._flush_text()
        self.events.append(Ignored("pi", target))

    def doctype(self, *args):
        self.events.append(Ignored("doctype", args[0] if args and args[0] else ""))

    def close(self):
        self._flush_text()

    def drain(self) -> List[XmlEvent]:
        out, self.events = self.events, []
        return out


class XmlEventSource:
    """
    Iterable of events for one document.

    ``source`` is a path or a binary file object. Malformed input yields a
    single ``ParseError`` after every event produced before the fault.
    """

    def __init__(self, source: Union[str, os.PathLike, BinaryIO], chunk_size: int = CHUNK_SIZE):
        self.source = source
        self.chunk_size = chunk_size

    def __iter__(self) -> Iterator[XmlEvent]:
        if hasattr(self.source, "read"):
            yield from self._parse(self.source)
        else:
            with open(self.source, "rb") as f:
                yield from self._parse(f)

    def _parse(self, stream: BinaryIO) -> Iterator[XmlEvent]:
        collector = _EventCollector()
        parser = etree.XMLParser(
            target=collector, no_network=True, huge_tree=True
        )
        try:
            while True:
                chunk = stream.read(self.chunk_size)
                if not chunk:
                    break
                parser.feed(chunk)
                yield from collector.drain()
            parser.close()
        except etree.XMLSyntaxError as e:
            yield from collector.drain()
            line = e.position[0] if getattr(e, "position", None) else None
            logger.debug("Parser stopped at line %s: %s", line, e)
            yield ParseError(str(e), line)
            return
        yield from collector.drain()


def iter_events(source, chunk_size: int = CHUNK_SIZE) -> Iterator[XmlEvent]:
    return iter(XmlEventSource(source, chunk_size))
