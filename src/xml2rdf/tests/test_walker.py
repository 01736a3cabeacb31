import logging
import random

import pytest
from rdflib import Literal, URIRef

from xml2rdf.common.errors import MalformedXmlError
from xml2rdf.events import StartElement, Characters, EndElement, Ignored, ParseError
from xml2rdf.identity import IdentityAssignor
from xml2rdf.vocab import (
    MODEL_NAMESPACE, TYPE, SUB_CLASS_OF, XML_NODE, XML_ATTRIBUTE,
    HAS_CHILD, HAS_ATTRIBUTE, HAS_NAME, HAS_VALUE,
)
from xml2rdf.walker import TreeWalker

NS = "https://example.org/data"


def make_walker(sink, strict=False):
    return TreeWalker(sink, IdentityAssignor(NS, random.Random(3)), strict=strict)


def predicates(sink):
    return [p for _, p, _ in sink.triples]


def test_lone_root_emits_three_triples(recording_sink):
    walker = make_walker(recording_sink)
    walker.walk([StartElement("root"), EndElement("root")])

    assert len(recording_sink.triples) == 3
    (s1, p1, o1), (s2, p2, o2), (s3, p3, o3) = recording_sink.triples
    assert s1 == s2 == s3
    assert (p1, o1) == (TYPE, Literal(MODEL_NAMESPACE + "root"))
    assert (p2, o2) == (HAS_NAME, Literal("root"))
    assert (p3, o3) == (SUB_CLASS_OF, XML_NODE)
    assert walker.stack == [] and walker.subject is None


def test_child_is_linked_from_parent(recording_sink):
    walker = make_walker(recording_sink)
    walker.walk([
        StartElement("a"), StartElement("b"), EndElement("b"), EndElement("a"),
    ])
    assert len(recording_sink.triples) == 7
    root_id = recording_sink.triples[0][0]
    parent, pred, child = recording_sink.triples[3]
    assert (parent, pred) == (root_id, HAS_CHILD)
    assert (child, TYPE, Literal(MODEL_NAMESPACE + "a.b")) in recording_sink.triples


def test_attribute_triples(recording_sink):
    walker = make_walker(recording_sink)
    walker.walk([StartElement("a", [("id", "7")]), EndElement("a")])

    assert predicates(recording_sink) == [
        TYPE, HAS_NAME, SUB_CLASS_OF, HAS_ATTRIBUTE, TYPE, SUB_CLASS_OF, HAS_VALUE,
    ]
    element = recording_sink.triples[0][0]
    _, _, attr = recording_sink.triples[3]
    assert recording_sink.triples[3] == (element, HAS_ATTRIBUTE, attr)
    assert recording_sink.triples[4] == (attr, TYPE, URIRef(MODEL_NAMESPACE + "a.-id"))
    assert recording_sink.triples[5] == (attr, SUB_CLASS_OF, XML_ATTRIBUTE)
    assert recording_sink.triples[6] == (attr, HAS_VALUE, Literal("7"))


def test_attributes_follow_source_order(recording_sink):
    walker = make_walker(recording_sink)
    walker.walk([StartElement("a", [("z", "1"), ("b", "2")]), EndElement("a")])
    types = [o for _, p, o in recording_sink.triples if p == TYPE and isinstance(o, URIRef)]
    assert types == [URIRef(MODEL_NAMESPACE + "a.-z"), URIRef(MODEL_NAMESPACE + "a.-b")]


def test_empty_attribute_value_is_skipped_with_warning(recording_sink, caplog):
    walker = make_walker(recording_sink)
    with caplog.at_level(logging.WARNING, logger="xml2rdf.walker"):
        walker.walk([StartElement("a", [("flag", "")]), EndElement("a")])

    assert len(recording_sink.triples) == 6
    assert HAS_VALUE not in predicates(recording_sink)
    assert walker.stats.empty_attributes == 1
    assert "flag" in caplog.text


@pytest.mark.parametrize("values,expected", [
    (["1", "2", "3"], 3 + 4 * 3),
    (["1", "", "3"], 3 + 4 * 3 - 1),
    (["", "", ""], 3 + 3 * 3),
])
def test_attribute_counts(recording_sink, values, expected):
    walker = make_walker(recording_sink)
    attrs = [(f"a{i}", v) for i, v in enumerate(values)]
    walker.walk([StartElement("e", attrs), EndElement("e")])
    assert len(recording_sink.triples) == expected


def test_text_is_trimmed(recording_sink):
    walker = make_walker(recording_sink)
    walker.walk([StartElement("a"), Characters("  hello world \n"), EndElement("a")])
    assert recording_sink.triples[-1][1:] == (HAS_VALUE, Literal("hello world"))
    assert walker.stats.values == 1


def test_whitespace_only_text_emits_nothing(recording_sink):
    walker = make_walker(recording_sink)
    walker.walk([StartElement("a"), Characters(" \n\t "), EndElement("a")])
    assert len(recording_sink.triples) == 3


def test_text_after_closing_tag_is_dropped(recording_sink):
    walker = make_walker(recording_sink)
    walker.walk([
        StartElement("a"),
        Characters("before"),
        StartElement("b"),
        EndElement("b"),
        Characters("after"),
        EndElement("a"),
    ])
    values = [o for _, p, o in recording_sink.triples if p == HAS_VALUE]
    assert values == [Literal("before")]


def test_ignored_events_emit_nothing(recording_sink):
    walker = make_walker(recording_sink)
    walker.walk([Ignored("comment", "x"), StartElement("a"), Ignored("pi", "y"), EndElement("a")])
    assert len(recording_sink.triples) == 3


def test_parse_error_stops_document(recording_sink, caplog):
    walker = make_walker(recording_sink)
    with caplog.at_level(logging.WARNING, logger="xml2rdf.walker"):
        walker.walk([StartElement("a"), ParseError("boom"), StartElement("b")])
    assert len(recording_sink.triples) == 3
    assert walker.stats.parse_errors == 1
    assert "boom" in caplog.text


def test_parse_error_raises_in_strict_mode(recording_sink):
    walker = make_walker(recording_sink, strict=True)
    with pytest.raises(MalformedXmlError):
        walker.walk([StartElement("a"), ParseError("boom")])
    # triples emitted before the failure stay in the sink
    assert len(recording_sink.triples) == 3


def test_reset_clears_document_state(recording_sink):
    walker = make_walker(recording_sink)
    walker.handle(StartElement("a"))
    walker.reset()
    walker.walk([StartElement("b"), EndElement("b")])
    assert HAS_CHILD not in predicates(recording_sink)
    assert walker.stats.elements == 2


def test_sink_failure_propagates(recording_sink):
    class Broken(type(recording_sink)):
        def add_triple(self, subject, predicate, obj):
            if len(self.triples) == 2:
                raise OSError("disk full")
            super().add_triple(subject, predicate, obj)

    sink = Broken()
    walker = make_walker(sink)
    with pytest.raises(OSError):
        walker.walk([StartElement("a"), EndElement("a")])
    assert len(sink.triples) == 2


def test_deep_nesting_does_not_recurse(recording_sink):
    depth = 2000
    events = [StartElement("n") for _ in range(depth)] + [EndElement("n") for _ in range(depth)]
    walker = make_walker(recording_sink)
    walker.walk(events)
    assert walker.stats.elements == depth
    assert predicates(recording_sink).count(HAS_CHILD) == depth - 1
