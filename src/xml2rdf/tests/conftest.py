"""
Pytest fixtures for xml2rdf tests.
"""

import random
from pathlib import Path

import pytest

from xml2rdf.sink.base import TripleSink

RESOURCES = Path(__file__).parent / "resources"

# people.xml: 7 elements, 5 attributes (one empty), 3 text values
PEOPLE_TRIPLES = 49


def get_test_data_path(name: str) -> Path:
    """Get path to a test resource."""
    path = RESOURCES / name
    if not path.exists():
        raise FileNotFoundError(f"Test data path {path} does not exist")
    return path


class RecordingSink(TripleSink):
    """Keeps every triple in emission order, duplicates included."""

    def __init__(self):
        self.triples = []

    def add_triple(self, subject, predicate, obj):
        self.triples.append((subject, predicate, obj))


@pytest.fixture
def people_xml() -> Path:
    return get_test_data_path("people.xml")


@pytest.fixture
def broken_xml() -> Path:
    return get_test_data_path("broken.xml")


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1815)


@pytest.fixture
def write_xml(tmp_path):
    """Write an XML snippet to a temporary file and return its path."""
    counter = {"n": 0}

    def _write(content: str) -> Path:
        counter["n"] += 1
        path = tmp_path / f"doc{counter['n']}.xml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
