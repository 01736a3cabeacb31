"""
xml2rdf Command Line Interface

Converts XML documents into RDF triples from the shell.
"""

from .main import cli

__all__ = ["cli"]
