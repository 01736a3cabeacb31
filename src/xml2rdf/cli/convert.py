#!/usr/bin/env python3
"""
Convert command for the xml2rdf CLI.
"""

import logging
import sys
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from xml2rdf.common import setup_logging, Xml2RdfError
from xml2rdf.config import load_config
from xml2rdf.convert import parse_xml
from xml2rdf.sink import create_sink
from xml2rdf.walker import ConversionStats

# stdout may carry the triples, so everything human-readable goes to stderr
console = Console(stderr=True)


def show_stats(stats: ConversionStats):
    table = Table(title="Conversion Summary")
    table.add_column("Item", style="cyan")
    table.add_column("Count", style="green", justify="right")

    table.add_row("Documents", str(stats.documents))
    table.add_row("Elements", str(stats.elements))
    table.add_row("Attributes", str(stats.attributes))
    table.add_row("Empty attribute values", str(stats.empty_attributes))
    table.add_row("Text values", str(stats.values))
    table.add_row("Parse errors", str(stats.parse_errors))
    table.add_row("Triples", str(stats.triples))

    console.print(table)


@click.command(name="convert")
@click.option(
    "--namespace",
    "-n",
    type=str,
    help="Namespace for RDF graph generation (default: https://decisym.ai/xml2rdf/data)"
)
@click.option(
    "--xml",
    "-x",
    "xml_files",
    multiple=True,
    required=True,
    type=click.Path(),
    help="Path to an input XML file; further paths may follow"
)
@click.argument("more_xml", nargs=-1, type=click.Path())
@click.option(
    "--output-file",
    "-o",
    type=click.Path(dir_okay=False),
    help="N-Triples file to append to (default: stdout)"
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on malformed XML instead of skipping the rest of the document"
)
@click.pass_context
def convert_cmd(
    ctx: click.Context,
    namespace: Optional[str],
    xml_files: Tuple[str, ...],
    more_xml: Tuple[str, ...],
    output_file: Optional[str],
    strict: bool,
):
    """
    Convert XML to RDF format.

    Each element, attribute and text value becomes a node linked by the
    xml2rdf model vocabulary. Output files are appended to, never truncated.
    """
    obj = ctx.obj or {}
    try:
        config = load_config(obj.get("config"))
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]✗ Invalid configuration:[/red] {escape(str(e))}")
        sys.exit(1)

    level = obj.get("log_level") or config.log_level
    setup_logging(getattr(logging, level.upper(), logging.WARNING), config.log_file)

    namespace = namespace or config.namespace
    output_file = output_file or config.output_file
    strict = strict or config.strict

    try:
        if output_file:
            sink = create_sink("file", file_path=output_file)
        else:
            sink = create_sink("stdout")
        with sink:
            stats = parse_xml(list(xml_files) + list(more_xml), sink, namespace, strict=strict)
    except Xml2RdfError as e:
        console.print(f"[red]✗ Conversion failed:[/red] {escape(str(e))}")
        sys.exit(1)

    if obj.get("quiet"):
        return
    if obj.get("verbose"):
        show_stats(stats)
    destination = output_file or "stdout"
    console.print(
        f"[green]✓ Wrote {stats.triples} triples from {stats.documents} document(s) to {destination}[/green]"
    )
