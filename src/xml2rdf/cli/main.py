#!/usr/bin/env python3
"""
Main CLI entry point for xml2rdf.

This module defines the main CLI group and registers the subcommands.
"""

from typing import Optional
import click

from .convert import convert_cmd


@click.group()
@click.version_option(version="0.1.0", prog_name="xml2rdf")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to configuration file"
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output"
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Suppress output except errors"
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], verbose: bool, quiet: bool):
    """
    xml2rdf - converts XML data into RDF format.
    """
    ctx.ensure_object(dict)

    ctx.obj["config"] = config
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    if quiet:
        ctx.obj["log_level"] = "ERROR"
    elif verbose:
        ctx.obj["log_level"] = "DEBUG"
    else:
        ctx.obj["log_level"] = None


cli.add_command(convert_cmd)


if __name__ == "__main__":
    cli()
