"""CAS CLI entry point: Click group with subcommands."""

import logging

import click

from cas import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cas")
@click.option("-v", "--verbose", is_flag=True, help="Log parser and cascade details.")
def cli(verbose: bool) -> None:
    """CAS - apply Cascading Attribute Sheets to HTML documents."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from cas.cli.compile import compile_cmd  # noqa: E402
from cas.cli.inspect import inspect  # noqa: E402

cli.add_command(compile_cmd)
cli.add_command(inspect)
