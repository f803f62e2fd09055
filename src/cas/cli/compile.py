"""CLI command: cas compile -- apply a CAS sheet to an HTML file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cas.compiler import Compiler
from cas.config import CompilerConfig
from cas.errors import CasError, EmptyInputError
from cas.specificity import SpecificityMode


@click.command(name="compile")
@click.argument("sheet", type=click.Path(exists=True, dir_okay=False))
@click.argument("html", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the result here instead of stdout.",
)
@click.option(
    "--specificity",
    type=click.Choice([m.value for m in SpecificityMode]),
    default=SpecificityMode.LEGACY.value,
    show_default=True,
    help="Specificity scheme used to order declarations.",
)
def compile_cmd(sheet: str, html: str, output: str | None, specificity: str) -> None:
    """Apply the declarations in SHEET to the elements of HTML.

    Errors (invalid selectors, unsettable attributes) are printed to stderr
    and the remaining declarations still apply.  Exits with code 1 if SHEET
    is empty.
    """
    errors: list[CasError] = []

    def on_error(error: CasError) -> None:
        errors.append(error)
        click.echo(f"Error: {error}", err=True)

    compiler = Compiler(
        CompilerConfig(specificity=SpecificityMode(specificity)), onerror=on_error
    )
    result = compiler.compile(
        Path(sheet).read_text(encoding="utf-8"),
        Path(html).read_text(encoding="utf-8"),
    )

    if any(isinstance(e, EmptyInputError) for e in errors):
        sys.exit(1)

    if output:
        Path(output).write_text(result, encoding="utf-8")
    else:
        click.echo(result)
