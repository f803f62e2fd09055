"""CLI command: cas inspect -- show the declarations of a sheet in cascade order."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cas.compiler import Compiler
from cas.config import CompilerConfig
from cas.specificity import SpecificityMode


@click.command()
@click.argument("sheet", type=click.Path(exists=True, dir_okay=False))
@click.option("--reverse", is_flag=True, help="Highest specificity first.")
@click.option(
    "--specificity",
    type=click.Choice([m.value for m in SpecificityMode]),
    default=SpecificityMode.LEGACY.value,
    show_default=True,
)
def inspect(sheet: str, reverse: bool, specificity: str) -> None:
    """Parse SHEET and list its declarations with their specificity."""
    compiler = Compiler(
        CompilerConfig(specificity=SpecificityMode(specificity)),
        onerror=lambda err: click.echo(f"Error: {err}", err=True),
    )
    declarations = compiler.parse(Path(sheet).read_text(encoding="utf-8"))
    if declarations is None:
        sys.exit(1)

    if reverse:
        declarations.sort(reverse=True)

    click.echo(f"Declarations: {len(declarations)}")
    for declaration in declarations:
        click.echo(f"  [{declaration.selector.specificity}]  {declaration.to_cas()}")
