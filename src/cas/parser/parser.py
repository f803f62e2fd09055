"""Parser: CAS source text to a sorted DeclarationList."""

from __future__ import annotations

import logging

from cas.errors import EmptyInputError
from cas.model.declaration import Declaration
from cas.model.declaration_list import DeclarationList
from cas.model.selector import Selector
from cas.parser.tokenizer import tokenize
from cas.specificity import SpecificityMode

__all__ = ["parse_cas"]

logger = logging.getLogger(__name__)


def parse_cas(
    source: str | None, *, mode: SpecificityMode = SpecificityMode.LEGACY
) -> DeclarationList:
    """Parse CAS *source* into declarations sorted by ascending specificity.

    Raises :class:`EmptyInputError` if *source* is empty or ``None``.
    Malformed blocks never raise: a block without ``{`` yields a declaration
    with no properties, a property without ``:`` gets an empty value, and a
    block whose selector is blank is skipped.
    """
    if not source:
        raise EmptyInputError()

    declarations = DeclarationList()
    for block in tokenize(source):
        if not block.selector:
            logger.debug("Skipping block with empty selector: %r", block.properties)
            continue
        declaration = Declaration(Selector(block.selector, mode))
        for name, value in block.properties:
            declaration.add(name, value)
        declarations.add(declaration)

    logger.debug("Parsed %d declaration(s)", len(declarations))
    return declarations.sort()
