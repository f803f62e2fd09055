"""Cascading Attribute Sheets: CSS-style cascades for HTML attributes."""

__version__ = "0.1.0"

from cas.compiler import Compiler, compile, parse  # noqa: E402, A004
from cas.config import CompilerConfig  # noqa: E402
from cas.errors import (  # noqa: E402
    CasError,
    EmptyInputError,
    InvalidAttributeError,
    InvalidErrorHandlerError,
    InvalidSelectorError,
)
from cas.model import Declaration, DeclarationList, Selector  # noqa: E402
from cas.specificity import SpecificityMode, calculate, calculate_tuple  # noqa: E402

__all__ = [
    "__version__",
    "Compiler",
    "CompilerConfig",
    "compile",
    "parse",
    # model
    "Selector",
    "Declaration",
    "DeclarationList",
    # specificity
    "SpecificityMode",
    "calculate",
    "calculate_tuple",
    # errors
    "CasError",
    "EmptyInputError",
    "InvalidAttributeError",
    "InvalidErrorHandlerError",
    "InvalidSelectorError",
]
