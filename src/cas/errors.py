"""Error hierarchy for Cascading Attribute Sheets."""

from __future__ import annotations


class CasError(Exception):
    """Base error for all cas errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class EmptyInputError(CasError):
    """The sheet handed to the parser was empty or missing."""

    def __init__(self, message: str = "CAS input is empty", **kwargs) -> None:
        super().__init__(message, **kwargs)


class InvalidErrorHandlerError(CasError):
    """A non-callable object was offered as the error handler."""

    def __init__(self, handler: object) -> None:
        super().__init__(f"Error handler must be callable, got {type(handler).__name__}")
        self.handler = handler


class InvalidSelectorError(CasError):
    """The host selector engine could not compile a selector."""

    def __init__(self, selector: str, *, cause: Exception | None = None) -> None:
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Invalid selector {selector!r}{detail}", cause=cause)
        self.selector = selector


class InvalidAttributeError(CasError):
    """The host refused to set an attribute (for example a malformed name)."""

    def __init__(self, name: str, *, cause: Exception | None = None) -> None:
        super().__init__(f"Cannot set attribute {name!r}", cause=cause)
        self.name = name
