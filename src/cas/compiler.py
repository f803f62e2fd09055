"""Compiler: the public entry point tying parser, cascade and error hook together.

All failures stop here.  They are logged on the ``cas`` logger and handed to
the compiler's error handler, and callers always get a result back::

    compiler = Compiler()
    compiler.onerror(lambda err: print("cas:", err))
    html = compiler.compile("a { target: _blank; }", "<a href='/'>home</a>")
"""

from __future__ import annotations

import logging
from typing import Callable

from cas.applier import CascadeApplier
from cas.config import CompilerConfig
from cas.errors import CasError, InvalidErrorHandlerError
from cas.host.base import HtmlHost
from cas.model.declaration_list import DeclarationList
from cas.parser import parse_cas

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[CasError], object]


class Compiler:
    """Parses CAS and applies it to HTML, routing errors to one handler.

    The handler is per-instance state.  Separate compilers never share it;
    one compiler used from several threads must guard :meth:`onerror`.
    """

    def __init__(
        self,
        config: CompilerConfig | None = None,
        *,
        host: HtmlHost | None = None,
        onerror: ErrorHandler | None = None,
    ) -> None:
        self.config = config or CompilerConfig()
        self.host = host if host is not None else self.config.host_factory()
        self._handler: ErrorHandler | None = None
        if onerror is not None:
            self.onerror(onerror)

    @property
    def handler(self) -> ErrorHandler | None:
        return self._handler

    def onerror(self, handler: ErrorHandler) -> None:
        """Install *handler*; a non-callable is reported and the old one kept."""
        if not callable(handler):
            self.report(InvalidErrorHandlerError(handler))
            return
        self._handler = handler

    def report(self, error: CasError) -> None:
        logger.error("%s: %s", type(error).__name__, error)
        if self._handler is not None:
            self._handler(error)

    def parse(self, source: str | None) -> DeclarationList | None:
        """Parse *source*; returns ``None`` (after reporting) when it is empty."""
        try:
            return parse_cas(source, mode=self.config.specificity)
        except CasError as exc:
            self.report(exc)
            return None

    def apply(self, declarations: DeclarationList, html: str) -> str:
        return CascadeApplier(self.host, self.report).apply(declarations, html)

    def compile(self, source: str | None, html: str) -> str:
        """Parse *source* and apply it to *html*.

        If the sheet cannot be parsed, *html* is returned unchanged.
        """
        declarations = self.parse(source)
        if declarations is None:
            return html
        return self.apply(declarations, html)


def parse(source: str | None, onerror: ErrorHandler | None = None) -> DeclarationList | None:
    return Compiler(onerror=onerror).parse(source)


def compile(  # noqa: A001
    source: str | None, html: str, onerror: ErrorHandler | None = None
) -> str:
    return Compiler(onerror=onerror).compile(source, html)
