"""Protocol for the HTML capability the cascade is applied through."""

from __future__ import annotations

import re
from typing import Any, Protocol, Sequence

DEFAULT_DOCTYPE = "<!doctype html>"

_DOCTYPE_RE = re.compile(r"^\s*(?:<\?xml[^>]*\?>\s*)?(<!doctype[^>]*>)", re.IGNORECASE)


def extract_doctype(html: str) -> str:
    """Return the literal leading ``<!doctype ...>`` of *html*, or the HTML5 one."""
    match = _DOCTYPE_RE.match(html)
    if match:
        return match.group(1)
    return DEFAULT_DOCTYPE


class HtmlHost(Protocol):
    """Parses, queries, mutates and serializes an HTML document.

    ``query_all`` must raise :class:`cas.errors.InvalidSelectorError` for
    selector text it cannot compile; ``set_attribute`` may raise
    :class:`cas.errors.InvalidAttributeError` for names the document
    cannot hold.  Nothing else is expected to raise.
    """

    def extract_doctype(self, html: str) -> str: ...

    def parse_fragment(self, html: str) -> Any: ...

    def query_all(self, document: Any, selector: str) -> Sequence[Any]: ...

    def set_attribute(self, element: Any, name: str, value: str) -> None: ...

    def serialize(self, document: Any) -> str: ...
