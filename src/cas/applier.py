"""Cascade application: writes sorted declarations onto an HTML document."""

from __future__ import annotations

import logging
from typing import Callable

from cas.errors import CasError, InvalidAttributeError, InvalidSelectorError
from cas.host.base import HtmlHost
from cas.model.declaration_list import DeclarationList

logger = logging.getLogger(__name__)

Reporter = Callable[[CasError], None]


class CascadeApplier:
    """Apply a :class:`DeclarationList` to HTML through an :class:`HtmlHost`.

    Declarations are processed front to back and later writes overwrite
    earlier ones, so a list sorted by ascending specificity lets the more
    specific (or later, on ties) declaration win.  A declaration whose
    selector the host rejects is reported and skipped; the rest still apply.
    """

    def __init__(self, host: HtmlHost, report: Reporter) -> None:
        self._host = host
        self._report = report

    def apply(self, declarations: DeclarationList, html: str) -> str:
        doctype = self._host.extract_doctype(html)
        document = self._host.parse_fragment(html)

        for declaration in declarations.all():
            selector = declaration.selector.text
            try:
                elements = self._host.query_all(document, selector)
            except InvalidSelectorError as exc:
                self._report(exc)
                continue

            logger.debug("%s matched %d element(s)", selector, len(elements))
            for element in elements:
                for name, value in declaration.properties.items():
                    try:
                        self._host.set_attribute(element, name, value)
                    except InvalidAttributeError as exc:
                        self._report(exc)

        return doctype + self._host.serialize(document)
