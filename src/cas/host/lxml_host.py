"""Default HTML host: lxml for the tree, cssselect2 for selector matching."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import cssselect2
import lxml.html
from lxml import etree

from cas.errors import InvalidAttributeError, InvalidSelectorError
from cas.host.base import extract_doctype

logger = logging.getLogger(__name__)

# lxml refuses str input that carries an encoding declaration.
_XML_DECL_RE = re.compile(r"^\s*<\?xml[^>]*\?>", re.IGNORECASE)
_FULL_DOCUMENT_RE = re.compile(
    r"^\s*(?:<!--.*?-->\s*)*<(?:html|head|body|!doctype)", re.IGNORECASE | re.DOTALL
)


@dataclass
class LxmlDocument:
    """A parsed document.

    For a full document ``root`` is its ``<html>`` element.  For a fragment
    ``root`` is a ``<body>`` container the parser supplied; it is never
    matched and never serialized, only the fragment's own nodes are.
    """

    root: etree._Element
    fragment: bool


class LxmlHost:
    """:class:`~cas.host.base.HtmlHost` backed by ``lxml.html`` and ``cssselect2``.

    Selectors are matched against a fresh :class:`cssselect2.ElementWrapper`
    on every query, so attributes written by earlier declarations (``id``,
    ``class``, ...) are visible to later selectors.  Selectors with a
    pseudo-element never match.
    """

    def extract_doctype(self, html: str) -> str:
        return extract_doctype(html)

    def parse_fragment(self, html: str) -> LxmlDocument:
        html = _XML_DECL_RE.sub("", html, count=1)
        if not html.strip():
            return LxmlDocument(lxml.html.Element("body"), fragment=True)

        if _FULL_DOCUMENT_RE.match(html):
            try:
                return LxmlDocument(lxml.html.document_fromstring(html), fragment=False)
            except etree.ParserError as exc:
                # Only a doctype or comments, no elements.
                logger.debug("Document has no elements: %s", exc)
                return LxmlDocument(lxml.html.Element("body"), fragment=True)

        tree = lxml.html.document_fromstring(f"<html><body>{html}</body></html>")
        body = tree.find("body")
        if body is None:
            return LxmlDocument(tree, fragment=False)
        return LxmlDocument(body, fragment=True)

    def query_all(self, document: LxmlDocument, selector: str) -> list[etree._Element]:
        try:
            compiled = cssselect2.compile_selector_list(selector)
        except cssselect2.SelectorError as exc:
            raise InvalidSelectorError(selector, cause=exc) from exc

        compiled = [sel for sel in compiled if sel.pseudo_element is None]
        if not compiled:
            return []

        wrapper = cssselect2.ElementWrapper.from_html_root(document.root)
        return [
            element.etree_element
            for element in wrapper.iter_subtree()
            if not (document.fragment and element.etree_element is document.root)
            and any(sel.test(element) for sel in compiled)
        ]

    def set_attribute(self, element: etree._Element, name: str, value: str) -> None:
        try:
            element.set(name, value)
        except ValueError as exc:
            raise InvalidAttributeError(name, cause=exc) from exc

    def serialize(self, document: LxmlDocument) -> str:
        markup = lxml.html.tostring(document.root, encoding="unicode", with_tail=False)
        if not document.fragment:
            return markup
        # Drop the container's own start and end tags.
        return markup[markup.index(">") + 1 : markup.rindex("</")]
