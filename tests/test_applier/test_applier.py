"""Tests for CascadeApplier against an in-memory host."""

from __future__ import annotations

from dataclasses import dataclass, field

from cas.applier import CascadeApplier
from cas.errors import CasError, InvalidAttributeError, InvalidSelectorError
from cas.host.base import extract_doctype
from cas.model import Declaration, DeclarationList, Selector
from cas.parser import parse_cas


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@dataclass
class FakeElement:
    tag: str
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class FakeDocument:
    elements: list[FakeElement]


class FakeHost:
    """Matches ``tag``, ``#id`` and ``.class`` against a flat element list."""

    def __init__(self, *elements: FakeElement) -> None:
        self.elements = list(elements)
        self.queries: list[str] = []

    def extract_doctype(self, html: str) -> str:
        return extract_doctype(html)

    def parse_fragment(self, html: str) -> FakeDocument:
        return FakeDocument(self.elements)

    def query_all(self, document: FakeDocument, selector: str) -> list[FakeElement]:
        self.queries.append(selector)
        if selector.startswith("!"):
            raise InvalidSelectorError(selector)
        if selector.startswith("#"):
            return [e for e in document.elements if e.attrs.get("id") == selector[1:]]
        if selector.startswith("."):
            return [
                e for e in document.elements
                if selector[1:] in e.attrs.get("class", "").split()
            ]
        return [e for e in document.elements if e.tag == selector]

    def set_attribute(self, element: FakeElement, name: str, value: str) -> None:
        if " " in name:
            raise InvalidAttributeError(name)
        element.attrs[name] = value

    def serialize(self, document: FakeDocument) -> str:
        parts = []
        for e in document.elements:
            attrs = "".join(f' {k}="{v}"' for k, v in e.attrs.items())
            parts.append(f"<{e.tag}{attrs}></{e.tag}>")
        return "".join(parts)


def _applier(host: FakeHost) -> tuple[CascadeApplier, list[CasError]]:
    errors: list[CasError] = []
    return CascadeApplier(host, errors.append), errors


# ---------------------------------------------------------------------------
# Cascade
# ---------------------------------------------------------------------------


class TestCascade:
    def test_higher_specificity_wins_regardless_of_source_order(self):
        link = FakeElement("a", {"id": "id"})
        applier, errors = _applier(FakeHost(link))
        applier.apply(parse_cas("#id { x: 2; } a { x: 1; }"), "<a id='id'></a>")
        assert link.attrs["x"] == "2"
        assert errors == []

    def test_later_rule_wins_on_tie(self):
        link = FakeElement("a")
        applier, _ = _applier(FakeHost(link))
        applier.apply(parse_cas("a { x: 1; } a { x: 2; }"), "")
        assert link.attrs["x"] == "2"

    def test_unmatched_elements_untouched(self):
        link, para = FakeElement("a"), FakeElement("p")
        applier, _ = _applier(FakeHost(link, para))
        applier.apply(parse_cas("a { target: _blank; }"), "")
        assert para.attrs == {}

    def test_processes_list_in_given_order(self):
        link = FakeElement("a", {"id": "x"})
        dl = DeclarationList(
            [
                Declaration(Selector("#x"), {"v": "id"}),
                Declaration(Selector("a"), {"v": "tag"}),
            ]
        )
        applier, _ = _applier(FakeHost(link))
        applier.apply(dl, "")
        assert link.attrs["v"] == "tag"

    def test_doctype_prepended(self):
        applier, _ = _applier(FakeHost(FakeElement("a")))
        html = applier.apply(parse_cas("a { x: 1 }"), "<!DOCTYPE html>\n<a></a>")
        assert html == '<!DOCTYPE html><a x="1"></a>'

    def test_default_doctype(self):
        applier, _ = _applier(FakeHost(FakeElement("a")))
        assert applier.apply(DeclarationList(), "<a></a>") == "<!doctype html><a></a>"


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


class TestErrors:
    def test_invalid_selector_skipped_and_reported(self):
        link = FakeElement("a")
        host = FakeHost(link)
        applier, errors = _applier(host)
        applier.apply(parse_cas("!! { x: 1; } a { y: 2; }"), "")
        assert host.queries == ["!!", "a"]
        assert len(errors) == 1
        assert isinstance(errors[0], InvalidSelectorError)
        assert errors[0].selector == "!!"
        assert link.attrs == {"y": "2"}

    def test_invalid_attribute_reported_others_applied(self):
        link = FakeElement("a")
        applier, errors = _applier(FakeHost(link))
        applier.apply(parse_cas("a { bad name: 1; ok: 2; }"), "")
        assert [type(e) for e in errors] == [InvalidAttributeError]
        assert link.attrs == {"ok": "2"}
