"""Tests for the Declaration model."""

import pytest

from cas.model import Declaration, Selector


def _decl(**props: str) -> Declaration:
    return Declaration(Selector("a"), dict(props))


class TestAdd:
    def test_add_single(self):
        d = _decl()
        d.add("target", "_blank")
        assert d.properties == {"target": "_blank"}

    def test_add_overwrites(self):
        d = _decl(target="_self")
        d.add("target", "_blank")
        assert d.properties == {"target": "_blank"}

    def test_add_mapping_merges(self):
        d = _decl(rel="nofollow")
        d.add({"target": "_blank", "rel": "noopener"})
        assert d.properties == {"rel": "noopener", "target": "_blank"}

    def test_mapping_and_value_is_an_error(self):
        d = _decl()
        with pytest.raises(TypeError):
            d.add({"target": "_blank"}, "x")
        assert d.properties == {}

    def test_name_without_value_is_an_error(self):
        with pytest.raises(TypeError):
            _decl().add("target")

    def test_empty_properties_valid(self):
        assert Declaration(Selector("a")).properties == {}


class TestRemove:
    def test_remove_one(self):
        d = _decl(a="1", b="2")
        d.remove("a")
        assert d.properties == {"b": "2"}

    def test_remove_many_ignores_missing(self):
        d = _decl(a="1", b="2", c="3")
        d.remove(["a", "c", "missing"])
        assert d.properties == {"b": "2"}

    def test_remove_all_keeps_selector(self):
        d = _decl(a="1", b="2")
        d.remove_all()
        assert d.properties == {}
        assert d.selector == Selector("a")


class TestToCas:
    def test_renders_properties(self):
        d = _decl(href="http://x.com", rel="noopener")
        assert d.to_cas() == "a { href: http://x.com; rel: noopener; }"

    def test_renders_empty(self):
        assert Declaration(Selector("#x")).to_cas() == "#x {}"
