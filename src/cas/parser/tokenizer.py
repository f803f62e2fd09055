"""State-machine tokenizer for CAS source.

Syntax example:
    a { target: _blank; }
    a.external { rel: noopener noreferrer; }
    #home { href: https://example.com/?q={x}; }

Rules the tokenizer follows:

* Only the first ``/* ... */`` comment is removed.
* ``}`` always closes a block.  A whitespace-only block at the very end of
  the input is dropped, interior ones are kept (with an empty selector).
* The first ``{`` of a block opens its properties; later ``{`` characters
  are ordinary text.
* ``;`` closes a property.  The first ``:`` of a property separates its name
  from its value; later colons are part of the value.
* Empty property entries are dropped wherever they occur, not only after a
  final ``;``, so no attribute is ever given an empty name.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

__all__ = ["RawBlock", "State", "Tokenizer", "strip_first_comment", "tokenize"]

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)


class State(Enum):
    BEFORE_SELECTOR = "before_selector"
    IN_SELECTOR = "in_selector"
    IN_PROPERTIES = "in_properties"
    IN_VALUE = "in_value"


@dataclass(frozen=True)
class RawBlock:
    """One ``selector { properties }`` block with trimmed, unvalidated text."""

    selector: str
    properties: tuple[tuple[str, str], ...] = ()


def strip_first_comment(text: str) -> str:
    return _COMMENT_RE.sub("", text, count=1)


class Tokenizer:
    """Walks CAS text one character at a time and collects raw blocks."""

    def __init__(self, source: str) -> None:
        self._source = strip_first_comment(source)
        self._reset()
        self._blocks: list[RawBlock] = []

    def _reset(self) -> None:
        self.state = State.BEFORE_SELECTOR
        self._selector: list[str] = []
        self._name: list[str] = []
        self._value: list[str] = []
        self._properties: list[tuple[str, str]] = []

    def tokenize(self) -> list[RawBlock]:
        for ch in self._source:
            handler = _HANDLERS[self.state]
            handler(self, ch)

        if self.state in (State.IN_PROPERTIES, State.IN_VALUE):
            self._end_property()
            self._end_block()
        elif self.state is State.IN_SELECTOR:
            self._end_block()
        # BEFORE_SELECTOR at the end means a trailing whitespace-only block.
        return self._blocks

    # --- per-state handlers --------------------------------------------------

    def _before_selector(self, ch: str) -> None:
        if ch == "}":
            self._end_block()
        elif ch == "{":
            self.state = State.IN_PROPERTIES
        elif not ch.isspace():
            self._selector.append(ch)
            self.state = State.IN_SELECTOR

    def _in_selector(self, ch: str) -> None:
        if ch == "{":
            self.state = State.IN_PROPERTIES
        elif ch == "}":
            self._end_block()
        else:
            self._selector.append(ch)

    def _in_properties(self, ch: str) -> None:
        if ch == ":":
            self.state = State.IN_VALUE
        elif ch == ";":
            self._end_property()
        elif ch == "}":
            self._end_property()
            self._end_block()
        else:
            self._name.append(ch)

    def _in_value(self, ch: str) -> None:
        if ch == ";":
            self._end_property()
            self.state = State.IN_PROPERTIES
        elif ch == "}":
            self._end_property()
            self._end_block()
        else:
            self._value.append(ch)

    # --- emitters --------------------------------------------------------------

    def _end_property(self) -> None:
        name = "".join(self._name).strip()
        value = "".join(self._value).strip()
        self._name = []
        self._value = []
        if name:
            self._properties.append((name, value))

    def _end_block(self) -> None:
        selector = "".join(self._selector).strip()
        self._blocks.append(RawBlock(selector=selector, properties=tuple(self._properties)))
        self._reset()


_HANDLERS = {
    State.BEFORE_SELECTOR: Tokenizer._before_selector,
    State.IN_SELECTOR: Tokenizer._in_selector,
    State.IN_PROPERTIES: Tokenizer._in_properties,
    State.IN_VALUE: Tokenizer._in_value,
}


def tokenize(source: str) -> list[RawBlock]:
    """Split CAS *source* into raw blocks in source order."""
    return Tokenizer(source).tokenize()
