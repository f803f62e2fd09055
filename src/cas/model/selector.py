"""Selector: selector text plus its cached specificity."""

from __future__ import annotations

from cas.specificity import SpecificityMode, specificity_for


class Selector:
    """A selector string with eagerly computed specificity.

    The specificity is recomputed whenever ``text`` is reassigned, so the
    two never drift apart.
    """

    __slots__ = ("_text", "_mode", "_specificity")

    def __init__(self, text: str, mode: SpecificityMode = SpecificityMode.LEGACY) -> None:
        self._mode = mode
        self.text = text

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        stripped = value.strip()
        if not stripped:
            raise ValueError("Selector text must not be empty")
        self._text = stripped
        self._specificity = specificity_for(stripped, self._mode)

    @property
    def mode(self) -> SpecificityMode:
        return self._mode

    @property
    def specificity(self) -> int | tuple[int, int, int]:
        return self._specificity

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Selector):
            return NotImplemented
        return self._text == other._text and self._mode is other._mode

    def __hash__(self) -> int:
        return hash((self._text, self._mode))

    def __repr__(self) -> str:
        return f"Selector({self._text!r}, specificity={self._specificity!r})"

    def __str__(self) -> str:
        return self._text
