"""DeclarationList: ordered declarations with a stable specificity sort."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from cas.model.declaration import Declaration


class DeclarationList:
    """Declarations in application order.

    Insertion order is kept until :meth:`sort` runs.  Sorting groups the
    declarations into buckets by specificity and concatenates the buckets in
    ascending order, so declarations that share a specificity stay in source
    order and the later one wins when applied front to back.
    """

    def __init__(self, declarations: Iterable[Declaration] | None = None) -> None:
        self._declarations: list[Declaration] = []
        if declarations is not None:
            self.add(declarations)

    def all(self) -> list[Declaration]:
        """Return a copy of the declarations in their current order."""
        return list(self._declarations)

    def add(self, declarations: Declaration | Iterable[Declaration]) -> None:
        """Append one declaration or a batch of them, keeping batch order."""
        if isinstance(declarations, Declaration):
            self._declarations.append(declarations)
            return
        batch = list(declarations)
        for item in batch:
            if not isinstance(item, Declaration):
                raise TypeError(f"add() expects Declaration objects, got {type(item).__name__}")
        self._declarations.extend(batch)

    def sort(self, reverse: bool = False) -> DeclarationList:
        """Order declarations by ascending specificity, in place.

        With *reverse* the ascending result is reversed as a whole: highest
        specificity comes first and declarations sharing a specificity also
        come out in reverse source order.
        """
        buckets: dict[object, list[Declaration]] = {}
        for declaration in self._declarations:
            buckets.setdefault(declaration.selector.specificity, []).append(declaration)

        ordered: list[Declaration] = []
        for key in sorted(buckets):
            ordered.extend(buckets[key])
        if reverse:
            ordered.reverse()

        self._declarations = ordered
        return self

    def __len__(self) -> int:
        return len(self._declarations)

    def __iter__(self) -> Iterator[Declaration]:
        return iter(list(self._declarations))

    def __repr__(self) -> str:
        return f"DeclarationList({self._declarations!r})"
