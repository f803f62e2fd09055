"""Declaration: one selector and the attributes it assigns."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from cas.model.selector import Selector


@dataclass
class Declaration:
    """A single rule pairing a selector with attribute assignments.

    Property names are unique; writing an existing name overwrites its value.
    """

    selector: Selector
    properties: dict[str, str] = field(default_factory=dict)

    def add(self, name: str | Mapping[str, str], value: str | None = None) -> None:
        """Set one property, or merge a mapping of properties.

        ``add("href", "/x")`` sets a single property.  ``add({"a": "1"})``
        merges every key.  Passing a mapping together with a value is
        ambiguous and raises :class:`TypeError`.
        """
        if isinstance(name, Mapping):
            if value is not None:
                raise TypeError("add() takes either a mapping or a name and value, not both")
            for key, val in name.items():
                self.properties[key] = val
            return
        if value is None:
            raise TypeError(f"add() missing a value for property {name!r}")
        self.properties[name] = value

    def remove(self, names: str | Iterable[str]) -> None:
        """Delete each named property; names that are not present are ignored."""
        if isinstance(names, str):
            names = [names]
        for name in names:
            self.properties.pop(name, None)

    def remove_all(self) -> None:
        self.properties.clear()

    def to_cas(self) -> str:
        """Render the declaration back to CAS source text."""
        body = " ".join(f"{name}: {value};" for name, value in self.properties.items())
        if not body:
            return f"{self.selector.text} {{}}"
        return f"{self.selector.text} {{ {body} }}"
