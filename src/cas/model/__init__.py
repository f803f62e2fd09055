"""CAS model layer -- public type re-exports."""

from cas.model.declaration import Declaration
from cas.model.declaration_list import DeclarationList
from cas.model.selector import Selector

__all__ = [
    "Selector",
    "Declaration",
    "DeclarationList",
]
