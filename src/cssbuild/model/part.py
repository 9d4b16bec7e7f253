"""Selector part kinds and combinators."""
from __future__ import annotations

from enum import IntEnum, StrEnum


class PartKind(IntEnum):
    """Kind of a compound selector part.

    The integer value is the position of the kind in the order parts must
    be written in: element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def repeatable(self) -> bool:
        return self in _REPEATABLE

    @property
    def label(self) -> str:
        """Lower-case, hyphenated name (``pseudo-class``)."""
        return self.name.lower().replace("_", "-")

    def render(self, value: str) -> str:
        """Return *value* wrapped in this kind's delimiters."""
        prefix, suffix = _DELIMITERS[self]
        return f"{prefix}{value}{suffix}"


_REPEATABLE = frozenset({PartKind.CLASS, PartKind.ATTRIBUTE, PartKind.PSEUDO_CLASS})

_DELIMITERS: dict[PartKind, tuple[str, str]] = {
    PartKind.ELEMENT: ("", ""),
    PartKind.ID: ("#", ""),
    PartKind.CLASS: (".", ""),
    PartKind.ATTRIBUTE: ("[", "]"),
    PartKind.PSEUDO_CLASS: (":", ""),
    PartKind.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(StrEnum):
    """The CSS combinators.

    ``combine`` accepts any string; these are the ones CSS defines.
    """

    DESCENDANT = " "
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"
