"""Fluent builder for CSS compound and complex selectors.

A compound selector is written as::

    element#id.class[attr]:pseudo-class::pseudo-element

Parts must be added in that order. Element, id and pseudo-element may occur
once; class, attribute and pseudo-class may repeat. Builders are composed
with a combinator (``" "``, ``">"``, ``"+"``, ``"~"``) via :meth:`combine`.
"""

from __future__ import annotations

import logging

from cssbuild.errors import DuplicateError, OrderError
from cssbuild.model.part import Combinator, PartKind

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates selector parts and renders them to text.

    Validation state is the set of kinds already present plus the highest
    kind reached. A rejected part raises before anything is mutated.
    """

    def __init__(self) -> None:
        self._text = ""
        self._present: set[PartKind] = set()
        self._highest: PartKind | None = None

    # --- parts ----------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._add(PartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._add(PartKind.ID, value)

    def class_part(self, value: str) -> SelectorBuilder:
        return self._add(PartKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._add(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._add(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._add(PartKind.PSEUDO_ELEMENT, value)

    def add(self, kind: PartKind, value: str) -> SelectorBuilder:
        """Add a part of *kind*; same as calling the matching method.

        *kind* may also be the kind's integer position; an integer outside
        0-5 raises ``ValueError``.
        """
        return self._add(PartKind(kind), value)

    # --- composition ----------------------------------------------------------

    def combine(
        self,
        left: SelectorBuilder,
        combinator: str | Combinator,
        right: SelectorBuilder,
    ) -> SelectorBuilder:
        """Replace this builder's content with ``left combinator right``.

        The combinator is embedded as given, padded with one space on each
        side, so the descendant combinator yields three spaces. Operands are
        only read. Validation state is cleared, as on a fresh builder.
        """
        text = f"{left.stringify()} {combinator} {right.stringify()}"
        self._text = text
        self._present = set()
        self._highest = None
        logger.debug("Combined selector: %r", text)
        return self

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"SelectorBuilder({self._text!r})"

    @property
    def highest_kind(self) -> PartKind | None:
        """Highest-ordered kind added so far, or None for an empty compound."""
        return self._highest

    # --- validation -----------------------------------------------------------

    def _add(self, kind: PartKind, value: str) -> SelectorBuilder:
        if not kind.repeatable and kind in self._present:
            logger.debug("Rejected duplicate %s %r", kind.label, value)
            raise DuplicateError(kind=kind, value=value)
        if self._highest is not None and kind < self._highest:
            logger.debug(
                "Rejected %s %r after %s", kind.label, value, self._highest.label
            )
            raise OrderError(kind=kind, value=value)

        self._text += kind.render(value)
        self._present.add(kind)
        self._highest = kind
        logger.debug("Added %s %r", kind.label, value)
        return self
