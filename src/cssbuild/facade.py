"""Entry points: each starts a fresh builder with a single operation applied.

    >>> from cssbuild import facade as css
    >>> css.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    'a[href$=".png"]:focus'
"""

from __future__ import annotations

from cssbuild.builder import SelectorBuilder
from cssbuild.model.part import Combinator

__all__ = [
    "element",
    "id",
    "class_part",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]


def element(value: str) -> SelectorBuilder:
    return SelectorBuilder().element(value)


def id(value: str) -> SelectorBuilder:  # noqa: A001
    return SelectorBuilder().id(value)


def class_part(value: str) -> SelectorBuilder:
    return SelectorBuilder().class_part(value)


def attr(value: str) -> SelectorBuilder:
    return SelectorBuilder().attr(value)


def pseudo_class(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_element(value)


def combine(
    left: SelectorBuilder, combinator: str | Combinator, right: SelectorBuilder
) -> SelectorBuilder:
    """Combine two selectors into a new builder; the operands are untouched."""
    return SelectorBuilder().combine(left, combinator, right)
