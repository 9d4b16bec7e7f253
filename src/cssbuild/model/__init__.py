"""cssbuild model layer -- public type re-exports."""

from cssbuild.model.part import Combinator, PartKind
from cssbuild.model.shape import Circle, Rectangle

__all__ = [
    # selector parts
    "PartKind",
    "Combinator",
    # shapes
    "Rectangle",
    "Circle",
]
