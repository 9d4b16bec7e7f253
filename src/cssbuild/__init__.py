"""cssbuild: fluent builder for CSS selectors."""

from cssbuild.builder import SelectorBuilder
from cssbuild.errors import (
    CssBuildError,
    DecodeError,
    DuplicateError,
    OrderError,
    SelectorValidationError,
)
from cssbuild.facade import (
    attr,
    class_part,
    combine,
    element,
    id,
    pseudo_class,
    pseudo_element,
)
from cssbuild.model.part import Combinator, PartKind

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # builder
    "SelectorBuilder",
    "PartKind",
    "Combinator",
    # facade
    "element",
    "id",
    "class_part",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    # errors
    "CssBuildError",
    "SelectorValidationError",
    "DuplicateError",
    "OrderError",
    "DecodeError",
]
