"""Error hierarchy for cssbuild."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuild.model.part import PartKind


class CssBuildError(Exception):
    """Base error for all cssbuild errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Selector validation errors
# ---------------------------------------------------------------------------


class SelectorValidationError(CssBuildError):
    """A selector part was rejected by the builder."""

    message = "Invalid selector part"

    def __init__(
        self,
        message: str | None = None,
        *,
        kind: PartKind | None = None,
        value: str | None = None,
    ) -> None:
        super().__init__(message or self.message)
        self.kind = kind
        self.value = value


class DuplicateError(SelectorValidationError):
    """An element, id or pseudo-element was added a second time."""

    message = (
        "Element, id and pseudo-element should not occur more then one time "
        "inside the selector"
    )


class OrderError(SelectorValidationError):
    """A part was added after a part that must come later."""

    message = (
        "Selector parts should be arranged in the following order: element, "
        "id, class, attribute, pseudo-class, pseudo-element"
    )


# ---------------------------------------------------------------------------
# Codec errors
# ---------------------------------------------------------------------------


class DecodeError(CssBuildError):
    """JSON text could not be decoded into the requested type."""
