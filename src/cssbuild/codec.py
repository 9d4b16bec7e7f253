"""JSON encoding helpers and typed decoding into dataclasses."""

from __future__ import annotations

import json
from dataclasses import MISSING, asdict, fields, is_dataclass
from typing import Any, TypeVar

from cssbuild.errors import DecodeError

__all__ = ["to_json", "from_json"]

T = TypeVar("T")

_COMPACT = (",", ":")


def to_json(obj: Any, *, sort_keys: bool = False, indent: int | None = None) -> str:
    """Return the JSON text for *obj*.

    Output is compact unless *indent* is given. Dataclass instances are
    encoded as their field mapping at any depth.
    """
    separators = None if indent is not None else _COMPACT
    return json.dumps(
        obj,
        sort_keys=sort_keys,
        indent=indent,
        separators=separators,
        default=_encode_default,
    )


def _encode_default(obj: Any) -> Any:
    """Encode values json cannot handle natively."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def from_json(cls: type[T], text: str) -> T:
    """Decode *text* and build an instance of the dataclass *cls* from it.

    Keys that are not fields of *cls* are ignored. Raises :class:`DecodeError`
    for invalid JSON, a non-object payload, or missing required fields.
    """
    if not (is_dataclass(cls) and isinstance(cls, type)):
        raise DecodeError(f"Cannot decode into {cls!r}: not a dataclass")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Invalid JSON: {exc.msg}", cause=exc) from exc

    if not isinstance(data, dict):
        raise DecodeError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )

    kwargs: dict[str, Any] = {}
    missing: list[str] = []
    for f in fields(cls):
        if not f.init:
            continue
        if f.name in data:
            kwargs[f.name] = data[f.name]
        elif f.default is MISSING and f.default_factory is MISSING:
            missing.append(f.name)
    if missing:
        raise DecodeError(
            f"Missing field(s) for {cls.__name__}: {', '.join(missing)}"
        )
    return cls(**kwargs)
