"""Runtime configuration for cssbuild."""
from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_TRUE = ("true", "1", "yes")


@dataclass(frozen=True)
class CssBuildConfig:
    log_level: str = "WARNING"
    json_sort_keys: bool = False
    json_indent: int | None = None  # None = compact

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CssBuildConfig:
        """Create a config from environment variables.

        Reads CSSBUILD_LOG_LEVEL, CSSBUILD_JSON_SORT_KEYS and
        CSSBUILD_JSON_INDENT. Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        log_level = env.get("CSSBUILD_LOG_LEVEL")
        sort_keys = env.get("CSSBUILD_JSON_SORT_KEYS")
        indent = env.get("CSSBUILD_JSON_INDENT")

        json_indent = defaults.json_indent
        if indent:
            try:
                json_indent = int(indent)
            except ValueError as exc:
                raise ValueError(
                    f"CSSBUILD_JSON_INDENT must be an integer, got {indent!r}"
                ) from exc

        return cls(
            log_level=log_level.upper() if log_level else defaults.log_level,
            json_sort_keys=(
                sort_keys.lower() in _TRUE if sort_keys else defaults.json_sort_keys
            ),
            json_indent=json_indent,
        )
