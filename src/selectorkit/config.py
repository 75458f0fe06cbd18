from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_TRUE_VALUES = ("true", "1", "yes")


@dataclass(frozen=True)
class CodecConfig:
    """Layout options handed to ``json.dumps`` by :func:`to_json`."""

    indent: int | None = None
    sort_keys: bool = False
    ensure_ascii: bool = True


@dataclass(frozen=True)
class SelectorKitConfig:
    log_level: str = "WARNING"
    codec: CodecConfig = field(default_factory=CodecConfig)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SelectorKitConfig:
        """Create a config from ``SELECTORKIT_*`` environment variables.

        Unset variables fall back to the dataclass defaults.  Raises
        ``ValueError`` for a non-integer indent or an unknown log level.
        """
        env = os.environ if environ is None else environ

        indent_raw = env.get("SELECTORKIT_JSON_INDENT", "").strip()
        try:
            indent = int(indent_raw) if indent_raw else None
        except ValueError:
            raise ValueError(
                f"SELECTORKIT_JSON_INDENT must be an integer, got {indent_raw!r}"
            ) from None

        log_level = env.get("SELECTORKIT_LOG_LEVEL", "WARNING").strip().upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"SELECTORKIT_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, "
                f"got {log_level!r}"
            )

        codec = CodecConfig(
            indent=indent,
            sort_keys=env.get("SELECTORKIT_JSON_SORT_KEYS", "").lower() in _TRUE_VALUES,
        )
        return cls(log_level=log_level, codec=codec)
