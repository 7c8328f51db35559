"""Runtime configuration for the command-line converters."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping


DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class TransliterationSettings:
    """Validated settings shared by the CLI entrypoints."""

    lexicon_path: Path | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "TransliterationSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        lexicon_raw = source.get("MONGOLCYR_LEXICON_PATH", "").strip()
        log_level_raw = source.get("MONGOLCYR_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()

        if not log_level_raw:
            raise ValueError("MONGOLCYR_LOG_LEVEL cannot be empty")
        if log_level_raw not in _LOG_LEVELS:
            allowed = ", ".join(_LOG_LEVELS)
            raise ValueError(f"MONGOLCYR_LOG_LEVEL must be one of {allowed}, got {log_level_raw!r}")

        return cls(
            lexicon_path=Path(lexicon_raw) if lexicon_raw else None,
            log_level=log_level_raw,
        )
