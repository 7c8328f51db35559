"""Whole-word exception lexicon and its JSON loader."""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping

from mongolcyr.transliteration.tables import EXCEPTION_WORDS


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LexiconError(Exception):
    """Domain error for unreadable or malformed lexicon files."""

    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.message} (path={self.path})"


class ExceptionLexicon:
    """Read-only mapping of Latin words to their canonical Cyrillic spelling."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        source = EXCEPTION_WORDS if entries is None else entries
        self._entries: Mapping[str, str] = MappingProxyType(dict(source))

    def lookup(self, word: str) -> str | None:
        """Return the override for an exact lower-cased *word*, if any."""

        return self._entries.get(word)

    def merged(self, extra: Mapping[str, str]) -> "ExceptionLexicon":
        """Return a new lexicon where *extra* entries win over existing ones."""

        combined = dict(self._entries)
        combined.update(extra)
        return ExceptionLexicon(combined)

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


def load_lexicon_file(path: str | Path) -> dict[str, str]:
    """Read a JSON object of ``{latin: cyrillic}`` overrides.

    Keys are stripped and lower-cased so they match the converter's
    lower-cased tokens.  Anything other than a flat object of non-empty
    strings is rejected with :class:`LexiconError`.
    """

    source = Path(path)
    try:
        raw = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise LexiconError(path=source, message=f"Could not read lexicon file: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise LexiconError(path=source, message=f"Invalid JSON in lexicon file: {exc.msg}") from exc

    if not isinstance(data, dict):
        raise LexiconError(path=source, message="Lexicon file must contain a JSON object")

    entries: dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(value, str):
            raise LexiconError(path=source, message=f"Lexicon value for {key!r} must be a string")
        latin = key.strip().lower()
        cyrillic = value.strip()
        if not latin:
            raise LexiconError(path=source, message="Lexicon keys cannot be empty")
        if not cyrillic:
            raise LexiconError(path=source, message=f"Lexicon value for {key!r} cannot be empty")
        entries[latin] = cyrillic

    logger.info("Loaded %s lexicon entries from %s", len(entries), source)
    return entries
