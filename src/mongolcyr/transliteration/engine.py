"""Word and sentence level Latin → Mongolian Cyrillic conversion."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Sequence

from mongolcyr.config import TransliterationSettings
from mongolcyr.transliteration.harmony import apply_harmony, classify
from mongolcyr.transliteration.lexicon import ExceptionLexicon, load_lexicon_file
from mongolcyr.transliteration.rewrite import apply_rewrite_rules, map_remaining
from mongolcyr.transliteration.suffixes import resolve_suffix
from mongolcyr.transliteration.tables import BASE_MAPPING, REWRITE_RULES, SUFFIXES, SuffixEntry


logger = logging.getLogger(__name__)

# Particle handled ahead of every table so lexicon edits cannot change it.
_NI_TOKEN = "ni"
_NI_CYRILLIC = "нь"


def tokenize(text: str) -> list[str]:
    """Split on whitespace runs; boundary whitespace yields no empty tokens."""
    return text.split()


class Transliterator:
    """Stateless converter bound to a fixed set of read-only tables."""

    def __init__(
        self,
        *,
        lexicon: ExceptionLexicon | None = None,
        suffixes: Sequence[SuffixEntry] | None = None,
        base_mapping: Mapping[str, str] | None = None,
        rewrite_rules: Sequence[tuple[str, str]] | None = None,
    ) -> None:
        self._lexicon = ExceptionLexicon() if lexicon is None else lexicon
        self._suffixes = tuple(SUFFIXES if suffixes is None else suffixes)
        self._base_mapping = BASE_MAPPING if base_mapping is None else base_mapping
        self._rewrite_rules = tuple(REWRITE_RULES if rewrite_rules is None else rewrite_rules)

    @classmethod
    def from_settings(cls, settings: TransliterationSettings) -> "Transliterator":
        """Build a converter, merging the configured lexicon file if any."""

        lexicon = ExceptionLexicon()
        if settings.lexicon_path is not None:
            lexicon = lexicon.merged(load_lexicon_file(settings.lexicon_path))
        return cls(lexicon=lexicon)

    @property
    def lexicon(self) -> ExceptionLexicon:
        return self._lexicon

    def convert_word(self, word: str) -> str:
        """Convert one word without suffix handling."""

        exception = self._lexicon.lookup(word)
        if exception is not None:
            logger.debug("Lexicon hit for %r", word)
            return exception

        result = apply_rewrite_rules(word.lower(), self._rewrite_rules)
        harmony = classify(result)
        result = apply_harmony(result, harmony)
        return map_remaining(result, self._base_mapping)

    def resolve_suffix(self, word: str) -> str:
        """Convert one word, splitting off a known suffix first."""

        return resolve_suffix(word, self.convert_word, self._suffixes)

    def convert(self, text: str) -> str:
        """Convert whitespace-separated text; tokens are re-joined with single spaces."""

        converted: list[str] = []
        for token in tokenize(text.lower()):
            if token == _NI_TOKEN:
                converted.append(_NI_CYRILLIC)
                continue
            converted.append(self.resolve_suffix(token))

        # "." and "," have no table entry and pass through as-is.
        return " ".join(converted)

    def convert_lines(self, lines: Iterable[str]) -> list[str]:
        """Convert each line on its own so line breaks survive."""

        return [self.convert(line) for line in lines]


_DEFAULT_TRANSLITERATOR = Transliterator()


def convert_to_cyrillic(text: str) -> str:
    """Convert romanized Mongolian *text* to Mongolian Cyrillic."""
    return _DEFAULT_TRANSLITERATOR.convert(text)
