"""Suffix stripping with harmony-adjusted re-attachment."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from mongolcyr.transliteration.harmony import HarmonyClass, classify
from mongolcyr.transliteration.tables import MASCULINE_SUFFIX_TRANS, SUFFIXES, SuffixEntry


logger = logging.getLogger(__name__)


def match_suffix(word: str, suffixes: Iterable[SuffixEntry] = SUFFIXES) -> SuffixEntry | None:
    """Return the first declared suffix *word* ends with, or None."""
    for entry in suffixes:
        if word.endswith(entry.latin):
            return entry
    return None


def resolve_suffix(
    word: str,
    convert_word: Callable[[str], str],
    suffixes: Iterable[SuffixEntry] = SUFFIXES,
) -> str:
    """Convert *word*, treating a known trailing suffix separately.

    The stem is converted with *convert_word* and the suffix spelling is
    switched to masculine vowels when the converted stem is masculine.
    *convert_word* must not call back into this function.
    """
    entry = match_suffix(word, suffixes)
    if entry is None:
        return convert_word(word)

    stem = word[: len(word) - len(entry.latin)]
    converted_stem = convert_word(stem)
    ending = entry.cyrillic
    if classify(converted_stem) is HarmonyClass.MASCULINE:
        ending = ending.translate(MASCULINE_SUFFIX_TRANS)

    logger.debug("Suffix %r matched %r: stem %r -> %r", entry.latin, word, stem, converted_stem)
    return converted_stem + ending
