"""Ordered substring rewriting and the final per-character mapping."""

from __future__ import annotations

from typing import Iterable, Mapping

from mongolcyr.transliteration.tables import BASE_MAPPING, REWRITE_RULES


def apply_rewrite_rules(word: str, rules: Iterable[tuple[str, str]] = REWRITE_RULES) -> str:
    """Apply each ``(pattern, replacement)`` rule in order, globally.

    Every rule replaces all non-overlapping occurrences and runs on the output
    of the rules before it.
    """
    result = word
    for pattern, replacement in rules:
        result = result.replace(pattern, replacement)
    return result


def map_remaining(word: str, mapping: Mapping[str, str] = BASE_MAPPING) -> str:
    """Map each character through *mapping*; unknown characters pass through."""
    return "".join(mapping.get(char, char) for char in word)
