"""Rule-based Latin → Mongolian Cyrillic transliteration engine."""

from .engine import Transliterator, convert_to_cyrillic, tokenize
from .harmony import HarmonyClass, apply_harmony, classify, is_harmony_consistent
from .lexicon import ExceptionLexicon, LexiconError, load_lexicon_file
from .rewrite import apply_rewrite_rules, map_remaining
from .suffixes import match_suffix, resolve_suffix

__all__ = [
    "ExceptionLexicon",
    "HarmonyClass",
    "LexiconError",
    "Transliterator",
    "apply_harmony",
    "apply_rewrite_rules",
    "classify",
    "convert_to_cyrillic",
    "is_harmony_consistent",
    "load_lexicon_file",
    "map_remaining",
    "match_suffix",
    "resolve_suffix",
    "tokenize",
]
