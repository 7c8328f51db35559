"""Fixed lookup tables for Latin → Mongolian Cyrillic transliteration.

All tables are read-only module constants.  Order matters for
``REWRITE_RULES`` and ``SUFFIXES``: both are applied first-to-last and later
entries see the output of earlier ones (rewrite) or lose to earlier matches
(suffixes).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple


class SuffixEntry(NamedTuple):
    """Latin suffix and its Cyrillic spelling, authored in feminine form."""

    latin: str
    cyrillic: str


# Whole-word overrides checked before any rule applies.
EXCEPTION_WORDS: Mapping[str, str] = MappingProxyType(
    {
        "ni": "нь",
        "yu": "ю",
        "yum": "юм",
        "ug": "үг",
        "odor": "өдөр",
        "onoodor": "өнөөдөр",
        "ondog": "өндөг",
        "manai": "манай",
        "gert": "гэрт",
        "shuudangiin": "шуудангийн",
        "hurgelt": "хүргэлт",
        "irsen": "ирсэн",
        "zuir": "зүйр",
        "tsetsen": "цэцэн",
        "buleehen": "бүлээхэн",
        "huiten": "хүйтэн",
        "holduu": "хөлдүү",
        "dagval": "дагвал",
        "gerel": "гэрэл",
        "mongol": "монгол",
    }
)

# Final per-character table.  Multi-character keys are kept for reference but
# never fire: the mapper walks single characters.
BASE_MAPPING: Mapping[str, str] = MappingProxyType(
    {
        "a": "а",
        "b": "б",
        "v": "в",
        "g": "г",
        "d": "д",
        "ye": "е",
        "yo": "ё",
        "j": "ж",
        "z": "з",
        "i": "и",
        "k": "к",
        "l": "л",
        "m": "м",
        "n": "н",
        "p": "п",
        "r": "р",
        "s": "с",
        "t": "т",
        "f": "ф",
        "h": "х",
        "ts": "ц",
        "ch": "ч",
        "sh": "ш",
        "yu": "ю",
        "ya": "я",
        "e": "э",
        "o": "о",
        "u": "у",
        "uu": "уу",
        "ee": "ээ",
        "aa": "аа",
        "oo": "оо",
        "ө": "ө",
        "ү": "ү",
    }
)

# Digraphs, diphthongs and clusters, rewritten before harmony classification.
REWRITE_RULES: tuple[tuple[str, str], ...] = (
    ("ai", "ай"),
    ("ei", "эй"),
    ("ii", "ий"),
    ("ya", "я"),
    ("iyaa", "ья"),
    ("iye", "ье"),
    ("sh", "ш"),
    ("ch", "ч"),
    ("ts", "ц"),
    ("yu", "ю"),
)

SUFFIXES: tuple[SuffixEntry, ...] = (
    SuffixEntry("oi", "ой"),
    SuffixEntry("ui", "уй"),
    SuffixEntry("ei", "эй"),
    SuffixEntry("ai", "ай"),
    SuffixEntry("ya", "я"),
    SuffixEntry("iyaa", "ья"),
    SuffixEntry("iye", "ье"),
    SuffixEntry("iyaatai", "ьяатай"),
    SuffixEntry("tai", "тай"),
    SuffixEntry("tei", "тэй"),
    SuffixEntry("toi", "той"),
    SuffixEntry("iig", "ийг"),
    SuffixEntry("iin", "ийн"),
    SuffixEntry("nii", "ний"),
    SuffixEntry("giin", "гийн"),
)

# Harmony vowel families.  Latin forms are what the classifier sees in raw
# input; Cyrillic forms appear once rewriting or conversion has happened.
#   masculine: a o u  /  а о у
#   feminine:  e i    /  э и ө ү
MASCULINE_VOWELS = frozenset("aouаоу")
FEMININE_VOWELS = frozenset("eiэиөү")

# Feminine → masculine swaps applied to a suffix that follows a masculine stem.
MASCULINE_SUFFIX_TRANS = str.maketrans({"э": "а", "ү": "у"})
