"""Vowel harmony classification and gender-conditioned vowel mapping."""

from __future__ import annotations

from enum import Enum

from mongolcyr.transliteration.tables import FEMININE_VOWELS, MASCULINE_VOWELS


class HarmonyClass(Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"


# Target spellings per class: (o, u, ui, oi) and the ending used for a leftover "ii".
_VOWEL_TARGETS: dict[HarmonyClass, tuple[str, str, str, str]] = {
    HarmonyClass.MASCULINE: ("о", "у", "уй", "ой"),
    HarmonyClass.FEMININE: ("ө", "ү", "үй", "өй"),
}
_II_ENDINGS: dict[HarmonyClass, str] = {
    HarmonyClass.MASCULINE: "ы",
    HarmonyClass.FEMININE: "ий",
}

# Cyrillic letters that only ever come from one harmony class.
_MASCULINE_ONLY = frozenset("оу")
_FEMININE_ONLY = frozenset("өү")


def classify(word: str) -> HarmonyClass:
    """Return MASCULINE if any masculine vowel occurs in *word*, else FEMININE.

    Masculine vowels win over feminine ones found elsewhere in the word, and a
    word without any harmony vowel counts as feminine.
    """
    vowels = [char for char in word if char in MASCULINE_VOWELS or char in FEMININE_VOWELS]
    if any(char in MASCULINE_VOWELS for char in vowels):
        return HarmonyClass.MASCULINE
    return HarmonyClass.FEMININE


def apply_harmony(word: str, harmony: HarmonyClass) -> str:
    """Resolve Latin ``o``/``u`` and their ``i`` diphthongs for *harmony*."""
    o_target, u_target, ui_target, oi_target = _VOWEL_TARGETS[harmony]

    # Single letters go first; the diphthong pass then sees the Cyrillic vowel.
    result = word.replace("o", o_target).replace("u", u_target)
    result = result.replace(u_target + "i", ui_target).replace(o_target + "i", oi_target)

    if result.endswith("ii"):
        result = result[:-2] + _II_ENDINGS[harmony]
    return result


def is_harmony_consistent(word: str) -> bool:
    """True unless *word* mixes masculine о/у with feminine ө/ү."""
    letters = set(word)
    return not (letters & _MASCULINE_ONLY and letters & _FEMININE_ONLY)
