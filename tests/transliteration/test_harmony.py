"""Tests for harmony classification and vowel resolution."""

from __future__ import annotations

import pytest

from mongolcyr.transliteration.harmony import (
    HarmonyClass,
    apply_harmony,
    classify,
    is_harmony_consistent,
)


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("word", ["bайnuu", "nom", "tsagaan", "eia", "ман", "одорт"])
def test_masculine_words(word: str) -> None:
    assert classify(word) is HarmonyClass.MASCULINE


@pytest.mark.parametrize("word", ["hel", "gert", "гэрт", "өдөр", "ирсэн"])
def test_feminine_words(word: str) -> None:
    assert classify(word) is HarmonyClass.FEMININE


def test_words_without_vowels_default_to_feminine() -> None:
    assert classify("") is HarmonyClass.FEMININE
    assert classify("шц") is HarmonyClass.FEMININE


# ---------------------------------------------------------------------------
# apply_harmony
# ---------------------------------------------------------------------------

def test_masculine_vowels() -> None:
    assert apply_harmony("nom", HarmonyClass.MASCULINE) == "nоm"
    assert apply_harmony("buu", HarmonyClass.MASCULINE) == "bуу"


def test_feminine_vowels() -> None:
    assert apply_harmony("nom", HarmonyClass.FEMININE) == "nөm"
    assert apply_harmony("buu", HarmonyClass.FEMININE) == "bүү"


def test_diphthongs_are_joined_after_single_letters() -> None:
    assert apply_harmony("noir", HarmonyClass.MASCULINE) == "nойr"
    assert apply_harmony("tui", HarmonyClass.MASCULINE) == "tуй"
    assert apply_harmony("noir", HarmonyClass.FEMININE) == "nөйr"
    assert apply_harmony("tui", HarmonyClass.FEMININE) == "tүй"


def test_trailing_ii_depends_on_class() -> None:
    assert apply_harmony("bii", HarmonyClass.MASCULINE) == "bы"
    assert apply_harmony("bii", HarmonyClass.FEMININE) == "bий"


def test_words_without_o_or_u_are_unchanged() -> None:
    assert apply_harmony("hel", HarmonyClass.FEMININE) == "hel"
    assert apply_harmony("sar", HarmonyClass.MASCULINE) == "sar"


# ---------------------------------------------------------------------------
# is_harmony_consistent
# ---------------------------------------------------------------------------

def test_consistency_check() -> None:
    assert is_harmony_consistent("одортай")
    assert is_harmony_consistent("хөлдүү")
    assert is_harmony_consistent("")
    assert not is_harmony_consistent("өргон")
