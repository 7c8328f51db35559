from __future__ import annotations

from mongolcyr.transliteration.rewrite import apply_rewrite_rules, map_remaining
from mongolcyr.transliteration.tables import BASE_MAPPING, REWRITE_RULES


# ---------------------------------------------------------------------------
# apply_rewrite_rules
# ---------------------------------------------------------------------------

def test_rule_order_is_fixed() -> None:
    assert [pattern for pattern, _ in REWRITE_RULES] == [
        "ai", "ei", "ii", "ya", "iyaa", "iye", "sh", "ch", "ts", "yu",
    ]


def test_digraphs_are_replaced_everywhere() -> None:
    assert apply_rewrite_rules("shashin") == "шaшin"
    assert apply_rewrite_rules("tsetsen") == "цeцen"


def test_later_rules_see_earlier_output() -> None:
    # "ya" runs before "iyaa", so the longer pattern never sees its input.
    assert apply_rewrite_rules("iyaa") == "iяa"
    assert apply_rewrite_rules("chai") == "чай"


def test_rule_order_changes_results() -> None:
    assert apply_rewrite_rules("aii") == "айi"
    assert apply_rewrite_rules("aii", reversed(REWRITE_RULES)) == "aий"


def test_words_without_patterns_are_unchanged() -> None:
    assert apply_rewrite_rules("nom") == "nom"
    assert apply_rewrite_rules("") == ""


# ---------------------------------------------------------------------------
# map_remaining
# ---------------------------------------------------------------------------

def test_maps_single_letters() -> None:
    assert map_remaining("hel") == "хэл"
    assert map_remaining("bagsh") == "багсх"


def test_multi_character_keys_never_fire() -> None:
    assert "ts" in BASE_MAPPING
    assert map_remaining("ts") == "тс"
    assert map_remaining("uu") == "уу"


def test_unmapped_characters_pass_through() -> None:
    assert map_remaining("y.,!7") == "y.,!7"
    assert map_remaining("өү") == "өү"
    assert map_remaining("ш") == "ш"


def test_custom_mapping() -> None:
    assert map_remaining("ab", {"a": "1"}) == "1b"
