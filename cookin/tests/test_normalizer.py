from __future__ import annotations

import pytest

from cookin.matching.config import SynonymTable
from cookin.matching.normalizer import canonicalize, normalize
from cookin.matching.synonyms import SynonymResolver


# ── normalize ────────────────────────────────────────────────────────────


class TestNormalize:
    def test_lowercases_and_trims(self):
        assert normalize("  Onion  ") == "onion"

    def test_strips_parenthesized_annotation(self):
        assert normalize("carrot (diced)") == "carrot"

    def test_strips_quantity_with_unit(self):
        assert normalize("양파 2개") == "양파"
        assert normalize("beef 200g") == "beef"

    def test_strips_fraction_quantity(self):
        assert normalize("당근 1/2개") == "당근"

    def test_none_and_empty(self):
        assert normalize(None) == ""
        assert normalize("") == ""
        assert normalize("   ") == ""

    def test_only_noise_becomes_empty(self):
        assert normalize("(약간) 3큰술") == ""

    @pytest.mark.parametrize("raw", [
        "양파(중간) 1개",
        "  Beef Brisket 500g (trimmed) ",
        "((a))",
        "a 1 b",
        "소금 약간",
        "1/2 tsp Salt",
        "",
        "İstanbul 2kg",
    ])
    def test_idempotent(self, raw):
        once = normalize(raw)
        assert normalize(once) == once


# ── Synonyms ─────────────────────────────────────────────────────────────


class TestSynonymResolver:
    def test_variant_maps_to_key(self):
        resolver = SynonymResolver()
        assert resolver.resolve("쇠고기") == "소고기"

    def test_first_entry_wins(self):
        # "소고기" and "쇠고기" list each other; the earlier entry takes it.
        resolver = SynonymResolver()
        assert resolver.resolve("소고기살") == "소고기"

    def test_no_hit_passes_through(self):
        resolver = SynonymResolver()
        assert resolver.resolve("두부") == "두부"

    def test_custom_table_order(self):
        table = SynonymTable.from_mapping({"scallion": ["green onion"], "onion": ["onion"]})
        resolver = SynonymResolver(table)
        assert resolver.resolve("green onion") == "scallion"
        assert resolver.resolve("red onion") == "onion"

    def test_key_is_lowercased(self):
        table = SynonymTable.from_mapping({"Eggplant": ["aubergine"]})
        assert SynonymResolver(table).resolve("aubergine") == "eggplant"


def test_canonicalize_resolves_before_stripping():
    resolver = SynonymResolver()
    assert canonicalize("양파(중간)", resolver) == "양파"
    assert canonicalize("쇠고기 300g", resolver) == "소고기"
    assert canonicalize(None, resolver) == ""
