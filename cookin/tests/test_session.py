from __future__ import annotations

from unittest.mock import patch

from cookin.pantry import OwnedIngredients
from cookin.session.models import RecipeType, SearchSession
from cookin.session.store import clear_store, purge_expired, store_delete, store_get, store_set


# ── Owned ingredients ────────────────────────────────────────────────────


class TestOwnedIngredients:
    def test_add_keeps_order_and_trims(self):
        owned = OwnedIngredients()
        assert owned.add(" 양파 ")
        assert owned.add("당근")
        assert owned.items == ["양파", "당근"]

    def test_duplicates_rejected_case_insensitively(self):
        owned = OwnedIngredients()
        assert owned.add("Onion")
        assert not owned.add(" onion ")
        assert owned.items == ["Onion"]

    def test_blank_rejected(self):
        owned = OwnedIngredients()
        assert not owned.add("   ")
        assert len(owned) == 0

    def test_contains(self):
        owned = OwnedIngredients(items=["Carrot"])
        assert "carrot" in owned
        assert "beef" not in owned

    def test_remove(self):
        owned = OwnedIngredients(items=["양파", "당근"])
        assert owned.remove("양파")
        assert not owned.remove("양파")
        assert owned.items == ["당근"]


# ── Key-value store ──────────────────────────────────────────────────────


def test_store_roundtrip():
    clear_store()
    assert store_get("k") is None
    store_set("k", {"a": 1})
    assert store_get("k") == {"a": 1}


def test_store_entries_expire():
    clear_store()
    with patch("cookin.session.store.time.time", return_value=1000.0):
        store_set("k", "v")
    with patch("cookin.session.store.time.time", return_value=1000.0 + 10):
        assert store_get("k", ttl=5) is None
        assert store_get("k") is None


def test_purge_expired_counts_live_entries():
    clear_store()
    with patch("cookin.session.store.time.time", return_value=1000.0):
        store_set("old", 1)
    with patch("cookin.session.store.time.time", return_value=1050.0):
        store_set("new", 2)
        assert purge_expired(ttl=30) == 1
        assert store_get("old", ttl=30) is None
        assert store_get("new", ttl=30) == 2


def test_store_delete():
    clear_store()
    store_set("k", 1)
    assert store_delete("k") is True
    assert store_delete("k") is False


def test_search_session_survives_store():
    clear_store()
    state = SearchSession(recipe_type=RecipeType.western)
    state.owned.add("beef")
    store_set("s", state.model_dump(mode="json"))
    restored = SearchSession.model_validate(store_get("s"))
    assert restored.owned.items == ["beef"]
    assert restored.recipe_type is RecipeType.western
    assert restored.current_page == 1
