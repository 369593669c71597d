from __future__ import annotations

import asyncio

import pytest

from linkguard.bot import db
from linkguard.bot import preferences_store


@pytest.fixture(autouse=True)
def temp_db(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(db, "DB_PATH", tmp_path / "linkguard.sqlite")
    monkeypatch.setattr(db, "_initialized", False)


def test_unknown_user_has_no_preferences() -> None:
    prefs = asyncio.run(preferences_store.get_preferences(42))
    assert prefs.scope is None
    assert prefs.ui_preset is None
    assert prefs.resolve("links", "full") == ("links", "full")


def test_preferences_are_independent() -> None:
    asyncio.run(preferences_store.set_scope(42, "all-links"))
    prefs = asyncio.run(preferences_store.get_preferences(42))
    assert prefs.scope == "all-links"
    assert prefs.ui_preset is None

    asyncio.run(preferences_store.set_ui_preset(42, " MINIMAL "))
    prefs = asyncio.run(preferences_store.get_preferences(42))
    assert prefs.resolve("links", "full") == ("all-links", "minimal")


def test_preferences_are_per_user() -> None:
    asyncio.run(preferences_store.set_scope(1, "all-links"))
    prefs = asyncio.run(preferences_store.get_preferences(2))
    assert prefs.scope is None


def test_invalid_stored_value_falls_back() -> None:
    asyncio.run(preferences_store.set_scope(7, "everything"))
    prefs = asyncio.run(preferences_store.get_preferences(7))
    assert prefs.resolve("links", "balanced") == ("links", "balanced")
