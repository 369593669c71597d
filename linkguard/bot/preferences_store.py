from __future__ import annotations

import asyncio
from dataclasses import dataclass
import time

from ..checks.url_utils import SCOPES
from ..config import UI_PRESETS
from . import db

_lock = asyncio.Lock()

COLUMNS = {"scope", "ui_preset"}


@dataclass
class Preferences:
    scope: str | None
    ui_preset: str | None

    def resolve(self, default_scope: str, default_ui_preset: str) -> tuple[str, str]:
        scope = self.scope if self.scope in SCOPES else default_scope
        ui_preset = self.ui_preset if self.ui_preset in UI_PRESETS else default_ui_preset
        return scope, ui_preset


def _get_sync(user_id: int) -> Preferences:
    with db.connect() as conn:
        db.ensure_db(conn)
        cur = conn.execute("SELECT scope, ui_preset FROM preferences WHERE user_id = ?", (int(user_id),))
        row = cur.fetchone()
        if not row:
            return Preferences(scope=None, ui_preset=None)
        return Preferences(scope=row[0] or None, ui_preset=row[1] or None)


def _set_sync(user_id: int, column: str, value: str) -> None:
    if column not in COLUMNS:
        raise ValueError(f"Unknown preference: {column}")
    value = value.strip().lower()
    with db.connect() as conn:
        db.ensure_db(conn)
        conn.execute(
            f"""
            INSERT INTO preferences (user_id, {column}, updated_at)
            VALUES (?, ?, ?)
            ON CONFLICT(user_id) DO UPDATE SET
                {column} = excluded.{column},
                updated_at = excluded.updated_at
            """,
            (int(user_id), value, time.time()),
        )
        conn.commit()


async def get_preferences(user_id: int) -> Preferences:
    async with _lock:
        return await asyncio.to_thread(_get_sync, user_id)


async def set_scope(user_id: int, scope: str) -> None:
    async with _lock:
        await asyncio.to_thread(_set_sync, user_id, "scope", scope)


async def set_ui_preset(user_id: int, preset: str) -> None:
    async with _lock:
        await asyncio.to_thread(_set_sync, user_id, "ui_preset", preset)
