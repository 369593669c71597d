from __future__ import annotations

import sqlite3
from pathlib import Path

DB_PATH = Path(__file__).resolve().parents[2] / "data" / "linkguard.sqlite"

_initialized = False


def connect() -> sqlite3.Connection:
    DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(DB_PATH)
    conn.execute("PRAGMA journal_mode=WAL;")
    conn.execute("PRAGMA synchronous=NORMAL;")
    return conn


def _init_schema(conn: sqlite3.Connection) -> None:
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS preferences (
            user_id INTEGER PRIMARY KEY,
            scope TEXT,
            ui_preset TEXT,
            updated_at REAL NOT NULL
        )
        """
    )
    conn.commit()


def ensure_db(conn: sqlite3.Connection) -> None:
    global _initialized
    if _initialized:
        return
    _init_schema(conn)
    _initialized = True
