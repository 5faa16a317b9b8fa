"""Best difficulty persistence in a small SQLite key-value table."""

from __future__ import annotations

import logging
import math
import sqlite3
from pathlib import Path

from cubefall.config import DIFFICULTY_INITIAL, HIGHSCORE_KEY

DEFAULT_DB_PATH = Path.home() / ".cubefall" / "storage.db"

logger = logging.getLogger(__name__)


class BestScoreStore:
    def __init__(self, db_path: Path = DEFAULT_DB_PATH, default: float = DIFFICULTY_INITIAL) -> None:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(str(db_path))
        self._default = default
        self._init_db()

    def _init_db(self) -> None:
        self.conn.execute("""
            CREATE TABLE IF NOT EXISTS storage (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
        """)
        self.conn.commit()

    def get_item(self, key: str) -> str | None:
        row = self.conn.execute("SELECT value FROM storage WHERE key = ?", (key,)).fetchone()
        return row[0] if row else None

    def set_item(self, key: str, value: str) -> None:
        self.conn.execute(
            "INSERT OR REPLACE INTO storage (key, value) VALUES (?, ?)",
            (key, value),
        )
        self.conn.commit()

    def load(self) -> float:
        """Return the stored best difficulty, or the default if there is none usable."""
        raw = self.get_item(HIGHSCORE_KEY)
        if raw is None:
            return self._default
        try:
            value = float(raw)
        except ValueError:
            logger.warning("Ignoring unparseable stored best %r", raw)
            return self._default
        if not math.isfinite(value) or value < self._default:
            logger.warning("Ignoring out-of-range stored best %r", raw)
            return self._default
        return value

    def save(self, value: float) -> None:
        self.set_item(HIGHSCORE_KEY, repr(float(value)))

    def close(self) -> None:
        self.conn.close()
