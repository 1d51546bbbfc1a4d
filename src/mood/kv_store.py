"""SQLite key/value store for the persisted JSON blobs (user, entries, preferences)."""

import json
import sqlite3
from pathlib import Path
from typing import Optional

import structlog
from pydantic import ValidationError

from mood.models import Preferences, UserData
from mood.store import EntryStore

logger = structlog.get_logger()

USER_KEY = "moodify_user"
ENTRIES_KEY = "moodify_entries"
PREFERENCES_KEY = "moodify_preferences"


def wal_connect(db_path: str | Path) -> sqlite3.Connection:
    """Open SQLite connection with WAL journal mode."""
    conn = sqlite3.connect(str(db_path))
    conn.execute("PRAGMA journal_mode=WAL")
    return conn


class KeyValueStore:
    """String values under string keys, one row per key."""

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path).expanduser()
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self) -> None:
        conn = wal_connect(self.db_path)
        try:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)
            conn.commit()
        finally:
            conn.close()

    def get(self, key: str) -> Optional[str]:
        conn = wal_connect(self.db_path)
        try:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        finally:
            conn.close()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        conn = wal_connect(self.db_path)
        try:
            conn.execute(
                """INSERT INTO kv (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP)
                   ON CONFLICT(key) DO UPDATE SET value = excluded.value,
                   updated_at = excluded.updated_at""",
                (key, value),
            )
            conn.commit()
        finally:
            conn.close()

    def delete(self, key: str) -> bool:
        conn = wal_connect(self.db_path)
        try:
            cur = conn.execute("DELETE FROM kv WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()
        return cur.rowcount > 0

    def _load_json(self, key: str):
        raw = self.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("kv.malformed_blob", key=key, error=str(e))
            return None

    # --- User ---

    def load_user(self) -> UserData:
        data = self._load_json(USER_KEY)
        if data is None:
            return UserData()
        try:
            return UserData.model_validate(data)
        except ValidationError as e:
            logger.warning("kv.malformed_blob", key=USER_KEY, error=str(e))
            return UserData()

    def save_user(self, user: UserData) -> None:
        self.set(USER_KEY, user.model_dump_json(by_alias=True))

    # --- Entries ---

    def load_entries(self) -> EntryStore:
        """Load the entry store; a malformed blob yields an empty store."""
        data = self._load_json(ENTRIES_KEY)
        if data is None:
            return EntryStore()
        if not isinstance(data, list):
            logger.warning("kv.malformed_blob", key=ENTRIES_KEY, error="expected a list")
            return EntryStore()
        try:
            return EntryStore.from_records(data)
        except ValidationError as e:
            logger.warning("kv.malformed_blob", key=ENTRIES_KEY, error=str(e))
            return EntryStore()

    def save_entries(self, store: EntryStore) -> None:
        self.set(ENTRIES_KEY, json.dumps(store.to_records(), ensure_ascii=False))

    # --- Preferences ---

    def load_preferences(self) -> Preferences:
        data = self._load_json(PREFERENCES_KEY)
        if data is None:
            return Preferences()
        try:
            return Preferences.model_validate(data)
        except ValidationError as e:
            logger.warning("kv.malformed_blob", key=PREFERENCES_KEY, error=str(e))
            return Preferences()

    def save_preferences(self, prefs: Preferences) -> None:
        self.set(PREFERENCES_KEY, prefs.model_dump_json(by_alias=True))

    def reset(self) -> None:
        """Forget the user and their entries. Preferences are kept."""
        self.delete(USER_KEY)
        self.delete(ENTRIES_KEY)
        logger.info("kv.reset", db_path=str(self.db_path))
