"""
Repository Pattern - Abstract snapshot storage for the saved collection.

The whole collection is the unit of persistence: one named key holds the
serialized list of words, read once at startup and overwritten wholesale on
every mutation. Enables switching between JSON file, SQLite and in-memory
backends without changing the store.
"""

import json
import os
import sqlite3
import uuid
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Generator, List, Optional

from ..config import Config
from ..errors import PersistenceReadError, PersistenceWriteError

Snapshot = List[Dict[str, Any]]


class BaseRepository(ABC):
    """
    Abstract base class for collection snapshot repositories.

    Implementations raise PersistenceReadError for a corrupt snapshot and
    PersistenceWriteError when the snapshot cannot be written.
    """

    def __init__(self, key: Optional[str] = None):
        self.key = key or Config.STORAGE_KEY

    @abstractmethod
    def load(self) -> Optional[Snapshot]:
        """Read the snapshot. Returns None if nothing was persisted yet."""
        pass

    @abstractmethod
    def save(self, records: Snapshot) -> None:
        """Overwrite the snapshot with records."""
        pass

    @staticmethod
    def _check_snapshot(value: Any) -> Snapshot:
        if not isinstance(value, list):
            raise PersistenceReadError(f"Snapshot must be a list, got {type(value).__name__}")
        return value


class MemoryRepository(BaseRepository):
    """In-process repository, mainly for tests. Stores the serialized form."""

    def __init__(self, key: Optional[str] = None, initial: Optional[str] = None):
        super().__init__(key)
        self._data: Dict[str, str] = {}
        if initial is not None:
            self._data[self.key] = initial

    def load(self) -> Optional[Snapshot]:
        raw = self._data.get(self.key)
        if raw is None:
            return None
        try:
            return self._check_snapshot(json.loads(raw))
        except json.JSONDecodeError as e:
            raise PersistenceReadError(f"Corrupt snapshot: {e}") from e

    def save(self, records: Snapshot) -> None:
        self._data[self.key] = json.dumps(records, ensure_ascii=False)

    @property
    def raw(self) -> Optional[str]:
        return self._data.get(self.key)


class JSONFileRepository(BaseRepository):
    """
    JSON file repository.

    The file holds a document {key: [word, ...]}; writes are atomic
    (temp file + rename).
    """

    def __init__(self, path: Optional[str] = None, key: Optional[str] = None):
        """
        Initialize JSON repository.

        Args:
            path: Path to the JSON file (defaults to Config.STORAGE_FILE)
            key: Name of the snapshot key inside the document
        """
        super().__init__(key)
        self.path = Path(path or Config.STORAGE_FILE)

    def _read_document(self) -> Optional[Dict[str, Any]]:
        if not self.path.exists():
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            raise PersistenceReadError(f"Cannot read {self.path}: {e}") from e
        if not isinstance(document, dict):
            raise PersistenceReadError(f"{self.path} does not hold a JSON object")
        return document

    def load(self) -> Optional[Snapshot]:
        document = self._read_document()
        if document is None or self.key not in document:
            return None
        return self._check_snapshot(document[self.key])

    def save(self, records: Snapshot) -> None:
        temp_file = f"{self.path}.{uuid.uuid4().hex[:8]}.tmp"
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(temp_file, "w", encoding="utf-8") as f:
                json.dump({self.key: records}, f, ensure_ascii=False, indent=2)
            os.replace(temp_file, self.path)
        except (OSError, TypeError, ValueError) as e:
            raise PersistenceWriteError(f"Cannot write {self.path}: {e}") from e
        finally:
            if os.path.exists(temp_file):
                os.remove(temp_file)


class SQLiteRepository(BaseRepository):
    """
    SQLite key/value repository.

    One row per key; the collection is stored as a JSON text value and
    replaced in a single transaction.
    """

    def __init__(self, db_path: Optional[str] = None, key: Optional[str] = None):
        """
        Initialize SQLite repository.

        Args:
            db_path: Path to SQLite database file (defaults to Config.STORAGE_DB)
            key: Row key holding the snapshot
        """
        super().__init__(key)
        self.db_path = Path(db_path or Config.STORAGE_DB)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

    @contextmanager
    def _get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Get database connection with context manager."""
        conn = sqlite3.connect(str(self.db_path))
        try:
            yield conn
        finally:
            conn.close()

    def _init_schema(self) -> None:
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)
            conn.commit()

    def load(self) -> Optional[Snapshot]:
        try:
            with self._get_connection() as conn:
                row = conn.execute(
                    "SELECT value FROM kv_store WHERE key = ?", (self.key,)
                ).fetchone()
        except sqlite3.Error as e:
            raise PersistenceReadError(f"Cannot read {self.db_path}: {e}") from e

        if row is None:
            return None
        try:
            return self._check_snapshot(json.loads(row[0]))
        except json.JSONDecodeError as e:
            raise PersistenceReadError(f"Corrupt snapshot in {self.db_path}: {e}") from e

    def save(self, records: Snapshot) -> None:
        try:
            value = json.dumps(records, ensure_ascii=False)
            with self._get_connection() as conn:
                conn.execute(
                    "INSERT OR REPLACE INTO kv_store (key, value) VALUES (?, ?)",
                    (self.key, value),
                )
                conn.commit()
        except (sqlite3.Error, TypeError, ValueError) as e:
            raise PersistenceWriteError(f"Cannot write {self.db_path}: {e}") from e


def create_repository(backend: Optional[str] = None) -> BaseRepository:
    """Build the repository selected by Config.STORAGE_BACKEND."""
    backend = (backend or Config.STORAGE_BACKEND).lower()
    if backend == "sqlite":
        return SQLiteRepository()
    return JSONFileRepository()
