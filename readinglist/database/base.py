"""Shared SQLite plumbing for the reading-list repositories."""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Optional, Union

from readinglist.database.errors import ForeignKeyViolation, StoreError, UniquenessViolation
from readinglist.database.schema import SCHEMA_SQL
from readinglist.models.entry import Entry

logger = logging.getLogger(__name__)


class SQLiteRepository:
    """Base class owning connection handling and schema setup."""

    def __init__(self, db_path: Union[Path, str]):
        """Initialize repository with database path.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = Path(db_path)
        self._init_db()

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        """Context manager for database connections."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        conn.execute("PRAGMA busy_timeout = 5000")
        try:
            yield conn
        finally:
            conn.close()

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        """Connection whose work is committed on success and rolled back on error.

        ``sqlite3.IntegrityError`` is re-raised as the matching ``StoreError``.
        """
        with self._connection() as conn:
            try:
                yield conn
                conn.commit()
            except sqlite3.IntegrityError as exc:
                conn.rollback()
                raise translate_integrity_error(exc) from exc
            except Exception:
                conn.rollback()
                raise

    def _init_db(self) -> None:
        """Initialize database schema."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with self._connection() as conn:
            conn.executescript(SCHEMA_SQL)
            conn.commit()
        logger.debug("Schema ready in %s", self.db_path)

    @staticmethod
    def _entry_exists(conn: sqlite3.Connection, entry_id: int) -> bool:
        row = conn.execute(
            "SELECT 1 FROM reading_list WHERE id = ?", (entry_id,)
        ).fetchone()
        return row is not None


def translate_integrity_error(exc: sqlite3.IntegrityError) -> StoreError:
    """Map a SQLite integrity failure onto the store's error kinds."""
    message = str(exc)
    if "FOREIGN KEY" in message:
        return ForeignKeyViolation(message)
    if "UNIQUE" in message:
        return UniquenessViolation(message)
    return StoreError(message)


def read_to_db(read: Optional[bool]) -> Optional[int]:
    """Convert the tri-state read flag to its column value."""
    if read is None:
        return None
    return 1 if read else 0


def read_from_db(value: Any) -> Optional[bool]:
    """Convert a ``read`` column value back to the tri-state flag."""
    if value is None:
        return None
    return bool(value)


def row_to_entry(row: sqlite3.Row) -> Entry:
    """Build an :class:`Entry` from a ``reading_list`` row."""
    return Entry(
        url=row["url"],
        source_date=row["source_date"],
        original_text=row["original_text"],
        body_text=row["body_text"],
        read=read_from_db(row["read"]),
        id=row["id"],
    )
