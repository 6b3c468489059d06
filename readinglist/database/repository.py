"""Reading-list repository for entry storage."""

import logging
from typing import Iterable, Iterator, Optional

from readinglist.database.base import SQLiteRepository, read_to_db, row_to_entry
from readinglist.database.errors import NotFound
from readinglist.database.schema import ENTRY_COLUMNS
from readinglist.models.entry import Entry
from readinglist.utils.dates import DateLike, to_iso_date

logger = logging.getLogger(__name__)

_INSERT_SQL = """
    INSERT INTO reading_list (url, source_date, original_text, body_text, read)
    VALUES (?, ?, ?, ?, ?)
"""

_INSERT_OR_IGNORE_SQL = """
    INSERT INTO reading_list (url, source_date, original_text, body_text, read)
    VALUES (?, ?, ?, ?, ?)
    ON CONFLICT (url) DO NOTHING
"""


class ReadingListRepository(SQLiteRepository):
    """Repository for reading-list entries and their read status."""

    def insert(
        self,
        url: str,
        source_date: Optional[DateLike] = None,
        original_text: Optional[str] = None,
        body_text: Optional[str] = None,
        read: Optional[bool] = None,
    ) -> Entry:
        """Insert a new entry.

        Args:
            url: URL of the entry; must not already be stored
            source_date: Journal date the URL was found on (default: today)
            original_text: Journal line as written
            body_text: Cleaned text
            read: None (unknown), False (unread) or True (read)

        Returns:
            The stored Entry, with its generated id

        Raises:
            UniquenessViolation: If the URL is already stored
            ValueError: If the URL is empty or the date is invalid
        """
        params = _insert_params(url, source_date, original_text, body_text, read)
        with self._transaction() as conn:
            cursor = conn.execute(_INSERT_SQL, params)
            entry_id = cursor.lastrowid
        logger.debug("Inserted entry %s: %s", entry_id, params[0])
        return Entry(
            url=params[0],
            source_date=params[1],
            original_text=original_text,
            body_text=body_text,
            read=read,
            id=entry_id,
        )

    def upsert(
        self,
        url: str,
        source_date: Optional[DateLike] = None,
        original_text: Optional[str] = None,
        body_text: Optional[str] = None,
        read: Optional[bool] = None,
    ) -> bool:
        """Insert an entry if its URL is not stored yet.

        Returns:
            True if the entry was inserted, False if the URL already existed
        """
        params = _insert_params(url, source_date, original_text, body_text, read)
        with self._transaction() as conn:
            cursor = conn.execute(_INSERT_OR_IGNORE_SQL, params)
            return cursor.rowcount > 0

    def upsert_many(self, entries: Iterable[Entry]) -> int:
        """Insert every entry whose URL is not stored yet, in one transaction.

        The ``id`` of each given entry is ignored.

        Args:
            entries: Entries to add

        Returns:
            Number of entries that were newly inserted
        """
        inserted = 0
        with self._transaction() as conn:
            for entry in entries:
                cursor = conn.execute(
                    _INSERT_OR_IGNORE_SQL,
                    _insert_params(
                        entry.url,
                        entry.source_date,
                        entry.original_text,
                        entry.body_text,
                        entry.read,
                    ),
                )
                inserted += max(cursor.rowcount, 0)
        logger.info("Added %d new reading-list entries", inserted)
        return inserted

    def update_read_status(self, entry_id: int, read: Optional[bool]) -> None:
        """Set the read flag of an entry.

        Args:
            entry_id: Entry to update
            read: None (unknown), False (unread) or True (read)

        Raises:
            NotFound: If no entry has this id
        """
        with self._transaction() as conn:
            cursor = conn.execute(
                "UPDATE reading_list SET read = ? WHERE id = ?",
                (read_to_db(read), entry_id),
            )
            if cursor.rowcount == 0:
                raise NotFound(entry_id)
        logger.debug("Entry %s read status -> %s", entry_id, read)

    def update_body_text(self, entry_id: int, body_text: Optional[str]) -> None:
        """Set the cleaned text of an entry.

        Raises:
            NotFound: If no entry has this id
        """
        with self._transaction() as conn:
            cursor = conn.execute(
                "UPDATE reading_list SET body_text = ? WHERE id = ?",
                (body_text, entry_id),
            )
            if cursor.rowcount == 0:
                raise NotFound(entry_id)

    def find_by_url(self, url: str) -> Optional[Entry]:
        """Find an entry by URL.

        Returns:
            Entry if found, None otherwise
        """
        return self._find_one("url = ?", (url,))

    def find_by_id(self, entry_id: int) -> Optional[Entry]:
        """Find an entry by id.

        Returns:
            Entry if found, None otherwise
        """
        return self._find_one("id = ?", (entry_id,))

    def find_all(self) -> list[Entry]:
        """Return every entry in id order."""
        with self._connection() as conn:
            rows = conn.execute(
                f"SELECT {ENTRY_COLUMNS} FROM reading_list ORDER BY id ASC"
            ).fetchall()
        return [row_to_entry(row) for row in rows]

    def list_unread(self) -> Iterator[Entry]:
        """Yield entries not known to be read (read is unknown or false), in id order.

        The rows are fetched before the first entry is yielded, so callers may
        update entries while iterating.
        """
        with self._connection() as conn:
            rows = conn.execute(
                f"""
                SELECT {ENTRY_COLUMNS}
                FROM reading_list
                WHERE read IS NULL OR read = 0
                ORDER BY id ASC
                """
            ).fetchall()
        for row in rows:
            yield row_to_entry(row)

    def count(self) -> int:
        """Return the number of stored entries."""
        with self._connection() as conn:
            return conn.execute("SELECT COUNT(*) FROM reading_list").fetchone()[0]

    def delete(self, entry_id: int) -> int:
        """Delete an entry together with its roundup associations.

        Args:
            entry_id: Entry to delete

        Returns:
            Number of roundup associations removed along with the entry

        Raises:
            NotFound: If no entry has this id
        """
        with self._transaction() as conn:
            removed = conn.execute(
                "DELETE FROM roundup_contents WHERE entry = ?", (entry_id,)
            ).rowcount
            cursor = conn.execute("DELETE FROM reading_list WHERE id = ?", (entry_id,))
            if cursor.rowcount == 0:
                raise NotFound(entry_id)
        logger.info("Deleted entry %s and %d roundup association(s)", entry_id, removed)
        return removed

    def _find_one(self, where: str, params: tuple) -> Optional[Entry]:
        with self._connection() as conn:
            row = conn.execute(
                f"SELECT {ENTRY_COLUMNS} FROM reading_list WHERE {where}",
                params,
            ).fetchone()
        if row is None:
            return None
        return row_to_entry(row)


def _insert_params(
    url: str,
    source_date: Optional[DateLike],
    original_text: Optional[str],
    body_text: Optional[str],
    read: Optional[bool],
) -> tuple:
    if not url or not url.strip():
        raise ValueError("url must not be empty")
    return (
        url,
        to_iso_date(source_date, default_today=True),
        original_text,
        body_text,
        read_to_db(read),
    )
