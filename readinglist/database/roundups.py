"""Roundup index: which entries were included in which dated roundup."""

import logging
from typing import Iterable, Iterator

from readinglist.database.base import SQLiteRepository, row_to_entry
from readinglist.database.errors import NotFound
from readinglist.database.schema import ENTRY_COLUMNS
from readinglist.models.entry import Entry, RoundupAssociation
from readinglist.utils.dates import DateLike, to_iso_date

logger = logging.getLogger(__name__)

_ENTRY_COLUMNS = ", ".join(
    f"reading_list.{column.strip()}" for column in ENTRY_COLUMNS.split(",")
)


class RoundupRepository(SQLiteRepository):
    """Repository for the many-to-many link between roundup dates and entries."""

    def add(self, roundup_date: DateLike, entry_id: int) -> RoundupAssociation:
        """Include an entry in the roundup for a date.

        Args:
            roundup_date: Roundup publication date
            entry_id: Entry to include

        Returns:
            The stored association

        Raises:
            UniquenessViolation: If the entry is already in this roundup
            ForeignKeyViolation: If no entry has this id
        """
        day = to_iso_date(roundup_date)
        with self._transaction() as conn:
            conn.execute(
                "INSERT INTO roundup_contents (date, entry) VALUES (?, ?)",
                (day, entry_id),
            )
        logger.debug("Added entry %s to roundup %s", entry_id, day)
        return RoundupAssociation(date=day, entry=entry_id)

    def remove(self, roundup_date: DateLike, entry_id: int) -> bool:
        """Drop an entry from the roundup for a date.

        Returns:
            True if an association was removed
        """
        with self._transaction() as conn:
            cursor = conn.execute(
                "DELETE FROM roundup_contents WHERE date = ? AND entry = ?",
                (to_iso_date(roundup_date), entry_id),
            )
            return cursor.rowcount > 0

    def replace(self, roundup_date: DateLike, entry_ids: Iterable[int]) -> int:
        """Replace the whole contents of one roundup atomically.

        If any id is rejected, the roundup keeps its previous contents.

        Args:
            roundup_date: Roundup publication date
            entry_ids: Entries the roundup should contain; repeats are ignored

        Returns:
            Number of entries now in the roundup

        Raises:
            ForeignKeyViolation: If any id does not reference an entry
        """
        day = to_iso_date(roundup_date)
        ids = list(dict.fromkeys(entry_ids))
        with self._transaction() as conn:
            conn.execute("DELETE FROM roundup_contents WHERE date = ?", (day,))
            conn.executemany(
                "INSERT INTO roundup_contents (date, entry) VALUES (?, ?)",
                [(day, entry_id) for entry_id in ids],
            )
        logger.info("Roundup %s now holds %d entries", day, len(ids))
        return len(ids)

    def entries_for_date(self, roundup_date: DateLike) -> Iterator[Entry]:
        """Yield the entries in the roundup for a date, in id order."""
        day = to_iso_date(roundup_date)
        with self._connection() as conn:
            rows = conn.execute(
                f"""
                SELECT {_ENTRY_COLUMNS}
                FROM roundup_contents
                JOIN reading_list ON reading_list.id = roundup_contents.entry
                WHERE roundup_contents.date = ?
                ORDER BY reading_list.id ASC
                """,
                (day,),
            ).fetchall()
        for row in rows:
            yield row_to_entry(row)

    def roundups_for_entry(self, entry_id: int) -> Iterator[str]:
        """Return the roundup dates that include an entry, oldest first.

        Raises:
            NotFound: If no entry has this id (raised on call, not on iteration)
        """
        with self._connection() as conn:
            if not self._entry_exists(conn, entry_id):
                raise NotFound(entry_id)
        return self._iter_dates(entry_id)

    def list_dates(self) -> list[str]:
        """Return every roundup date, oldest first."""
        with self._connection() as conn:
            rows = conn.execute(
                "SELECT DISTINCT date FROM roundup_contents ORDER BY date ASC"
            ).fetchall()
        return [row["date"] for row in rows]

    def roundup_counts(self) -> list[tuple[Entry, int]]:
        """Return every entry with the number of roundups that include it.

        Least-featured entries come first, then older source dates.
        """
        with self._connection() as conn:
            rows = conn.execute(
                f"""
                SELECT {_ENTRY_COLUMNS}, COUNT(DISTINCT roundup_contents.date) AS count
                FROM reading_list
                LEFT JOIN roundup_contents ON reading_list.id = roundup_contents.entry
                GROUP BY reading_list.id
                ORDER BY count ASC, reading_list.source_date ASC, reading_list.id ASC
                """
            ).fetchall()
        return [(row_to_entry(row), row["count"]) for row in rows]

    def _iter_dates(self, entry_id: int) -> Iterator[str]:
        with self._connection() as conn:
            rows = conn.execute(
                "SELECT DISTINCT date FROM roundup_contents WHERE entry = ? ORDER BY date ASC",
                (entry_id,),
            ).fetchall()
        for row in rows:
            yield row["date"]
