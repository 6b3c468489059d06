"""Errors raised by the reading-list repositories."""


class StoreError(Exception):
    """Base class for reading-list storage errors."""


class UniquenessViolation(StoreError):
    """A duplicate URL, or a duplicate (date, entry) roundup pair."""


class ForeignKeyViolation(StoreError):
    """A roundup association referenced an entry that does not exist."""


class NotFound(StoreError, LookupError):
    """An operation targeted an entry id that does not exist."""

    def __init__(self, entry_id: int):
        super().__init__(f"no reading-list entry with id {entry_id}")
        self.entry_id = entry_id
