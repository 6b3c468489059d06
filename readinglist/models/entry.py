"""Reading-list entry and roundup association models."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Entry:
    """A single tracked URL with its journal context and read status."""

    url: str
    source_date: Optional[str] = None
    original_text: Optional[str] = None
    body_text: Optional[str] = None
    # None: unknown, False: unread, True: read
    read: Optional[bool] = None

    # Database fields (set after persistence)
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.source_date}: {self.url} -- {self.body_text or ''}"


@dataclass(frozen=True)
class RoundupAssociation:
    """Records that an entry was included in the roundup for a date."""

    date: str
    entry: int
