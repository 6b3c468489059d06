"""SQLite schema for the reading list and roundup index."""

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS reading_list (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    url TEXT NOT NULL UNIQUE,
    -- Journal date the URL was found on; YYYY-MM-DD
    source_date TEXT NOT NULL DEFAULT (date('now')),
    -- Journal line as written, before any cleanup
    original_text TEXT,
    body_text TEXT,
    -- NULL: unknown, 0: unread, 1: read
    read INTEGER
);

CREATE TABLE IF NOT EXISTS roundup_contents (
    date TEXT NOT NULL DEFAULT (date('now')),
    entry INTEGER NOT NULL REFERENCES reading_list(id),
    PRIMARY KEY (date, entry)
);

CREATE INDEX IF NOT EXISTS idx_roundup_entry ON roundup_contents(entry);
"""

ENTRY_COLUMNS = "id, url, source_date, original_text, body_text, read"
