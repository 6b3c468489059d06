"""Markdown export service for roundups."""

from pathlib import Path
from typing import Iterable, Union

from readinglist.models.entry import Entry
from readinglist.utils.dates import DateLike, to_iso_date


class RoundupExporter:
    """Service for exporting a roundup's entries to Markdown."""

    def __init__(self, export_dir: Union[Path, str]):
        """Initialize exporter.

        Args:
            export_dir: Directory to save exported markdown files
        """
        self.export_dir = Path(export_dir)
        self.export_dir.mkdir(parents=True, exist_ok=True)

    def render(self, roundup_date: DateLike, entries: Iterable[Entry]) -> str:
        """Render a roundup as Markdown with front matter.

        Each entry becomes one paragraph: its body text, or its URL when no
        body text has been written yet.
        """
        day = to_iso_date(roundup_date)
        lines = [
            "---",
            f'title: "Reading Roundup, {day}"',
            f"date: {day}",
            "---",
            "",
        ]
        for entry in entries:
            lines.append(entry.body_text or entry.url)
            # Blank line as paragraph break
            lines.append("")
        return "\n".join(lines) + "\n"

    def export(self, roundup_date: DateLike, entries: Iterable[Entry]) -> Path:
        """Export a roundup to a markdown file named by its date.

        Returns:
            Path to the created markdown file
        """
        day = to_iso_date(roundup_date)
        filepath = self.export_dir / f"{day}.md"

        # Write to file (overwrites if exists)
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(self.render(day, entries))

        return filepath
