"""Service layer."""

from readinglist.services.export_service import RoundupExporter

__all__ = ["RoundupExporter"]
