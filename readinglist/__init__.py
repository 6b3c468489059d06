"""Reading list - storage for journal links and dated reading roundups.

Tracks URLs harvested from a journal, whether they have been read,
and which dated roundup posts have included them.
"""

__version__ = "0.1.0"

from readinglist.config import Settings
from readinglist.models.entry import Entry, RoundupAssociation

__all__ = ["Entry", "RoundupAssociation", "Settings", "__version__"]
