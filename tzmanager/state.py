"""
Persistence for the time zone that was active before the first change.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class SavedZoneStore:
    """One-line text file holding the saved time zone identifier."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> str:
        """Return the trimmed identifier; empty if the file holds nothing usable."""
        try:
            return self.path.read_text(encoding='utf-8').strip()
        except UnicodeDecodeError:
            logger.warning("Ignoring unreadable time zone record %s", self.path)
            return ""

    def write(self, identifier: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(identifier.strip(), encoding='utf-8')
        logger.debug("Saved time zone %r to %s", identifier.strip(), self.path)

    def delete(self) -> None:
        self.path.unlink(missing_ok=True)
        logger.debug("Removed %s", self.path)
