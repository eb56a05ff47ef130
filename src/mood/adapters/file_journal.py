"""File-based journal storage adapter."""

import json
import logging
from pathlib import Path

from ..core.journal import Journal
from ..errors import FileErrorKind, JournalFileError

logger = logging.getLogger(__name__)


class FileJournalStore:
    """
    JSON file journal storage.

    Implements JournalStore protocol. The whole journal lives in a single
    file, rewritten in full on every save.
    """

    def __init__(self, journal_path: Path | str):
        try:
            self.journal_path = Path(journal_path).expanduser()
        except RuntimeError as e:
            raise JournalFileError(FileErrorKind.READ, f"{journal_path}: {e}") from e

    def load(self) -> Journal:
        """Read the journal, creating the file (and its directory) if missing."""
        try:
            self.journal_path.parent.mkdir(parents=True, exist_ok=True)
            if not self.journal_path.exists():
                logger.info(f"Creating empty journal at {self.journal_path}")
                self.journal_path.touch()
                return Journal()
            content = self.journal_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise JournalFileError(FileErrorKind.READ, f"{self.journal_path}: {e}") from e

        # A freshly created file is empty until the first save
        if not content.strip():
            return Journal()

        try:
            journal = Journal.from_dict(json.loads(content))
        except (ValueError, KeyError, TypeError) as e:
            raise JournalFileError(FileErrorKind.READ, f"{self.journal_path}: {e}") from e

        logger.debug(f"Loaded {len(journal)} entries from {self.journal_path}")
        return journal

    def save(self, journal: Journal) -> None:
        """Write the full journal, truncating the previous contents."""
        # Encode before opening so a bad note cannot truncate the existing file
        try:
            data = (json.dumps(journal.to_dict(), indent=2, ensure_ascii=False) + "\n").encode("utf-8")
        except UnicodeEncodeError as e:
            raise JournalFileError(FileErrorKind.WRITE, f"{self.journal_path}: {e}") from e

        try:
            self.journal_path.write_bytes(data)
        except OSError as e:
            raise JournalFileError(FileErrorKind.WRITE, f"{self.journal_path}: {e}") from e
        logger.debug(f"Saved {len(journal)} entries to {self.journal_path}")
