"""Journal storage interface."""

from typing import Protocol

from ..core.journal import Journal


class JournalStore(Protocol):
    """Interface for loading and persisting the whole journal."""

    def load(self) -> Journal:
        """Load the journal, creating empty storage if none exists yet."""
        ...

    def save(self, journal: Journal) -> None:
        """Persist the journal, replacing whatever was stored before."""
        ...
