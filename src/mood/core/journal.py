"""Journal domain logic - a date-ordered collection of mood entries, no I/O."""

import logging
from bisect import bisect_left, bisect_right
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date

from .rating import Rating
from ..errors import InvalidDateRange

logger = logging.getLogger(__name__)


def _entry_date(entry: "JournalEntry") -> date:
    return entry.date


@dataclass(frozen=True)
class JournalEntry:
    """One day's mood and note."""

    date: date
    mood: Rating
    note: str = ""

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "mood": self.mood.label,
            "note": self.note,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "JournalEntry":
        if not isinstance(data, dict):
            raise ValueError(f"Journal entry must be an object, got {type(data).__name__}")
        note = data.get("note", "")
        if not isinstance(note, str):
            raise ValueError(f"Note must be text, got {type(note).__name__}")
        return cls(
            date=date.fromisoformat(data["date"]),
            mood=Rating.from_label(data["mood"]),
            note=note,
        )


class Journal:
    """
    Mood entries kept sorted by date, at most one per day.

    Lookups and insert positions use binary search over the sorted list.
    The journal never persists itself; callers save after mutating.
    """

    def __init__(self, entries: list[JournalEntry] | None = None):
        self._entries: list[JournalEntry] = []
        for entry in entries or []:
            self.upsert(entry)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[JournalEntry]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Journal):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"Journal({self._entries!r})"

    def is_empty(self) -> bool:
        return not self._entries

    @property
    def entries(self) -> tuple[JournalEntry, ...]:
        """All entries, oldest first."""
        return tuple(self._entries)

    def upsert(self, entry: JournalEntry) -> JournalEntry | None:
        """Insert an entry, replacing any entry for the same date.

        Returns the replaced entry, or None if the date was new.
        """
        index = bisect_left(self._entries, entry.date, key=_entry_date)
        if index < len(self._entries) and self._entries[index].date == entry.date:
            previous = self._entries[index]
            self._entries[index] = entry
            return previous
        self._entries.insert(index, entry)
        return None

    def lookup(self, target_date: date) -> JournalEntry | None:
        """Entry for a date, or None if nothing was recorded that day."""
        index = bisect_left(self._entries, target_date, key=_entry_date)
        if index < len(self._entries) and self._entries[index].date == target_date:
            return self._entries[index]
        return None

    def range_query(self, start: date, end: date) -> list[JournalEntry]:
        """Entries with start <= date <= end, oldest first.

        An empty journal returns [] even for a reversed range.
        """
        if self.is_empty():
            return []
        if end < start:
            raise InvalidDateRange(start, end)

        lo = bisect_left(self._entries, start, key=_entry_date)
        hi = bisect_right(self._entries, end, key=_entry_date)
        return self._entries[lo:hi]

    def to_dict(self) -> dict:
        return {"entries": [entry.to_dict() for entry in self._entries]}

    @classmethod
    def from_dict(cls, data: dict) -> "Journal":
        """Build a journal from its serialized form.

        Entries go through upsert, so unsorted input is reordered and a
        repeated date keeps its last occurrence.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Journal must be an object, got {type(data).__name__}")
        raw_entries = data.get("entries", [])
        if not isinstance(raw_entries, list):
            raise ValueError("Journal 'entries' must be a list")

        journal = cls()
        for item in raw_entries:
            if journal.upsert(JournalEntry.from_dict(item)) is not None:
                logger.warning(f"Duplicate journal entry for {item['date']}, keeping the later one")
        return journal
