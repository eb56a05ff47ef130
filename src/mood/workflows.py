"""Shared workflow layer - the operations behind each CLI command."""

import logging
from datetime import date, timedelta

from .adapters.file_journal import FileJournalStore
from .config import MoodConfig, update_journal_path
from .core.journal import Journal, JournalEntry
from .core.rating import Rating
from .ports.journal_store import JournalStore

logger = logging.getLogger(__name__)

DEFAULT_LIST_DAYS = 14


def get_journal_store(config: MoodConfig) -> JournalStore:
    """Resolve the journal store from config."""
    return FileJournalStore(config.journal_path)


def load_journal(config: MoodConfig) -> Journal:
    """Load the journal the config points at, creating it on first use."""
    return get_journal_store(config).load()


def add_entry(
    config: MoodConfig,
    journal: Journal,
    mood: Rating,
    note: str | None = None,
    today: date | None = None,
    store: JournalStore | None = None,
) -> JournalEntry | None:
    """Record today's mood and save. Returns the entry it replaced, if any."""
    entry = JournalEntry(date=today or date.today(), mood=mood, note=note or "")
    previous = journal.upsert(entry)
    store = store or get_journal_store(config)
    store.save(journal)
    if previous is not None:
        logger.info(f"Replaced entry for {entry.date.isoformat()}")
    return previous


def get_entry(
    journal: Journal, target_date: date | None = None, today: date | None = None
) -> JournalEntry | None:
    """Entry for a date, defaulting to today."""
    return journal.lookup(target_date or today or date.today())


def resolve_list_range(
    start: date | None, end: date | None, today: date | None = None
) -> tuple[date, date]:
    """
    Fill in missing list bounds.

    A missing start means two weeks before today, a missing end means today.
    """
    today = today or date.today()
    if start is None:
        start = today - timedelta(days=DEFAULT_LIST_DAYS)
    if end is None:
        end = today
    return start, end


def list_entries(
    journal: Journal,
    start: date | None = None,
    end: date | None = None,
    today: date | None = None,
) -> list[JournalEntry]:
    """Entries in the (defaulted) range, oldest first."""
    start, end = resolve_list_range(start, end, today)
    return journal.range_query(start, end)


def set_journal_path(config: MoodConfig, value: str) -> None:
    """Change where the journal lives. The journal file itself is not moved."""
    update_journal_path(config, value)
    logger.info(f"Journal path set to {config.journal_path}")
