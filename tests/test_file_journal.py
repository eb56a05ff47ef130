"""Tests for the JSON file journal adapter."""

import json
from datetime import date

import pytest

from mood.adapters.file_journal import FileJournalStore
from mood.core.journal import Journal, JournalEntry
from mood.core.rating import Rating
from mood.errors import FileErrorKind, JournalFileError


@pytest.fixture
def journal_path(tmp_path):
    return tmp_path / "nested" / "dir" / "journal.json"


@pytest.fixture
def sample_journal():
    return Journal(
        [
            JournalEntry(date(2025, 1, 14), Rating.BAD, "Rough day"),
            JournalEntry(date(2025, 1, 15), Rating.GREAT, "Café with friends"),
            JournalEntry(date(2025, 1, 16), Rating.NEUTRAL, ""),
        ]
    )


class TestLoad:
    def test_creates_directory_and_empty_file(self, journal_path):
        journal = FileJournalStore(journal_path).load()

        assert journal.is_empty()
        assert journal_path.parent.is_dir()
        assert journal_path.is_file()
        assert journal_path.read_text() == ""

    def test_empty_file_loads_as_empty_journal(self, journal_path):
        store = FileJournalStore(journal_path)
        store.load()

        assert store.load().is_empty()

    def test_whitespace_file_loads_as_empty_journal(self, tmp_path):
        path = tmp_path / "journal.json"
        path.write_text("\n  \n")
        assert FileJournalStore(path).load().is_empty()

    def test_invalid_json_raises_read_failure(self, tmp_path):
        path = tmp_path / "journal.json"
        path.write_text("{not json")

        with pytest.raises(JournalFileError) as exc:
            FileJournalStore(path).load()

        assert exc.value.kind == FileErrorKind.READ
        assert str(path) in exc.value.detail

    def test_bad_entry_raises_read_failure(self, tmp_path):
        path = tmp_path / "journal.json"
        path.write_text(json.dumps({"entries": [{"date": "2025-01-15", "mood": "Meh"}]}))

        with pytest.raises(JournalFileError) as exc:
            FileJournalStore(path).load()

        assert exc.value.kind == FileErrorKind.READ

    def test_missing_field_raises_read_failure(self, tmp_path):
        path = tmp_path / "journal.json"
        path.write_text(json.dumps({"entries": [{"mood": "Good"}]}))

        with pytest.raises(JournalFileError):
            FileJournalStore(path).load()

    def test_unknown_user_home_raises(self):
        with pytest.raises(JournalFileError) as exc:
            FileJournalStore("~nosuchuser_mood_test/journal.json")

        assert exc.value.kind == FileErrorKind.READ

    def test_expands_user_path(self):
        store = FileJournalStore("~/mood/journal.json")
        assert "~" not in str(store.journal_path)


class TestSave:
    def test_roundtrip(self, journal_path, sample_journal):
        store = FileJournalStore(journal_path)
        store.load()
        store.save(sample_journal)

        assert store.load() == sample_journal

    def test_file_is_human_readable(self, journal_path, sample_journal):
        store = FileJournalStore(journal_path)
        store.load()
        store.save(sample_journal)

        content = journal_path.read_text(encoding="utf-8")
        assert '"date": "2025-01-15"' in content
        assert '"mood": "Great"' in content
        assert "Café with friends" in content

    def test_truncates_previous_content(self, journal_path, sample_journal):
        store = FileJournalStore(journal_path)
        store.load()
        store.save(sample_journal)
        store.save(Journal([JournalEntry(date(2025, 2, 1), Rating.GOOD)]))

        data = json.loads(journal_path.read_text())
        assert data == {"entries": [{"date": "2025-02-01", "mood": "Good", "note": ""}]}

    def test_unencodable_note_keeps_previous_contents(self, journal_path, sample_journal):
        store = FileJournalStore(journal_path)
        store.load()
        store.save(sample_journal)
        before = journal_path.read_bytes()

        sample_journal.upsert(JournalEntry(date(2025, 1, 17), Rating.GOOD, "bad \udcff bytes"))
        with pytest.raises(JournalFileError) as exc:
            store.save(sample_journal)

        assert exc.value.kind == FileErrorKind.WRITE
        assert journal_path.read_bytes() == before

    def test_write_failure(self, tmp_path, sample_journal):
        # Parent directory does not exist and save does not create it
        store = FileJournalStore(tmp_path / "missing" / "journal.json")

        with pytest.raises(JournalFileError) as exc:
            store.save(sample_journal)

        assert exc.value.kind == FileErrorKind.WRITE
