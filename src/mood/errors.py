"""Error types for the mood journal."""

from datetime import date
from enum import Enum


class FileErrorKind(Enum):
    """Which file operation failed."""

    READ = "read failure"
    PARSE = "parse failure"
    WRITE = "write failure"


class MoodError(Exception):
    """Base class for all mood errors. Carries the CLI exit code."""

    exit_code = 1


class ConfigFileError(MoodError):
    """Raised when the configuration file cannot be read, parsed or written."""

    exit_code = 3

    def __init__(self, kind: FileErrorKind, detail: str):
        self.kind = kind
        self.detail = detail
        super().__init__(f"Failed an operation related to the configuration file ({kind.value}): {detail}")


class JournalFileError(MoodError):
    """Raised when the journal file cannot be read, parsed or written."""

    exit_code = 4

    def __init__(self, kind: FileErrorKind, detail: str):
        self.kind = kind
        self.detail = detail
        super().__init__(f"Failed an operation related to the journal file ({kind.value}): {detail}")


class InvalidDateRange(MoodError):
    """Raised when a range query ends before it starts."""

    exit_code = 5

    def __init__(self, start: date, end: date):
        self.start = start
        self.end = end
        super().__init__(f"Invalid range: {end.isoformat()} is before {start.isoformat()}")


class InvalidJournalPath(MoodError):
    """Raised when a user-supplied journal path cannot be parsed."""

    exit_code = 6

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Expected a valid journal file path, got {value!r}")
