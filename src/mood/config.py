"""Configuration management for mood."""

import json
import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path

from platformdirs import user_config_dir

from .errors import ConfigFileError, FileErrorKind, InvalidJournalPath

logger = logging.getLogger(__name__)

APP_NAME = "mood"
CONFIG_NAME = "config.json"
DEFAULT_JOURNAL_NAME = "journal.json"


def get_config_dir() -> Path:
    """Platform config directory for mood, overridable with MOOD_HOME."""
    override = os.environ.get("MOOD_HOME")
    if override:
        return Path(override).expanduser()
    return Path(user_config_dir(APP_NAME))


@dataclass
class MoodConfig:
    """Mood configuration."""

    journal_path: Path
    config_file: Path = field(compare=False, repr=False, default_factory=lambda: get_config_dir() / CONFIG_NAME)

    @classmethod
    def default(cls, config_dir: Path) -> "MoodConfig":
        """Default config keeping the journal next to the config file."""
        return cls(
            journal_path=config_dir / DEFAULT_JOURNAL_NAME,
            config_file=config_dir / CONFIG_NAME,
        )

    def save(self) -> None:
        """Save config to its file, creating the directory if needed."""
        data = json.dumps({"journal_path": str(self.journal_path)}, indent=2) + "\n"
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            self.config_file.write_text(data, encoding="utf-8")
        except OSError as e:
            raise ConfigFileError(FileErrorKind.WRITE, f"{self.config_file}: {e}") from e
        logger.debug(f"Saved config to {self.config_file}")

    @classmethod
    def load(cls, config_file: Path) -> "MoodConfig":
        """Load config from file."""
        try:
            content = config_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigFileError(FileErrorKind.READ, f"{config_file}: {e}") from e

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ConfigFileError(FileErrorKind.PARSE, f"{config_file}: {e}") from e

        journal_path = data.get("journal_path") if isinstance(data, dict) else None
        if not isinstance(journal_path, str) or not journal_path:
            raise ConfigFileError(FileErrorKind.PARSE, f"{config_file}: missing 'journal_path'")

        logger.debug(f"Loaded config from {config_file}")
        return cls(journal_path=Path(journal_path), config_file=config_file)


def resolve_or_create(config_dir: Path | None = None) -> MoodConfig:
    """Load the config, writing a default one on first run."""
    config_dir = config_dir or get_config_dir()
    config_file = config_dir / CONFIG_NAME

    if config_dir.is_dir():
        if config_file.is_file():
            return MoodConfig.load(config_file)
    else:
        logger.info(f"Creating config dir {config_dir}")
        try:
            config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigFileError(FileErrorKind.WRITE, f"{config_dir}: {e}") from e

    config = MoodConfig.default(config_dir)
    logger.info(f"Writing default config to {config_file}")
    config.save()
    return config


def parse_journal_path(value: str) -> Path:
    """Parse a user-supplied journal file path."""
    cleaned = value.rstrip("\r\n")
    if not cleaned.strip() or "\x00" in cleaned:
        raise InvalidJournalPath(value)
    try:
        return Path(cleaned).expanduser().absolute()
    except RuntimeError:
        # ~user for an unknown user
        raise InvalidJournalPath(value) from None


def update_journal_path(config: MoodConfig, value: str) -> None:
    """Point the config at a new journal file and persist it.

    Leaves the config untouched if the path does not parse or cannot be saved.
    """
    updated = replace(config, journal_path=parse_journal_path(value))
    updated.save()
    config.journal_path = updated.journal_path
