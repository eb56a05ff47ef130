"""mood CLI - personal mood journal."""

import json
import logging
import sys
from datetime import date
from typing import NoReturn

import click

from .config import MoodConfig, resolve_or_create
from .core.journal import Journal, JournalEntry
from .core.rating import Rating
from .errors import InvalidDateRange, InvalidJournalPath, MoodError
from .workflows import (
    add_entry,
    get_entry,
    list_entries,
    load_journal,
    resolve_list_range,
    set_journal_path,
)


def _parse_date(ctx, param, value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"expected YYYY-MM-DD, got {value!r}")


def _fail(e: MoodError) -> NoReturn:
    click.echo(f"Error: {e}", err=True)
    sys.exit(e.exit_code)


def _load_config() -> MoodConfig:
    try:
        return resolve_or_create()
    except MoodError as e:
        _fail(e)


def _load_journal(config: MoodConfig) -> Journal:
    try:
        return load_journal(config)
    except MoodError as e:
        _fail(e)


def _format_entry(entry: JournalEntry) -> str:
    return f"[{entry.date.isoformat()}]\t{entry.mood.label}\t{entry.note}"


def _entries_json(entries: list[JournalEntry]) -> str:
    return json.dumps([e.to_dict() for e in entries], indent=2, ensure_ascii=False)


@click.group()
@click.version_option(package_name="mood-journal")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """mood - Personal mood journal."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command()
@click.argument("rating", type=click.Choice(Rating.labels(), case_sensitive=False))
@click.argument("note", required=False)
def add(rating: str, note: str | None):
    """Add today's entry to the journal."""
    config = _load_config()
    journal = _load_journal(config)

    try:
        previous = add_entry(config, journal, Rating.from_label(rating), note)
    except MoodError as e:
        _fail(e)

    if previous is not None:
        click.echo(f"Replaced entry for {previous.date.isoformat()} ({previous.mood.label}).")
    else:
        click.echo("Entry added.")


@main.command()
@click.argument("target_date", metavar="[DATE]", required=False, callback=_parse_date)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def get(target_date: date | None, as_json: bool):
    """Get the entry for a date (YYYY-MM-DD), defaults to today."""
    config = _load_config()
    journal = _load_journal(config)

    entry = get_entry(journal, target_date)

    if as_json:
        click.echo(json.dumps(entry.to_dict() if entry else None, indent=2, ensure_ascii=False))
        return

    if entry is None:
        click.echo("No entry found.")
        return

    click.echo(_format_entry(entry))


@main.command("list")
@click.option("--from", "start", default=None, callback=_parse_date,
              help="First date to list (YYYY-MM-DD), defaults to two weeks ago")
@click.option("--to", "end", default=None, callback=_parse_date,
              help="Last date to list (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_cmd(start: date | None, end: date | None, as_json: bool):
    """List journal entries in a date range."""
    config = _load_config()
    journal = _load_journal(config)

    start, end = resolve_list_range(start, end)
    try:
        entries = list_entries(journal, start, end)
    except InvalidDateRange as e:
        _fail(e)

    if as_json:
        click.echo(_entries_json(entries))
        return

    click.echo()
    click.echo(f"Listing entries from {start.isoformat()} to {end.isoformat()}")
    click.echo("---------------------------------------")
    for entry in entries:
        click.echo(_format_entry(entry))
    click.echo()


@main.command()
@click.option("--file", "-f", "path", required=True,
              help="Path to the journal file (not just its directory). Created if missing.")
def config(path: str):
    """Set where the journal is stored."""
    cfg = _load_config()

    try:
        set_journal_path(cfg, path)
    except InvalidJournalPath as e:
        click.echo(f"{e}. Keeping old path {cfg.journal_path}", err=True)
        sys.exit(e.exit_code)
    except MoodError as e:
        _fail(e)

    click.echo(f"Journal path set to {cfg.journal_path}")


if __name__ == "__main__":
    main()
