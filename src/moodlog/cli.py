"""moodlog CLI - daily mood journal."""

import asyncio
import json
import logging
import mimetypes
import sys
from datetime import date, datetime
from pathlib import Path

import click

from .config import Config, load_config
from .core.datekey import format_key, today_key
from .core.entry import DEFAULT_MOOD, MOOD_MAX, MOOD_MIN, JournalEntry
from .core.mood import Mood, average_mood, classify, count_buckets
from .errors import MoodlogError
from .profile import avatar_data_uri
from .workflows import Stores, open_stores

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_TYPE = click.DateTime(formats=["%Y-%m-%d"])


def _run(coro):
    """Run one store operation, turning moodlog errors into a clean exit."""
    try:
        return asyncio.run(coro)
    except MoodlogError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _open() -> tuple[Config, Stores]:
    config = load_config()
    return config, open_stores(config)


def _key(value: datetime | None) -> str:
    return format_key(value) if value else today_key()


def _sparkline(values: list[float], vmin: float = MOOD_MIN, vmax: float = MOOD_MAX) -> str:
    if not values:
        return ""
    blocks = "▁▂▃▄▅▆▇█"
    span = max(1e-9, vmax - vmin)
    out = []
    for v in values:
        idx = int(round((v - vmin) / span * (len(blocks) - 1)))
        out.append(blocks[max(0, min(len(blocks) - 1, idx))])
    return "".join(out)


def _emoji(mood: float | None) -> str:
    return classify(mood).emoji if mood is not None else "·"


def _entry_json(key: str, entry: JournalEntry) -> dict:
    return {
        "date": key,
        "title": entry.title,
        "body": entry.body,
        "mood": entry.mood,
        "class": classify(entry.mood).value if entry.mood is not None else None,
    }


@click.group()
@click.version_option(package_name="moodlog")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """moodlog - one mood journal entry per day."""
    level = logging.DEBUG if debug else getattr(logging, load_config().log_level, logging.WARNING)
    logging.basicConfig(format=LOG_FORMAT, level=level)


@main.command()
@click.option("--date", "-d", "target_date", type=DATE_TYPE, default=None,
              help="Entry date (YYYY-MM-DD), defaults to today")
@click.option("--title", "-t", default=None, help="Entry title")
@click.option("--body", "-b", default=None, help="Entry text")
@click.option("--mood", "-m", type=float, default=None, help=f"Mood from {MOOD_MIN} to {MOOD_MAX}")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing entry without asking")
def add(target_date: datetime | None, title: str | None, body: str | None, mood: float | None, force: bool):
    """Record the entry for a day."""
    _, stores = _open()
    key = _key(target_date)

    if not force and _run(stores.entries.exists(key)):
        if not click.confirm(f"An entry for {key} already exists. Replace it?"):
            return

    if title is None:
        title = click.prompt("Title", default="", show_default=False)
    if body is None:
        body = click.prompt("How was your day?", default="", show_default=False)
    if mood is None:
        mood = click.prompt(f"Mood ({MOOD_MIN}-{MOOD_MAX})", type=float, default=DEFAULT_MOOD)

    entry = JournalEntry(title=title.strip(), body=body.strip(), mood=mood)
    _run(stores.entries.save(key, entry))
    click.echo(f"✓ Entry saved for {key} {_emoji(entry.mood)}")


@main.command()
@click.argument("target_date", type=DATE_TYPE, required=False)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def show(target_date: datetime | None, as_json: bool):
    """Show the entry for a day (default: today)."""
    _, stores = _open()
    key = _key(target_date)
    entry = _run(stores.entries.load(key))

    if entry is None:
        if as_json:
            click.echo("null")
        else:
            click.echo(f"No entry for {key}.")
        return

    if as_json:
        click.echo(json.dumps(_entry_json(key, entry), indent=2, ensure_ascii=False))
        return

    mood_text = f"({entry.mood:.1f})" if entry.mood is not None else "(no mood)"
    click.echo(f"{key}  {_emoji(entry.mood)} {mood_text}")
    if entry.title:
        click.echo(f"## {entry.title}")
    if entry.body:
        click.echo()
        click.echo(entry.body)


@main.command()
@click.argument("target_date", type=DATE_TYPE)
@click.option("--date", "-d", "new_date", type=DATE_TYPE, default=None, help="Move the entry to this date")
@click.option("--title", "-t", default=None, help="New title")
@click.option("--body", "-b", default=None, help="New text")
@click.option("--mood", "-m", type=float, default=None, help="New mood")
def edit(target_date: datetime, new_date: datetime | None, title: str | None, body: str | None, mood: float | None):
    """Edit an existing entry, optionally changing its date."""
    _, stores = _open()
    key = format_key(target_date)
    entry = _run(stores.entries.load(key))
    if entry is None:
        click.echo(f"Error: no entry for {key}", err=True)
        sys.exit(1)

    current_mood = entry.mood if entry.mood is not None else DEFAULT_MOOD

    # Nothing given on the command line: edit interactively
    if new_date is None and title is None and body is None and mood is None:
        title = click.prompt("Title", default=entry.title)
        body = click.prompt("Text", default=entry.body)
        mood = click.prompt(f"Mood ({MOOD_MIN}-{MOOD_MAX})", type=float, default=current_mood)

    updated = JournalEntry(
        title=entry.title if title is None else title,
        body=entry.body if body is None else body,
        mood=current_mood if mood is None else mood,
    )
    new_key = format_key(new_date) if new_date else key
    _run(stores.entries.rename(key, new_key, updated))

    if new_key != key:
        click.echo(f"✓ Entry moved from {key} to {new_key}")
    else:
        click.echo(f"✓ Entry for {key} updated")


@main.command()
@click.argument("target_date", type=DATE_TYPE)
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
def delete(target_date: datetime, yes: bool):
    """Delete the entry for a day."""
    _, stores = _open()
    key = format_key(target_date)
    if not yes and not click.confirm(f"Delete the entry for {key}?"):
        return
    _run(stores.entries.delete(key))
    click.echo(f"✓ Entry for {key} deleted")


@main.command("list")
@click.option("--from", "start", type=DATE_TYPE, default=None, help="Earliest date (YYYY-MM-DD)")
@click.option("--to", "end", type=DATE_TYPE, default=None, help="Latest date (YYYY-MM-DD)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_entries(start: datetime | None, end: datetime | None, as_json: bool):
    """List entries, most recent first."""
    config, stores = _open()
    entries = _run(
        stores.entries.list_range(
            start.date() if start else None,
            end.date() if end else None,
            strict=config.strict_listing,
        )
    )

    if as_json:
        click.echo(json.dumps([_entry_json(k, e) for k, e in entries], indent=2, ensure_ascii=False))
        return

    if not entries:
        click.echo("No entries yet.")
        return

    for key, entry in entries:
        title = entry.title or (entry.body.splitlines() or [""])[0]
        click.echo(f"{date.fromisoformat(key).strftime('%d/%m/%Y')}  {_emoji(entry.mood)}  {title}")


@main.command()
def chart():
    """Show the mood trend, oldest first."""
    config, stores = _open()
    series = _run(stores.moods.series(strict=config.strict_listing))

    if not series:
        click.echo("No entries yet.")
        return

    moods = [mood for _, mood in series]
    first, last = series[0][0], series[-1][0]
    click.echo(f"{first.isoformat()} → {last.isoformat()} ({len(series)} days)")
    click.echo(_sparkline(moods))
    click.echo(f"Average: {average_mood(series):.2f}")

    counts = count_buckets(series)
    click.echo()
    for m in Mood:
        bar = "▇" * min(counts[m], 30)
        click.echo(f"{m.emoji} {m.value:<8} {counts[m]:>3} {bar}")


@main.group()
def profile():
    """Show or change your profile."""
    pass


@profile.command("show")
def profile_show():
    """Show the display name and avatar status."""
    _, stores = _open()
    p = _run(stores.profile.load())
    click.echo(f"Name:   {p.display_name or '(not set)'}")
    click.echo(f"Avatar: {'set' if p.avatar else 'none'}")


@profile.command("set")
@click.option("--name", "-n", default=None, help="Display name")
@click.option("--avatar", "-a", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              default=None, help="Image file to use as avatar")
def profile_set(name: str | None, avatar: Path | None):
    """Change the display name and, optionally, the avatar."""
    _, stores = _open()
    if name is None:
        current = _run(stores.profile.load())
        name = click.prompt("Name", default=current.display_name)

    avatar_uri = None
    if avatar is not None:
        mime_type, _ = mimetypes.guess_type(avatar.name)
        try:
            avatar_uri = avatar_data_uri(avatar.read_bytes(), mime_type or "image/jpeg")
        except (MoodlogError, OSError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    _run(stores.profile.save(name.strip(), avatar_uri))
    click.echo("✓ Profile saved")


if __name__ == "__main__":
    main()
