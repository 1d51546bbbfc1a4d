"""Mood logging CLI commands."""

import asyncio
from datetime import datetime, timezone

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cli.utils import get_components
from mood.values import mood_emoji, mood_label
from shared_types import Mood

console = Console()

LABEL_STYLE = {
    "POSITIVE": "green",
    "NEGATIVE": "red",
    "NEUTRAL": "yellow",
}


@click.command()
@click.argument("mood", type=click.Choice([m.value for m in Mood]))
@click.argument("text", required=False)
def log(mood: str, text: str):
    """Log today's MOOD with a short reflection. Opens editor if no TEXT given."""
    from mood.insights import pick_insight

    c = get_components()

    if not text:
        text = click.edit("\n")
    if not text or not text.strip():
        raise click.BadParameter("reflection text must not be empty", param_hint="TEXT")

    store = c["store"]
    with console.status("Analyzing..."):
        entry = asyncio.run(
            store.log(
                mood,
                text,
                rng=c["rng"],
                delay=c["config"].sentiment.latency_seconds,
            )
        )
    c["kv"].save_entries(store)

    style = LABEL_STYLE.get(entry.sentiment.label, "dim")
    console.print(
        f"[green]Logged[/] {mood_emoji(entry.mood)} {mood_label(entry.mood)}  "
        f"[{style}]{entry.sentiment.label.lower()}[/] ({entry.sentiment.score:.0%})"
    )
    console.print(f"[italic]{pick_insight(entry.sentiment.label, c['rng'])}[/]")


@click.command()
def today():
    """Show today's mood."""
    from mood.aggregates import todays_entry

    c = get_components()
    entry = todays_entry(c["store"])
    if not entry:
        console.print("[yellow]No mood logged today.[/] Run [bold]moodify log[/] to add one.")
        return

    style = LABEL_STYLE.get(entry.sentiment.label, "dim")
    console.print(f"{mood_emoji(entry.mood)} [bold]{mood_label(entry.mood)}[/]")
    console.print(escape(entry.text))
    console.print(
        f"[{style}]AI Analysis: {round(entry.sentiment.score * 100)}% "
        f"{entry.sentiment.label.lower()}[/]"
    )


@click.command()
@click.option("-n", "--limit", default=10, help="Max entries to show")
def history(limit: int):
    """List recent entries, newest first."""
    c = get_components()
    entries = c["store"].entries[:limit]

    if not entries:
        console.print("[yellow]No entries yet.[/]")
        return

    table = Table(show_header=True, title="Mood history")
    table.add_column("Date", style="dim")
    table.add_column("Mood")
    table.add_column("Sentiment")
    table.add_column("Entry")

    for e in entries:
        style = LABEL_STYLE.get(e.sentiment.label, "dim")
        table.add_row(
            e.date,
            f"{mood_emoji(e.mood)} {mood_label(e.mood)}",
            f"[{style}]{e.sentiment.label.lower()}[/] {e.sentiment.score:.2f}",
            escape(e.text[:40]),
        )

    console.print(table)
    console.print(f"\nShowing {len(entries)} of {len(c['store'])} entries "
                  f"(as of {datetime.now(timezone.utc):%Y-%m-%d %H:%M} UTC)")
