"""Weekly stats, chart series and distribution CLI commands."""

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components, sparkline

console = Console()


@click.command()
def stats():
    """Show weekly positivity and current streak."""
    from mood.aggregates import streak, weekly_average, weekly_positive_percent

    c = get_components()
    entries = c["store"].entries

    average = weekly_average(entries)
    console.print(f"[bold]This week:[/] {weekly_positive_percent(average)}% positive")
    console.print(f"[bold]Streak:[/] {streak(entries)} days")


@click.command()
@click.option("-d", "--days", default="7", type=click.Choice(["7", "30"]), help="Window length")
def chart(days: str):
    """Show the mood series for the last 7 or 30 days."""
    from mood.charts import month_series, week_series

    c = get_components()
    builder = week_series if days == "7" else month_series
    points = builder(c["store"].entries)

    table = Table(show_header=True, title=f"Mood - last {days} days")
    table.add_column("Date", style="dim")
    table.add_column("Value", justify="right")
    table.add_column("Mood")

    for p in points:
        if p.value is None:
            table.add_row(p.date, "-", "[dim]no entry[/]")
        else:
            table.add_row(p.date, str(p.value), p.mood)

    console.print(table)
    console.print(f"\n{sparkline([p.value for p in points])}")


@click.command()
def distribution():
    """Show how moods split into happy, neutral and sad."""
    from mood.charts import distribution as build_distribution

    c = get_components()
    slices = build_distribution(c["store"].entries)

    if not slices:
        console.print("[yellow]No entries yet. Log a mood to see your distribution.[/]")
        return

    table = Table(show_header=True, title="Mood distribution")
    table.add_column("Group")
    table.add_column("Count", justify="right")
    table.add_column("Share", justify="right")

    for s in slices:
        table.add_row(f"[{s.color}]██[/] {s.name}", str(s.value), f"{s.fraction:.0%}")

    console.print(table)
