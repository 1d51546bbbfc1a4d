"""Sample data and reset CLI commands."""

import click
from rich.console import Console

from cli.utils import get_components

console = Console()


@click.command()
def seed():
    """Add a few days of demo entries."""
    from mood.samples import sample_entries

    c = get_components()
    store = c["store"]
    # sample_entries is newest first; add oldest first so the newest ends up in front
    for entry in reversed(sample_entries()):
        store.add(entry)
    c["kv"].save_entries(store)
    console.print(f"[green]Added[/] 4 sample entries ({len(store)} total)")


@click.command()
@click.option("--yes", is_flag=True, help="Skip confirmation")
def reset(yes: bool):
    """Forget your profile and all entries. Preferences are kept."""
    if not yes:
        click.confirm("Delete your profile and all mood entries?", abort=True)

    c = get_components()
    c["kv"].reset()
    console.print("[yellow]Profile and entries cleared.[/]")
