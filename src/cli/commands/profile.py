"""Profile and preferences CLI commands."""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cli.utils import get_components

console = Console()


@click.group()
def profile():
    """View and edit your profile."""
    pass


@profile.command("show")
def profile_show():
    """Show the stored profile."""
    c = get_components()
    user = c["kv"].load_user()

    badge = " [magenta]Premium[/]" if user.is_premium else ""
    console.print(f"{escape(user.avatar)} [bold]{escape(user.name)}[/]{badge}")
    if user.email:
        console.print(f"[dim]{escape(user.email)}[/]")


@profile.command("set")
@click.option("--name", help="Display name")
@click.option("--email", help="Email address")
@click.option("--avatar", help="Avatar glyph")
def profile_set(name: str, email: str, avatar: str):
    """Update profile fields."""
    c = get_components()
    updates = {k: v for k, v in {"name": name, "email": email, "avatar": avatar}.items() if v is not None}
    if not updates:
        console.print("[yellow]Nothing to update.[/]")
        return

    user = c["kv"].load_user().model_copy(update=updates)
    c["kv"].save_user(user)
    console.print(f"[green]Updated:[/] {', '.join(updates)}")


@profile.command("upgrade")
def profile_upgrade():
    """Upgrade to premium."""
    c = get_components()
    user = c["kv"].load_user()
    if user.is_premium:
        console.print("[dim]Already premium.[/]")
        return

    c["kv"].save_user(user.model_copy(update={"is_premium": True}))
    console.print("🎉 Welcome to Premium! Enjoy your enhanced features.")


_PREF_FIELDS = {
    "daily-reminders": "daily_reminders",
    "weekly-reports": "weekly_reports",
    "share-data": "share_data",
    "ai-analysis": "ai_analysis",
}


@click.group()
def prefs():
    """View and change notification and privacy preferences."""
    pass


@prefs.command("show")
def prefs_show():
    c = get_components()
    current = c["kv"].load_preferences()

    table = Table(show_header=True, title="Preferences")
    table.add_column("Setting")
    table.add_column("Enabled", justify="center")
    for option, field in _PREF_FIELDS.items():
        on = getattr(current, field)
        table.add_row(option, "[green]on[/]" if on else "[dim]off[/]")
    console.print(table)


@prefs.command("set")
@click.argument("setting", type=click.Choice(list(_PREF_FIELDS)))
@click.argument("value", type=click.BOOL)
def prefs_set(setting: str, value: bool):
    """Turn SETTING on or off."""
    c = get_components()
    current = c["kv"].load_preferences()
    c["kv"].save_preferences(current.model_copy(update={_PREF_FIELDS[setting]: value}))
    console.print("Preferences saved successfully! ✅")
