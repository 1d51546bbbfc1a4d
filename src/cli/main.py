"""Moodify command-line entry point."""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.commands import (  # noqa: E402
    chart,
    distribution,
    history,
    log,
    prefs,
    profile,
    reset,
    seed,
    serve,
    stats,
    today,
)
from cli.config import load_config_model  # noqa: E402
from cli.logging_config import setup_logging  # noqa: E402

console = Console()


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to config.yaml",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None):
    """Moodify - daily mood journal with sentiment insights."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

    try:
        config = load_config_model(config_path)
    except ValueError as e:
        console.print(f"[red]Config error:[/] {escape(str(e))}")
        sys.exit(1)

    setup_logging(
        json_mode=config.logging.json_mode,
        level="DEBUG" if verbose else config.logging.level,
        log_file=config.paths.log_file,
        file_level=config.logging.file_level,
    )


for command in (log, today, history, stats, chart, distribution, profile, prefs, seed, reset, serve):
    cli.add_command(command)


if __name__ == "__main__":
    cli()
