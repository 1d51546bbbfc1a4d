"""Shared CLI utilities."""

import random
from pathlib import Path
from typing import Optional

import click
import structlog
from rich.console import Console

console = Console()
logger = structlog.get_logger()


def get_components(config_path: Optional[Path] = None) -> dict:
    """Initialize config, persistence and the loaded entry store."""
    from cli.config import get_paths, load_config_model
    from mood.kv_store import KeyValueStore

    ctx = click.get_current_context(silent=True)
    if config_path is None and ctx is not None and ctx.obj:
        config_path = ctx.obj.get("config_path")

    config = load_config_model(config_path)
    paths = get_paths(config)
    kv = KeyValueStore(paths["db_file"])

    seed = config.sentiment.seed
    return {
        "config": config,
        "paths": paths,
        "kv": kv,
        "store": kv.load_entries(),
        "rng": random.Random(seed) if seed is not None else None,
    }


def sparkline(values: list[Optional[int]]) -> str:
    """Render 1-5 values as block characters; None renders as a gap."""
    blocks = "▁▃▄▆█"
    return "".join("·" if v is None else blocks[v - 1] for v in values)
