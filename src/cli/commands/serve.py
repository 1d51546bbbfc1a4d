"""Run the JSON API."""

from typing import Optional

import click

from cli.utils import get_components


@click.command()
@click.option("--host", default=None, help="Bind address (default from config)")
@click.option("--port", default=None, type=int, help="Port (default from config)")
def serve(host: Optional[str], port: Optional[int]):
    """Serve the Moodify API with uvicorn."""
    import uvicorn

    c = get_components()
    web = c["config"].web
    uvicorn.run("web.app:app", host=host or web.host, port=port or web.port)
