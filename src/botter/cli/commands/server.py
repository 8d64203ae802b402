"""Server command to start the HTTP gateway."""

import os
from pathlib import Path

import typer
import uvicorn

from botter.config.loader import CONFIG_PATH_ENV, ConfigLoader
from botter.core.errors import ConfigError

app = typer.Typer(help="Start API server")


@app.callback(invoke_without_command=True)
def start_server(
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to botter.yaml", exists=True
    ),
    host: str = typer.Option("0.0.0.0", "--host", "-h"),
    port: int = typer.Option(8000, "--port", "-p"),
    reload: bool = typer.Option(False, "--reload"),
) -> None:
    """Start the Botter API server."""

    # 1. Validate config; the server process loads it again from the environment
    if config is not None:
        try:
            ConfigLoader.load(config)
        except (ConfigError, FileNotFoundError) as e:
            typer.echo(f"Invalid config: {e}", err=True)
            raise typer.Exit(1)
        os.environ[CONFIG_PATH_ENV] = str(config.absolute())

    typer.echo(f"Starting Botter server on http://{host}:{port}")
    if config is not None:
        typer.echo(f"   Config: {config}")

    uvicorn.run(
        "botter.server.api:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info",
    )
