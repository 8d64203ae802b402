"""Main CLI entry point for Botter"""

import typer

from botter import __version__
from botter.cli.commands import chat as chat_module
from botter.cli.commands import server as server_module

app = typer.Typer(
    name="botter",
    help="Botter - a conversational bot that learns facts about its users",
    add_completion=False,
)

# Register subcommands
app.add_typer(chat_module.app, name="chat", help="Chat with the bot in the terminal")
app.add_typer(server_module.app, name="server", help="Start the Botter API server")


def version_callback(value: bool) -> None:
    """Print version and exit"""
    if value:
        typer.echo(f"Botter version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Botter - a conversational bot that learns facts about its users"""
    pass


def cli() -> None:
    """Entry point for CLI"""
    app()


if __name__ == "__main__":
    cli()
