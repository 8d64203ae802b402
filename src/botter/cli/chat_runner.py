"""Interactive chat runner for Botter CLI."""

import uuid
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from botter.config.loader import ConfigLoader
from botter.config.settings import BotterSettings
from botter.core.errors import ConfigError
from botter.core.message_sink import MessageSink
from botter.core.messages import OutboundMessage, UiHintKind
from botter.dm.engine import DialogueEngine
from botter.observability.logging import setup_logging
from botter.runtime.loop import RuntimeLoop
from botter.session.store import SessionStore

BANNER_ART = r"""
  _           _   _
 | |__   ___ | |_| |_ ___ _ __
 | '_ \ / _ \| __| __/ _ \ '__|
 | |_) | (_) | |_| ||  __/ |
 |_.__/ \___/ \__|\__\___|_|
"""


class ConsoleMessageSink(MessageSink):
    """Sink that prints to rich console, rendering quick replies as rows."""

    def __init__(self, console: Console):
        self.console = console

    async def send(self, message: OutboundMessage) -> bool:
        self.console.print(f"[bold blue]Botter > [/]{escape(message.text)}")
        hint = message.ui_hint
        if hint.kind is UiHintKind.SHOW_MENU:
            for row in hint.rows:
                labels = "  ".join(f"[cyan]{escape(f'[{label}]')}[/]" for label in row)
                self.console.print(f"  {labels}")
        elif hint.kind is UiHintKind.CLEAR_MENU:
            self.console.print("[dim](menu closed)[/]")
        self.console.print()
        return True


@dataclass
class ChatConfig:
    """Configuration for chat runner."""

    config_path: Path | None = None
    user_id: str | None = None
    debug: bool = False


class ChatRunner:
    """Interactive chat session runner.

    Reads lines from the terminal and feeds them to a RuntimeLoop as
    messages from a single user.
    """

    def __init__(self, config: ChatConfig, console: Console | None = None):
        self.config = config
        self.console = console or Console()
        self.runtime: RuntimeLoop | None = None
        self.user_id = config.user_id or f"cli_{uuid.uuid4().hex[:6]}"

    def setup(self) -> None:
        """Load settings and build the runtime.

        Raises:
            ConfigError: If config is invalid
        """
        try:
            settings = self._load_settings()
        except (ConfigError, FileNotFoundError) as e:
            self.console.print(f"[red]Invalid config: {escape(str(e))}[/]")
            raise

        setup_logging(
            level="DEBUG" if self.config.debug else settings.logging.level,
            log_file=settings.logging.file,
        )

        self.runtime = RuntimeLoop(
            store=SessionStore(),
            engine=DialogueEngine(settings.engine),
            sink=ConsoleMessageSink(self.console),
            max_concurrency=settings.runtime.max_concurrency,
        )

    def _load_settings(self) -> BotterSettings:
        if self.config.config_path is not None:
            return ConfigLoader.load(self.config.config_path)
        return ConfigLoader.load_default()

    async def start(self) -> None:
        """Start the interactive session."""
        if self.runtime is None:
            self.setup()

        self.console.print(BANNER_ART, style="bold blue")
        self.console.print(f"Session ID: [green]{self.user_id}[/]")
        self.console.print("Send /start to begin. Type 'exit' or 'quit' to end session.\n")

        while True:
            try:
                user_input = Prompt.ask("[bold green]You[/]", console=self.console)
            except (KeyboardInterrupt, EOFError):
                self.console.print("\n[yellow]Goodbye![/]")
                break

            if self._is_exit_command(user_input):
                self.console.print("\n[yellow]Goodbye![/]")
                break

            if self.runtime is not None:
                await self.runtime.process_message(user_input, user_id=self.user_id)

    def _is_exit_command(self, user_input: str) -> bool:
        """Check if input is an exit command."""
        return user_input.strip().lower() in ("quit", "exit", "q")


async def run_chat_session(config: ChatConfig) -> None:
    """Run an interactive chat session.

    Args:
        config: Chat configuration
    """
    runner = ChatRunner(config)
    await runner.start()
