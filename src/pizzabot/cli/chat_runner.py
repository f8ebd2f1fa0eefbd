"""Interactive chat runner for the pizzabot CLI."""

import uuid
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt

from pizzabot.config.loader import ConfigLoader
from pizzabot.config.models import BotConfig
from pizzabot.core.constants import ActivityType
from pizzabot.core.message_sink import MessageSink
from pizzabot.core.types import Activity, HeroCard, OutboundMessage
from pizzabot.observability.logging import setup_logging
from pizzabot.runtime.loop import BotRuntime


class ConsoleMessageSink(MessageSink):
    """Sink that prints to rich console."""

    def __init__(self, console: Console):
        self.console = console

    async def send(self, message: OutboundMessage) -> None:
        if isinstance(message, HeroCard):
            body = "\n".join(
                [message.subtitle, message.text]
                + [f"[link={b.value}]{b.title}[/link]" for b in message.buttons]
            )
            self.console.print(Panel(body, title=message.title, border_style="blue"))
            return
        self.console.print(f"[bold blue]Bot > [/]{message}")


@dataclass
class ChatConfig:
    """Configuration for chat runner."""

    config_path: Path | None = None
    conversation_id: str | None = None
    user_id: str = "user"
    log_level: str | None = None
    debug: bool = False


class ChatRunner:
    """Interactive chat session against a local BotRuntime."""

    def __init__(self, config: ChatConfig):
        self.config = config
        self.console = Console()
        self.sink = ConsoleMessageSink(self.console)
        self.conversation_id = config.conversation_id or f"cli_{uuid.uuid4().hex[:6]}"

    def _load_config(self) -> BotConfig:
        if self.config.config_path is None:
            return BotConfig()
        return ConfigLoader.load(self.config.config_path)

    async def run(self) -> None:
        """Run the session until the user quits."""
        from dotenv import load_dotenv

        load_dotenv()

        bot_config = self._load_config()
        setup_logging(self.config.log_level or bot_config.settings.log_level, log_file=None)

        async with BotRuntime(bot_config) as runtime:
            self.console.print(f"Session ID: [green]{self.conversation_id}[/]")
            self.console.print("Type 'exit' or 'quit' to end session.\n")

            await runtime.process_activity(
                Activity(
                    type=ActivityType.conversation_update.value,
                    conversation_id=self.conversation_id,
                    members_added=[self.config.user_id],
                ),
                self.sink,
            )

            while True:
                user_input = Prompt.ask("[bold green]You[/]")
                if self._is_exit_command(user_input):
                    self.console.print("[yellow]Goodbye![/]")
                    break
                if not user_input.strip():
                    continue

                try:
                    await runtime.process_message(
                        user_input,
                        conversation_id=self.conversation_id,
                        user_id=self.config.user_id,
                        sink=self.sink,
                    )
                except Exception as e:
                    if self.config.debug:
                        self.console.print_exception()
                    else:
                        self.console.print(f"[red]Error: {e}[/]")

    @staticmethod
    def _is_exit_command(user_input: str) -> bool:
        return user_input.strip().lower() in ("quit", "exit", "q", "/quit", "/exit")
