"""Tests for the CLI chat runner."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from rich.console import Console
from typer.testing import CliRunner

from pizzabot import __version__
from pizzabot.cli.chat_runner import ChatConfig, ChatRunner, ConsoleMessageSink
from pizzabot.cli.main import app
from pizzabot.core.types import CardAction, HeroCard


class TestChatRunner:
    """Tests for ChatRunner."""

    def test_generates_conversation_id(self):
        runner = ChatRunner(ChatConfig())

        assert runner.conversation_id.startswith("cli_")

    def test_keeps_given_conversation_id(self):
        runner = ChatRunner(ChatConfig(conversation_id="abc"))

        assert runner.conversation_id == "abc"

    @pytest.mark.parametrize("text", ["quit", "EXIT", " q ", "/quit"])
    def test_is_exit_command(self, text):
        assert ChatRunner._is_exit_command(text)

    def test_regular_input_is_not_exit(self):
        assert not ChatRunner._is_exit_command("quitting pizza")

    @pytest.mark.asyncio
    async def test_run_welcomes_then_forwards_messages(self):
        # Arrange
        runtime = MagicMock()
        runtime.process_activity = AsyncMock(return_value=[])
        runtime.process_message = AsyncMock(return_value=[])
        runtime_cm = MagicMock()
        runtime_cm.__aenter__ = AsyncMock(return_value=runtime)
        runtime_cm.__aexit__ = AsyncMock(return_value=False)
        runner = ChatRunner(ChatConfig(conversation_id="c1", user_id="ann"))
        answers = ["I want a pizza", "", "quit"]

        # Act
        with (
            patch("pizzabot.cli.chat_runner.BotRuntime", return_value=runtime_cm),
            patch("pizzabot.cli.chat_runner.Prompt.ask", side_effect=answers),
        ):
            await runner.run()

        # Assert
        welcome = runtime.process_activity.await_args.args[0]
        assert welcome.type == "conversationUpdate"
        assert welcome.members_added == ["ann"]
        runtime.process_message.assert_awaited_once_with(
            "I want a pizza", conversation_id="c1", user_id="ann", sink=runner.sink
        )


class TestConsoleMessageSink:
    """Tests for console rendering."""

    @pytest.mark.asyncio
    async def test_prints_text_and_cards(self):
        console = Console(record=True, width=80)
        sink = ConsoleMessageSink(console)

        await sink.send("How many pieces?")
        await sink.send(
            HeroCard(
                title="Pizza Bot",
                text="Today: Parma!",
                buttons=[CardAction(title="Menu", value="http://example.com/menu")],
            )
        )

        output = console.export_text()
        assert "Bot > How many pieces?" in output
        assert "Pizza Bot" in output
        assert "Today: Parma!" in output


class TestCommands:
    """Tests for the typer application."""

    def test_version(self):
        result = CliRunner().invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_server_with_missing_config(self, tmp_path):
        result = CliRunner().invoke(app, ["server", "--config", str(tmp_path / "nope.yaml")])

        assert result.exit_code == 1
