"""Main CLI entry point for pizzabot"""

import asyncio
import os
from pathlib import Path

import typer

from pizzabot import __version__
from pizzabot.core.errors import ConfigError

app = typer.Typer(
    name="pizzabot",
    help="pizzabot - pizza ordering assistant",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit"""
    if value:
        typer.echo(f"pizzabot version {__version__}")
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
    """pizzabot - pizza ordering assistant"""
    pass


@app.command()
def chat(
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to pizzabot.yaml"),
    conversation: str | None = typer.Option(None, "--conversation", help="Conversation ID"),
    user: str = typer.Option("user", "--user", "-u", help="User ID"),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Log level (defaults to settings.log_level)"
    ),
    debug: bool = typer.Option(False, "--debug", help="Print tracebacks on errors"),
) -> None:
    """Start an interactive chat session."""
    from pizzabot.cli.chat_runner import ChatConfig, ChatRunner

    runner = ChatRunner(
        ChatConfig(
            config_path=config,
            conversation_id=conversation,
            user_id=user,
            log_level=log_level,
            debug=debug,
        )
    )
    try:
        asyncio.run(runner.run())
    except KeyboardInterrupt:
        pass
    except ConfigError as e:
        typer.echo(f"Invalid config: {e}", err=True)
        raise typer.Exit(1) from e


@app.command()
def server(
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to pizzabot.yaml"),
    host: str = typer.Option("0.0.0.0", "--host", "-h", help="Host to bind the server to"),
    port: int = typer.Option(3978, "--port", "-p", help="Port to bind the server to"),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Log level (defaults to settings.log_level)"
    ),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload (development only)"),
) -> None:
    """Start the HTTP server."""
    import uvicorn

    if config is not None:
        if not config.exists():
            typer.echo(f"Config file not found: {config}", err=True)
            raise typer.Exit(1)
        os.environ["PIZZABOT_CONFIG_PATH"] = str(config)

    if log_level is not None:
        os.environ["PIZZABOT_LOG_LEVEL"] = log_level

    uvicorn.run("pizzabot.server.api:app", host=host, port=port, reload=reload)


def cli() -> None:
    """Entry point for CLI"""
    app()


if __name__ == "__main__":
    cli()
