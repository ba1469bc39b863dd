"""CLI commands for privateroom."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from privateroom import __logo__, __version__
from privateroom.config.loader import load_config
from privateroom.config.schema import Config

console = Console()

app = typer.Typer(name="privateroom", help="privateroom CLI")


def _mask(secret: str) -> str:
    if not secret:
        return "[dim]not set[/dim]"
    return f"{secret[:4]}…{secret[-2:]}" if len(secret) > 8 else "****"


@app.command()
def version():
    """Show the installed version."""
    console.print(f"{__logo__} privateroom v{__version__}")


@app.command("config")
def show_config(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.json"),
):
    """Show the effective configuration."""
    config = load_config(config_path)

    table = Table(title="privateroom configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("telegram.token", _mask(config.telegram.token))
    table.add_row("telegram.apiBase", config.telegram.api_base)
    table.add_row("telegram.pollInterval", f"{config.telegram.poll_interval}s")
    table.add_row("telegram.longPollTimeout", f"{config.telegram.long_poll_timeout}s")
    table.add_row("telegram.requestTimeout", f"{config.telegram.request_timeout}s")
    table.add_row("telegram.allowFrom", ", ".join(config.telegram.allow_from) or "[dim]everyone[/dim]")
    table.add_row("rooms.defaultName", config.rooms.default_name)
    table.add_row("rooms.defaultCapacity", str(config.rooms.default_capacity))
    table.add_row("rooms.maxCapacity", str(config.rooms.max_capacity or "[dim]unbounded[/dim]"))
    table.add_row("rooms.defaultPrivate", str(config.rooms.default_private))
    table.add_row("logging.level", config.logging.level)
    table.add_row("logging.file", str(config.logging.file_path))

    console.print(table)


@app.command()
def run(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.json"),
    token: Optional[str] = typer.Option(None, "--token", "-t", help="Telegram bot token (overrides config)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Start the room bot on Telegram."""
    from privateroom.utils.logging import configure_logging

    config = load_config(config_path)
    if token:
        config.telegram.token = token

    if not config.telegram.token:
        console.print("[red]✗[/red] No Telegram token configured")
        console.print("[dim]Pass --token or set PRIVATEROOM_TELEGRAM__TOKEN[/dim]")
        raise typer.Exit(1)

    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config.logging)
    console.print(f"{__logo__} Starting privateroom bot...")

    try:
        asyncio.run(_run_bot(config))
    except KeyboardInterrupt:
        console.print("\nGoodbye!")


async def _run_bot(config: Config) -> None:
    from privateroom.bot.loop import RoomBot, build_router
    from privateroom.channels.telegram import TelegramFeed

    feed = TelegramFeed(config.telegram)
    bot = RoomBot(feed, build_router(config.rooms), poll_interval=config.telegram.poll_interval)
    try:
        await bot.run()
    finally:
        bot.stop()
        await feed.close()
        logger.info("Bot stopped")


if __name__ == "__main__":
    app()
