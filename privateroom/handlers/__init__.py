"""Command handlers and the dispatch tables binding them to tokens."""

from privateroom.handlers.lobby import (
    canned_reply_handler,
    create_handler,
    help_handler,
    join_handler,
    list_handler,
    start_handler,
)
from privateroom.handlers.room import broadcast_handler, info_handler, quit_handler
from privateroom.router.dispatch import CommandTable


def build_lobby_table() -> CommandTable:
    """Commands available to sessions that are not in a room."""
    table = CommandTable("lobby", default=canned_reply_handler)
    table.add("/start", start_handler)
    table.add("/help", help_handler)
    table.add("/create", create_handler)
    table.add("/join", join_handler)
    table.add("/list", list_handler)
    return table


def build_room_table() -> CommandTable:
    """Commands available inside a room; anything else is relayed."""
    table = CommandTable("room", default=broadcast_handler)
    table.add("/quit", quit_handler)
    table.add("/info", info_handler)
    return table


__all__ = [
    "build_lobby_table",
    "build_room_table",
    "broadcast_handler",
    "canned_reply_handler",
    "create_handler",
    "help_handler",
    "info_handler",
    "join_handler",
    "list_handler",
    "quit_handler",
    "start_handler",
]
