"""Poll loop tying a feed to the router."""

from privateroom.bot.loop import RoomBot, build_router

__all__ = ["RoomBot", "build_router"]
