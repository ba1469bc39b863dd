"""Ephemeral group rooms.

Rooms are owned by the RoomRegistry, which allocates their ids and
removes them once the last member has left.
"""

from privateroom.rooms.registry import (
    DEFAULT_CAPACITY,
    DEFAULT_PRIVATE,
    DEFAULT_ROOM_NAME,
    Room,
    RoomRegistry,
)

__all__ = [
    "DEFAULT_CAPACITY",
    "DEFAULT_PRIVATE",
    "DEFAULT_ROOM_NAME",
    "Room",
    "RoomRegistry",
]
