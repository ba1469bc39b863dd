"""Which room each session currently occupies.

A session missing from the directory is in the lobby. The directory only
references rooms owned by the RoomRegistry; keeping it in step with room
membership is the job of the join and quit handlers.
"""

from __future__ import annotations

from typing import Iterator

from loguru import logger

from privateroom.rooms.registry import Room


class SessionDirectory:
    """Maps session ids to the room they are in (at most one)."""

    def __init__(self) -> None:
        self._entries: dict[int, Room] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, session_id: int) -> bool:
        return session_id in self._entries

    def __iter__(self) -> Iterator[tuple[int, Room]]:
        return iter(list(self._entries.items()))

    def assign(self, session_id: int, room: Room) -> None:
        """Record that a session occupies a room, replacing any prior entry."""
        previous = self._entries.get(session_id)
        if previous is not None and previous is not room:
            logger.debug(f"Session {session_id} reassigned from room {previous.id} to {room.id}")
        self._entries[session_id] = room

    def lookup(self, session_id: int) -> Room | None:
        """Room the session is in, or None when it is in the lobby."""
        return self._entries.get(session_id)

    def remove(self, session_id: int) -> None:
        """Send the session back to the lobby."""
        self._entries.pop(session_id, None)
