"""Room registry: the single owner of every room.

A room lives from the moment a session creates it until the first sweep
that finds it empty. Ids are allocated as max(existing ids) + 1, so an id
freed by a sweep can be handed out again.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from loguru import logger

DEFAULT_ROOM_NAME = "ChackChack"
DEFAULT_CAPACITY = 10
DEFAULT_PRIVATE = True


@dataclass
class Room:
    """A capacity-bounded group of sessions relaying chat to each other."""
    id: int
    name: str = DEFAULT_ROOM_NAME
    capacity: int = DEFAULT_CAPACITY
    private: bool = DEFAULT_PRIVATE  # Only affects /list visibility
    members: List[int] = field(default_factory=list)  # Session ids, join order

    @property
    def occupancy(self) -> int:
        """Number of sessions currently in the room."""
        return len(self.members)

    @property
    def is_full(self) -> bool:
        return self.occupancy >= self.capacity

    @property
    def is_empty(self) -> bool:
        return not self.members

    def has_member(self, session_id: int) -> bool:
        return session_id in self.members

    def add_member(self, session_id: int) -> bool:
        """Add a session to the room.

        Returns:
            False if the room is full or the session is already a member.
        """
        if self.is_full or session_id in self.members:
            return False
        self.members.append(session_id)
        return True

    def remove_member(self, session_id: int) -> bool:
        """Remove a session from the room. Returns False if it was absent."""
        if session_id not in self.members:
            return False
        self.members.remove(session_id)
        return True

    def other_members(self, session_id: int) -> List[int]:
        """Members excluding the given session."""
        return [m for m in self.members if m != session_id]


class RoomRegistry:
    """Registry for all live rooms.

    No other component constructs or destroys a Room.
    """

    def __init__(
        self,
        default_name: str = DEFAULT_ROOM_NAME,
        default_capacity: int = DEFAULT_CAPACITY,
        default_private: bool = DEFAULT_PRIVATE,
    ):
        self.default_name = default_name
        self.default_capacity = default_capacity
        self.default_private = default_private
        self._rooms: Dict[int, Room] = {}

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, room_id: int) -> bool:
        return room_id in self._rooms

    def next_id(self) -> int:
        """Next id to allocate: max existing id + 1, or 0 for an empty registry."""
        if not self._rooms:
            return 0
        return max(self._rooms) + 1

    def create_room(
        self,
        founder_id: int,
        name: Optional[str] = None,
        capacity: Optional[int] = None,
        private: Optional[bool] = None,
    ) -> Room:
        """Create a room with the founder as its only member.

        Args:
            founder_id: Session id of the creating session
            name: Display name (defaults to the registry default)
            capacity: Maximum number of members (defaults to the registry default)
            private: Hide from listings (defaults to the registry default)

        Returns:
            The created Room
        """
        room = Room(
            id=self.next_id(),
            name=name or self.default_name,
            capacity=capacity if capacity is not None else self.default_capacity,
            private=self.default_private if private is None else private,
            members=[founder_id],
        )
        self._rooms[room.id] = room
        logger.info(
            f"Created room {room.id} '{room.name}' "
            f"(capacity={room.capacity}, private={room.private}) for {founder_id}"
        )
        return room

    def get(self, room_id: int) -> Optional[Room]:
        """Get a room by id, or None if no such room exists."""
        return self._rooms.get(room_id)

    def rooms(self) -> List[Room]:
        """All rooms in registry order."""
        return list(self._rooms.values())

    def list_public(self) -> List[Room]:
        """Rooms visible in listings."""
        return [room for room in self._rooms.values() if not room.private]

    def sweep_empty(self) -> List[Room]:
        """Remove every room without members.

        Returns:
            The removed rooms
        """
        removed = [room for room in self._rooms.values() if room.is_empty]
        for room in removed:
            del self._rooms[room.id]
            logger.info(f"Room {room.id} '{room.name}' is empty, deleted")
        return removed
