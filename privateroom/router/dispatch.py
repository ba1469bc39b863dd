"""Router with room-scoped and lobby dispatch tables.

Routes each inbound message to exactly one handler:

1. Sender is in a room -> room table, falling back to the room default
   (relay the line to the other members).
2. Sender is in the lobby -> lobby table, falling back to the lobby
   default (a canned reply).

The command key is the first whitespace-delimited token, matched exactly
and case-sensitively. Blank messages are dropped.
"""

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional

from loguru import logger

from privateroom.bus.events import InboundMessage, OutboundMessage
from privateroom.rooms.registry import Room, RoomRegistry
from privateroom.session.directory import SessionDirectory


class DispatchMode(Enum):
    """Which table a message is dispatched against."""
    ROOM = "room"
    LOBBY = "lobby"


@dataclass
class RoomContext:
    """Stores and services shared by every handler."""
    registry: RoomRegistry
    directory: SessionDirectory
    rng: random.Random = field(default_factory=random.Random)
    max_capacity: Optional[int] = None  # Upper bound accepted by /create

    def join(self, session_id: int, room: Room) -> bool:
        """Add a session to a room and point the directory at it."""
        if not room.add_member(session_id):
            return False
        self.directory.assign(session_id, room)
        return True

    def leave(self, session_id: int, room: Room) -> bool:
        """Remove a session from a room and send it back to the lobby.

        Returns:
            Whether the session was a member of the room.
        """
        was_member = room.remove_member(session_id)
        self.directory.remove(session_id)
        return was_member


@dataclass
class CommandRequest:
    """A single command invocation handed to a handler."""
    message: InboundMessage
    args: List[str]
    room: Optional[Room] = None  # Set in room mode

    @property
    def sender_id(self) -> int:
        return self.message.sender_id

    def reply(self, text: str) -> OutboundMessage:
        """Build a reply addressed to the sender."""
        return OutboundMessage(session_id=self.message.sender_id, text=text)


Handler = Callable[[RoomContext, CommandRequest], List[OutboundMessage]]


class CommandTable:
    """Command token -> handler mapping with a mandatory default entry."""

    def __init__(self, name: str, default: Handler):
        self.name = name
        self.default = default
        self._handlers: Dict[str, Handler] = {}

    def __contains__(self, command: str) -> bool:
        return command in self._handlers

    def add(self, command: str, handler: Handler) -> None:
        """Bind a handler to a command token."""
        if command in self._handlers:
            raise ValueError(f"Command '{command}' already registered in {self.name} table")
        self._handlers[command] = handler

    def register(self, command: str) -> Callable[[Handler], Handler]:
        """Decorator form of add()."""
        def decorator(handler: Handler) -> Handler:
            self.add(command, handler)
            return handler
        return decorator

    def resolve(self, command: str) -> Handler:
        """Handler for the command, or the default when unknown."""
        return self._handlers.get(command, self.default)

    @property
    def commands(self) -> List[str]:
        return list(self._handlers)


class Router:
    """Selects and invokes one handler per inbound message."""

    def __init__(self, context: RoomContext, lobby_table: CommandTable, room_table: CommandTable):
        self.context = context
        self.lobby_table = lobby_table
        self.room_table = room_table

    def mode_for(self, session_id: int) -> DispatchMode:
        """Dispatch mode for a session, based on its directory entry."""
        if self.context.directory.lookup(session_id) is not None:
            return DispatchMode.ROOM
        return DispatchMode.LOBBY

    def route(self, message: InboundMessage) -> List[OutboundMessage]:
        """Dispatch a message and return the replies it produced.

        Args:
            message: Inbound message

        Returns:
            Outbound messages to deliver, in order. Empty for blank messages.
        """
        command = message.command
        if command is None:
            logger.debug(f"Dropped blank message {message.sequence_id} from {message.sender_id}")
            return []

        mode = self.mode_for(message.sender_id)
        room = self.context.directory.lookup(message.sender_id)
        table = self.room_table if mode is DispatchMode.ROOM else self.lobby_table
        handler = table.resolve(command)
        request = CommandRequest(message=message, args=message.args, room=room)

        logger.debug(
            f"Routing {command!r} from {message.sender_id} in {mode.value} mode "
            f"-> {getattr(handler, '__name__', handler)}"
        )
        return handler(self.context, request)
