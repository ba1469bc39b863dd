"""User-facing reply texts."""

from typing import Iterable

from privateroom.rooms.registry import Room

HELP_TEXT = (
    "Here is what I can do\n"
    "/help - show this help\n"
    "/join <room id> - join a room\n"
    "/create <room name | optional> <limit | optional> <private | optional, default private> - create a room\n"
    "/info - show the room you are in\n"
    "/list - list public rooms\n"
    "/quit - leave the room"
)

CANNED_LINES = (
    "I really am trying to understand you, but I can't. Maybe /help?",
    "YES! I KNEW someone was alive in here!",
    "Aaah! You look terr... You look good. Actually, good.",
    "Okay, listen, I'll be straight with you. We are in a spot of trouble.",
    "Pff. Seriously? And then what?",
    "Hold on. This is a bit complicated.",
    "Almost there! Can you see it? Will I fit? Is there room?",
    "Just open the door! That was too aggressive... Hello, friend! Open the door, please!",
    "Don't worry. Although if you are worried, that's perfectly normal.",
    "We're nearly there! Pull yourself together, come on!",
)

MISSING_ROOM_ID = "Please enter a room ID"
INVALID_ROOM_ID = "The room ID is invalid"
ROOM_FULL = "The room is full"
INVALID_CAPACITY = "The room limit is invalid, using the default limit"
INVALID_VISIBILITY = "The privacy flag is invalid, using the default privacy"


def greeting(name: str) -> str:
    return f"Hi {name}!\nSend /help to see the list of commands"


def room_not_found(room_id: int) -> str:
    return f"Room with ID {room_id} not found"


def joined(room: Room) -> str:
    return f"You joined the room {room.name}"


def created(room: Room) -> str:
    return (
        f"You created the room: {room.name}\n"
        f"Room ID: {room.id}\n"
        f"Room limit: {room.capacity}"
    )


def listing(rooms: Iterable[Room]) -> str:
    """One line per room followed by the public room count."""
    lines = []
    count = 0
    for room in rooms:
        count += 1
        lines.append(f"\n{room.name}, {room.id}, {room.occupancy}/{room.capacity}")
    lines.append(f"\nTotal public rooms: {count}")
    return "".join(lines)


def room_info(room: Room) -> str:
    return (
        f"You are in the room: {room.name}, id: {room.id}\n"
        f"Members: {room.occupancy}\n"
        f"Member limit: {room.capacity}"
    )


def left(room: Room) -> str:
    return f"You left the room: {room.name}"


def relayed(sender_name: str, text: str) -> str:
    return f"{sender_name}: {text}"
