"""Argument parsing for command handlers.

Every parser raises UserInputError with the reply text to show.
"""

from typing import List, Optional

from privateroom.errors import UserInputError
from privateroom.handlers import replies

PRIVATE_TOKENS = {"private", "true", "yes", "1", "on"}
PUBLIC_TOKENS = {"public", "false", "no", "0", "off"}


def arg(args: List[str], index: int) -> Optional[str]:
    """Positional argument or None when not supplied."""
    return args[index] if len(args) > index else None


def parse_room_id(value: Optional[str]) -> int:
    """Parse a /join room id."""
    if value is None:
        raise UserInputError(replies.MISSING_ROOM_ID)
    try:
        return int(value)
    except ValueError:
        raise UserInputError(replies.INVALID_ROOM_ID) from None


def parse_capacity(value: str, max_capacity: Optional[int] = None) -> int:
    """Parse a /create member limit: a positive integer, optionally bounded."""
    try:
        capacity = int(value)
    except ValueError:
        raise UserInputError(replies.INVALID_CAPACITY) from None
    if capacity < 1 or (max_capacity is not None and capacity > max_capacity):
        raise UserInputError(replies.INVALID_CAPACITY)
    return capacity


def parse_visibility(value: str) -> bool:
    """Parse a /create privacy token. Returns True for private."""
    token = value.lower()
    if token in PRIVATE_TOKENS:
        return True
    if token in PUBLIC_TOKENS:
        return False
    raise UserInputError(replies.INVALID_VISIBILITY)
