"""Exception hierarchy for privateroom."""


class PrivateRoomError(Exception):
    """Base class for all privateroom errors."""
    pass


class UserInputError(PrivateRoomError):
    """Malformed or missing command argument, unknown room, full room.

    Always recovered by the handler that raised it; the message is shown
    to the user verbatim.
    """
    pass


class DeliveryError(PrivateRoomError):
    """An outbound message could not be delivered."""

    def __init__(self, session_id: int, reason: str):
        super().__init__(f"delivery to {session_id} failed: {reason}")
        self.session_id = session_id
        self.reason = reason


class FeedFetchError(PrivateRoomError):
    """Inbound messages could not be fetched from the feed."""
    pass
