"""Two-tier command routing."""

from privateroom.router.dispatch import (
    CommandRequest,
    CommandTable,
    DispatchMode,
    Handler,
    RoomContext,
    Router,
)

__all__ = [
    "CommandRequest",
    "CommandTable",
    "DispatchMode",
    "Handler",
    "RoomContext",
    "Router",
]
