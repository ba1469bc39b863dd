"""Message shapes exchanged between the feed and the router."""

from privateroom.bus.events import InboundMessage, OutboundMessage

__all__ = ["InboundMessage", "OutboundMessage"]
