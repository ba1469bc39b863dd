"""Message feeds that connect the router to chat platforms."""

from privateroom.channels.base import DeliveryReport, MessageFeed, deliver

__all__ = ["DeliveryReport", "MessageFeed", "deliver"]
