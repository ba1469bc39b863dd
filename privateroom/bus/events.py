"""Inbound and outbound message types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class InboundMessage:
    """A message received from the feed."""

    sender_id: int  # Session id (chat id on Telegram)
    sender_name: str  # Display name used when relaying chat lines
    text: str
    sequence_id: int  # Arrival sequence, drives the feed cursor
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def tokens(self) -> list[str]:
        """Whitespace-delimited tokens of the text."""
        return self.text.split()

    @property
    def command(self) -> str | None:
        """First token of the text, or None for blank messages."""
        tokens = self.tokens
        return tokens[0] if tokens else None

    @property
    def args(self) -> list[str]:
        """Tokens following the command."""
        return self.tokens[1:]


@dataclass
class OutboundMessage:
    """A message to be delivered to one session."""

    session_id: int
    text: str
