"""Base feed interface and outbound delivery."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable

from loguru import logger

from privateroom.bus.events import InboundMessage, OutboundMessage
from privateroom.errors import DeliveryError


class MessageFeed(ABC):
    """
    Abstract base class for chat platform feeds.

    A feed yields inbound messages newer than a cursor and performs
    one-shot outbound sends. Retries are never attempted by the caller.
    """

    name: str = "base"

    @abstractmethod
    async def fetch_inbound(self, cursor: int) -> list[InboundMessage]:
        """
        Fetch messages with a sequence id at or after the cursor.

        Args:
            cursor: Lowest sequence id of interest (0 for "from the start").

        Returns:
            Messages in arrival order, possibly empty.

        Raises:
            FeedFetchError: If the feed could not be read.
        """
        pass

    @abstractmethod
    async def send_outbound(self, session_id: int, text: str) -> None:
        """
        Deliver a text to a session.

        Raises:
            DeliveryError: If the message was not accepted.
        """
        pass

    async def close(self) -> None:
        """Release any resources held by the feed."""
        pass


@dataclass
class DeliveryReport:
    """Outcome of delivering a batch of outbound messages."""
    sent: int = 0
    failures: list[tuple[int, DeliveryError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


async def _deliver_to_session(
    feed: MessageFeed, session_id: int, texts: list[str], report: DeliveryReport
) -> None:
    for text in texts:
        try:
            await feed.send_outbound(session_id, text)
            report.sent += 1
        except DeliveryError as e:
            logger.warning(f"Error while sending message to {session_id}: {e.reason}")
            report.failures.append((session_id, e))


async def deliver(feed: MessageFeed, messages: Iterable[OutboundMessage]) -> DeliveryReport:
    """Send outbound messages through a feed.

    Sessions are served concurrently; messages to the same session go out
    one after another in their original order. A failed send is logged and
    recorded without affecting any other send.
    """
    by_session: dict[int, list[str]] = {}
    for msg in messages:
        by_session.setdefault(msg.session_id, []).append(msg.text)

    report = DeliveryReport()
    if not by_session:
        return report

    await asyncio.gather(*(
        _deliver_to_session(feed, session_id, texts, report)
        for session_id, texts in by_session.items()
    ))
    return report
