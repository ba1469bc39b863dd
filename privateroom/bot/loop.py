"""Poll loop: the core processing engine.

Each cycle:
1. Fetches a batch of inbound messages newer than the cursor
2. Sweeps empty rooms
3. Routes the batch one message at a time, delivering each message's
   replies before the next message is routed
4. Moves the cursor past each message as soon as it is routed
"""

from __future__ import annotations

import asyncio
import random

from loguru import logger

from privateroom.bus.events import InboundMessage
from privateroom.channels.base import DeliveryReport, MessageFeed, deliver
from privateroom.config.schema import RoomsConfig
from privateroom.errors import FeedFetchError
from privateroom.handlers import build_lobby_table, build_room_table
from privateroom.rooms.registry import RoomRegistry
from privateroom.router.dispatch import RoomContext, Router
from privateroom.session.directory import SessionDirectory


def build_router(config: RoomsConfig | None = None, rng: random.Random | None = None) -> Router:
    """Create fresh stores and a router with the standard command tables."""
    config = config or RoomsConfig()
    context = RoomContext(
        registry=RoomRegistry(
            default_name=config.default_name,
            default_capacity=config.default_capacity,
            default_private=config.default_private,
        ),
        directory=SessionDirectory(),
        rng=rng or random.Random(config.reply_seed),
        max_capacity=config.max_capacity,
    )
    return Router(context, build_lobby_table(), build_room_table())


class RoomBot:
    """Drives a Router from a MessageFeed."""

    def __init__(self, feed: MessageFeed, router: Router, poll_interval: float = 3.0):
        self.feed = feed
        self.router = router
        self.poll_interval = poll_interval
        self.cursor = 0
        self._running = False

    async def handle_message(self, message: InboundMessage) -> DeliveryReport | None:
        """Route one message and deliver its replies.

        A crash in the handler or during delivery is logged and the message
        is skipped; state changes already made by the handler stay.
        """
        try:
            outbound = self.router.route(message)
        except Exception:
            logger.exception(f"Handler failed for message {message.sequence_id} from {message.sender_id}")
            return None
        if not outbound:
            return None
        try:
            return await deliver(self.feed, outbound)
        except Exception:
            logger.exception(f"Delivery failed for message {message.sequence_id} from {message.sender_id}")
            return None

    async def poll_once(self) -> int:
        """Run one poll cycle.

        Returns:
            Number of messages fetched (0 when the fetch failed).
        """
        try:
            batch = await self.feed.fetch_inbound(self.cursor)
        except FeedFetchError as e:
            logger.warning(f"Error while receiving updates: {e}")
            return 0

        self.router.context.registry.sweep_empty()

        if not batch:
            return 0

        logger.info(f"Received {len(batch)} messages")
        for message in batch:
            # Advance first so an applied message is never replayed
            self.cursor = message.sequence_id + 1
            await self.handle_message(message)

        return len(batch)

    async def run(self) -> None:
        """Poll until stop() is called."""
        self._running = True
        logger.info(f"Polling {self.feed.name} feed every {self.poll_interval}s")
        while self._running:
            try:
                await self.poll_once()
            except Exception:
                logger.exception("Poll cycle failed")
            if self._running:
                await asyncio.sleep(self.poll_interval)

    def stop(self) -> None:
        """Stop the loop after the current cycle."""
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running
