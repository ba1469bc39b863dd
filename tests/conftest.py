"""Shared fixtures for privateroom tests."""

import random

import pytest

from privateroom.bot.loop import build_router
from privateroom.bus.events import InboundMessage
from privateroom.channels.base import MessageFeed
from privateroom.config.schema import RoomsConfig
from privateroom.errors import DeliveryError, FeedFetchError


class FakeFeed(MessageFeed):
    """In-memory feed: serves queued batches and records sends."""

    name = "fake"

    def __init__(self, batches=None):
        self.batches = list(batches or [])
        self.cursors = []
        self.sent = []
        self.failing_sessions = set()
        self.fail_fetch = False
        self.closed = False

    async def fetch_inbound(self, cursor):
        self.cursors.append(cursor)
        if self.fail_fetch:
            raise FeedFetchError("feed unavailable")
        if not self.batches:
            return []
        return self.batches.pop(0)

    async def send_outbound(self, session_id, text):
        if session_id in self.failing_sessions:
            raise DeliveryError(session_id, "blocked by user")
        self.sent.append((session_id, text))

    async def close(self):
        self.closed = True

    def texts_for(self, session_id):
        return [text for sid, text in self.sent if sid == session_id]


_sequence = iter(range(1, 1_000_000))


def make_message(sender_id, text, name=None, sequence_id=None):
    """Build an inbound message with a unique sequence id."""
    return InboundMessage(
        sender_id=sender_id,
        sender_name=name or f"user{sender_id}",
        text=text,
        sequence_id=sequence_id if sequence_id is not None else next(_sequence),
    )


@pytest.fixture
def router():
    """Router with fresh stores and a seeded reply generator."""
    return build_router(RoomsConfig(), rng=random.Random(42))


@pytest.fixture
def ctx(router):
    return router.context


@pytest.fixture
def feed():
    return FakeFeed()
