"""Telegram Bot API feed using long polling over httpx."""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from privateroom.bus.events import InboundMessage
from privateroom.channels.base import MessageFeed
from privateroom.config.schema import TelegramConfig
from privateroom.errors import DeliveryError, FeedFetchError


class TelegramFeed(MessageFeed):
    """
    Feed backed by the Telegram Bot API.

    Uses getUpdates (with the cursor as offset) for inbound messages and
    sendMessage for outbound ones. The chat id is the session id.
    """

    name = "telegram"

    def __init__(self, config: TelegramConfig, client: httpx.AsyncClient | None = None):
        self.config = config
        self._client = client or httpx.AsyncClient(
            timeout=config.request_timeout,
            proxy=config.proxy or None,
        )

    def _url(self, method: str) -> str:
        return f"{self.config.api_base.rstrip('/')}/bot{self.config.token}/{method}"

    def is_allowed(self, message: InboundMessage) -> bool:
        """Check the sender against the allow list (empty list allows everyone)."""
        allow_list = self.config.allow_from
        if not allow_list:
            return True
        if str(message.sender_id) in allow_list:
            return True
        username = message.metadata.get("username")
        return bool(username) and username in allow_list

    async def _call(self, method: str, params: dict[str, Any], timeout: float) -> Any:
        """Call an API method and return its "result" payload."""
        response = await self._client.get(self._url(method), params=params, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError("API response is not an object")
        if not payload.get("ok"):
            raise ValueError(payload.get("description") or "API returned ok=false")
        return payload.get("result")

    async def fetch_inbound(self, cursor: int) -> list[InboundMessage]:
        params: dict[str, Any] = {}
        if cursor:
            params["offset"] = cursor
        if self.config.long_poll_timeout:
            params["timeout"] = self.config.long_poll_timeout

        try:
            result = await self._call(
                "getUpdates",
                params,
                timeout=self.config.request_timeout + self.config.long_poll_timeout,
            )
        except (httpx.HTTPError, ValueError) as e:
            raise FeedFetchError(f"getUpdates failed: {e}") from e

        if result is None:
            result = []
        if not isinstance(result, list):
            raise FeedFetchError(f"getUpdates returned {type(result).__name__}, expected a list")

        messages = []
        for update in result:
            try:
                message = self._parse_update(update)
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.warning(f"Skipping malformed update {update!r}: {e}")
                continue
            if message.text and not self.is_allowed(message):
                logger.warning(
                    f"Access denied for sender {message.sender_id} on channel {self.name}. "
                    f"Add them to allowFrom list in config to grant access."
                )
                message.text = ""
            messages.append(message)
        return messages

    @staticmethod
    def _parse_update(update: dict[str, Any]) -> InboundMessage:
        """Convert one update into an InboundMessage.

        Updates without a usable message (edits, callbacks, odd payloads)
        become blank messages so the cursor still moves past them. An update
        without an update_id cannot be placed and raises.
        """
        if not isinstance(update, dict):
            raise TypeError("update is not an object")
        sequence_id = int(update["update_id"])

        message = update.get("message")
        if not isinstance(message, dict):
            message = {}
        chat = message.get("chat")
        if not isinstance(chat, dict):
            chat = {}
        sender = message.get("from")
        if not isinstance(sender, dict):
            sender = {}
        text = message.get("text")

        try:
            sender_id = int(chat.get("id", 0))
        except (TypeError, ValueError):
            sender_id, text = 0, ""

        return InboundMessage(
            sender_id=sender_id,
            sender_name=str(sender.get("first_name") or ""),
            text=text if isinstance(text, str) else "",
            sequence_id=sequence_id,
            metadata={
                "message_id": message.get("message_id"),
                "username": sender.get("username"),
                "chat_type": chat.get("type"),
            },
        )

    async def send_outbound(self, session_id: int, text: str) -> None:
        try:
            await self._call(
                "sendMessage",
                {"chat_id": session_id, "text": text},
                timeout=self.config.request_timeout,
            )
        except (httpx.HTTPError, ValueError) as e:
            raise DeliveryError(session_id, str(e)) from e

    async def close(self) -> None:
        await self._client.aclose()
