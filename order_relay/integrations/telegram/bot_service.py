"""
Telegram Bot API client used to deliver order notifications.

The primary notification is awaited by the caller. The confirmation reply is
dispatched as a detached task: its failures are logged by a done-callback and
never reach the request that triggered it.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional, Set

import httpx

from order_relay.orders.models import NotificationOutcome
from order_relay.utils.config_loader import NotifierSettings

logger = logging.getLogger(__name__)

# Confirmation tasks still in flight, across all service instances.
_pending_confirmations: Set["asyncio.Task[NotificationOutcome]"] = set()


def mask_chat_id(chat_id: str) -> str:
    return f"{(chat_id or '')[:5]}..."


class TelegramBotService:
    def __init__(
        self,
        token: str,
        chat_id: str,
        *,
        base_url: str = "https://api.telegram.org",
        parse_mode: str = "Markdown",
        timeout_seconds: float = 10.0,
        confirmation_timeout_seconds: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.token = token
        self.chat_id = chat_id
        self.base_url = base_url.rstrip("/")
        self.parse_mode = parse_mode
        self.timeout_seconds = timeout_seconds
        self.confirmation_timeout_seconds = confirmation_timeout_seconds
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: NotifierSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "TelegramBotService":
        telegram = settings.config.telegram
        return cls(
            settings.bot_token,
            settings.chat_id,
            base_url=telegram.api_base_url,
            parse_mode=telegram.parse_mode,
            timeout_seconds=telegram.timeout_seconds,
            confirmation_timeout_seconds=telegram.confirmation_timeout_seconds,
            transport=transport,
        )

    @property
    def send_message_url(self) -> str:
        return f"{self.base_url}/bot{self.token}/sendMessage"

    async def send_message(
        self,
        text: str,
        *,
        reply_to_message_id: Optional[int] = None,
        disable_notification: Optional[bool] = None,
        disable_web_page_preview: bool = True,
        timeout_seconds: Optional[float] = None,
    ) -> NotificationOutcome:
        """
        Call sendMessage once. A response with `ok: false` is returned, not raised;
        transport errors and timeouts propagate as httpx exceptions.
        """
        payload: Dict[str, Any] = {
            "chat_id": self.chat_id,
            "text": text,
            "parse_mode": self.parse_mode,
            "disable_web_page_preview": disable_web_page_preview,
        }
        if disable_notification is not None:
            payload["disable_notification"] = disable_notification
        if reply_to_message_id is not None:
            payload["reply_to_message_id"] = reply_to_message_id

        async with httpx.AsyncClient(
            timeout=timeout_seconds or self.timeout_seconds,
            transport=self._transport,
        ) as client:
            response = await client.post(self.send_message_url, json=payload)
            data = response.json() if response.content else {}

        outcome = NotificationOutcome.from_api_payload(data)
        logger.info(
            "Telegram API response: status=%s ok=%s description=%s message_id=%s",
            response.status_code,
            outcome.ok,
            outcome.description,
            outcome.message_id,
        )
        return outcome

    async def send_order_notification(self, text: str) -> NotificationOutcome:
        logger.info("Sending order notification to Telegram chat %s", mask_chat_id(self.chat_id))
        outcome = await self.send_message(text, disable_notification=False, disable_web_page_preview=True)
        if not outcome.ok:
            logger.error("Telegram API error: %s", outcome.raw)
        return outcome

    def dispatch_confirmation(self, text: str, reply_to_message_id: int) -> "asyncio.Task[NotificationOutcome]":
        """Schedule the confirmation reply without waiting for it."""
        task = asyncio.get_running_loop().create_task(
            self.send_message(
                text,
                reply_to_message_id=reply_to_message_id,
                timeout_seconds=self.confirmation_timeout_seconds,
            )
        )
        _pending_confirmations.add(task)
        task.add_done_callback(self._on_confirmation_done)
        return task

    def _on_confirmation_done(self, task: "asyncio.Task[NotificationOutcome]") -> None:
        _pending_confirmations.discard(task)
        if task.cancelled():
            logger.warning("Confirmation message cancelled before completion")
            return
        exc = task.exception()
        if exc is not None:
            logger.warning("Could not send confirmation: %s", exc)
            return
        outcome = task.result()
        if outcome.ok:
            logger.info("Confirmation message sent (message_id=%s)", outcome.message_id)
        else:
            logger.warning("Could not send confirmation: %s", outcome.description)


async def drain_pending_confirmations() -> int:
    """Wait for every in-flight confirmation. Returns how many were pending."""
    pending = list(_pending_confirmations)
    if pending:
        await asyncio.gather(*pending, return_exceptions=True)
    return len(pending)
