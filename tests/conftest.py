"""Pytest fixtures: a fake Telegram Bot API and handler wiring around it."""

import json

import httpx
import pytest

from order_relay.integrations.telegram import TelegramBotService
from order_relay.orders.handler import OrderSubmissionHandler
from order_relay.utils.config_loader import NotifierSettings


def raise_error(exc_type, message="boom"):
    """Queue entry that makes the fake API raise an httpx transport error."""

    def _raise(request):
        raise exc_type(message, request=request)

    return _raise


class FakeTelegramAPI:
    """Records sendMessage calls and answers from a queue of canned replies.

    Queue entries may be a dict (sent back as a 200 JSON body), an
    httpx.Response, or a callable taking the request.
    """

    def __init__(self, *replies):
        self.requests = []
        self._replies = list(replies)

    def queue(self, *replies):
        self._replies.extend(replies)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(
            {
                "url": str(request.url),
                "json": json.loads(request.content),
                "timeout": request.extensions.get("timeout"),
            }
        )
        reply = self._replies.pop(0) if self._replies else {"ok": True, "result": {"message_id": len(self.requests)}}
        if isinstance(reply, httpx.Response):
            return reply
        if callable(reply):
            return reply(request)
        return httpx.Response(200, json=reply)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def telegram_api():
    return FakeTelegramAPI()


@pytest.fixture
def settings():
    return NotifierSettings(bot_token="123456:TEST-TOKEN", chat_id="987654321")


@pytest.fixture
def make_handler(telegram_api):
    def _make(handler_settings):
        def factory(s):
            return TelegramBotService.from_settings(s, transport=telegram_api.transport)

        return OrderSubmissionHandler(handler_settings, bot_service_factory=factory)

    return _make


@pytest.fixture
def valid_order():
    return {
        "productName": "Classic Cap",
        "productPrice": "250 EGP",
        "name": "Mona Adel",
        "phone": "+20 100 123 4567",
        "address": "12 Tahrir St, Cairo",
        "quantity": 2,
        "notes": "",
        "pageUrl": "https://shop.example/caps/classic",
    }
