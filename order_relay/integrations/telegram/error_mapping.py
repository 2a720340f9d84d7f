from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from order_relay.orders.messages import DEFAULT_LOCALE, message_text
from order_relay.orders.models import ErrorCode


@dataclass(frozen=True)
class TelegramFailure:
    code: ErrorCode
    message: str
    status_code: int = 500


# Substrings of Telegram's free-text `description`, checked in order.
TELEGRAM_ERROR_RULES: Tuple[Tuple[str, ErrorCode, str], ...] = (
    ("chat not found", ErrorCode.CHAT_NOT_FOUND, "chat_not_found"),
    ("bot was blocked", ErrorCode.BOT_BLOCKED, "bot_blocked"),
    ("invalid token", ErrorCode.INVALID_TOKEN, "invalid_token"),
)


def classify_telegram_failure(description: Optional[str], locale: str = DEFAULT_LOCALE) -> TelegramFailure:
    text = (description or "").lower()
    for needle, code, message_key in TELEGRAM_ERROR_RULES:
        if needle in text:
            return TelegramFailure(code=code, message=message_text(message_key, locale))
    return TelegramFailure(code=ErrorCode.TELEGRAM_API_ERROR, message=message_text("telegram_api_error", locale))
