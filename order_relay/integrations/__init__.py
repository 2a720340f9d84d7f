"""
Integrations layer.
This package contains the code used to communicate with external systems:
- Telegram Bot API (order notifications and confirmation replies)

Key rule:
- Order handling MUST NOT call external APIs directly.
- It goes through the clients under order_relay/integrations.
"""

from .telegram import TelegramBotService, classify_telegram_failure

__all__ = ["TelegramBotService", "classify_telegram_failure"]
