"""
Order submission flow: validate, format, notify, respond.

One handler instance serves one request. Validation and configuration
failures return before any outbound call; everything else that goes wrong is
caught once here and classified by ErrorHandler.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from order_relay.error_handler import ErrorHandler
from order_relay.integrations.telegram import TelegramBotService, classify_telegram_failure
from order_relay.orders import messages
from order_relay.orders.formatter import (
    build_confirmation_message,
    build_order_message,
    format_order_time,
)
from order_relay.orders.models import ErrorCode, OrderResponse, OrderSubmission, failure_body
from order_relay.orders.validation import OrderValidationError, validate_request
from order_relay.utils.config_loader import NotifierSettings

logger = logging.getLogger(__name__)

BotServiceFactory = Callable[[NotifierSettings], TelegramBotService]


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class OrderSubmissionHandler:
    def __init__(
        self,
        settings: NotifierSettings,
        bot_service_factory: Optional[BotServiceFactory] = None,
        error_handler: Optional[ErrorHandler] = None,
    ):
        self.settings = settings
        self.locale = settings.config.formatting.locale
        self.bot_service_factory = bot_service_factory or TelegramBotService.from_settings
        self.error_handler = error_handler or ErrorHandler(
            locale=self.locale,
            include_details=settings.is_development,
        )

    async def handle(
        self,
        method: str,
        payload: Any,
        client_info: Optional[Dict[str, Any]] = None,
    ) -> OrderResponse:
        try:
            order = validate_request(method, payload)
            self._log_submission(order, client_info or {})
            return await self._relay(order)
        except OrderValidationError as e:
            logger.info("Rejected order submission: %s (%s)", e.code.value, e.message)
            return OrderResponse(
                e.status_code,
                failure_body(e.code, e.message, missingFields=e.missing_fields or None),
            )
        except Exception as e:
            handled = self.error_handler.handle_exception(e, context={"method": method})
            return OrderResponse(handled["status_code"], handled["body"])

    async def _relay(self, order: OrderSubmission) -> OrderResponse:
        settings = self.settings
        if not settings.has_credentials:
            logger.error("Telegram credentials missing in environment variables")
            logger.error(
                "BOT_TOKEN exists: %s, CHAT_ID exists: %s",
                bool(settings.bot_token),
                bool(settings.chat_id),
            )
            return OrderResponse(
                500,
                failure_body(ErrorCode.SERVER_CONFIG_ERROR, messages.SERVER_CONFIG_ERROR),
            )

        formatting = settings.config.formatting
        order_time = order.timestamp or format_order_time(locale=formatting.locale, timezone=formatting.timezone)
        text = build_order_message(
            order,
            store_name=formatting.store_name,
            order_time=order_time,
            locale=formatting.locale,
        )

        service = self.bot_service_factory(settings)
        outcome = await service.send_order_notification(text)

        if not outcome.ok:
            failure = classify_telegram_failure(outcome.description, self.locale)
            return OrderResponse(
                failure.status_code,
                failure_body(failure.code, failure.message, telegramError=outcome.description),
            )

        if outcome.message_id is not None:
            service.dispatch_confirmation(
                build_confirmation_message(order, locale=formatting.locale),
                outcome.message_id,
            )
        else:
            logger.warning("Telegram response carried no message_id; skipping confirmation")

        logger.info(
            "Order summary: product=%s customer=%s phone=%s quantity=%s message_id=%s",
            order.product_name,
            order.name,
            order.phone,
            order.quantity,
            outcome.message_id,
        )

        return OrderResponse(
            200,
            {
                "success": True,
                "message": messages.message_text("order_sent", self.locale),
                "message_id": outcome.message_id,
                "timestamp": utc_timestamp(),
                "order_summary": order.summary(),
            },
        )

    @staticmethod
    def _log_submission(order: OrderSubmission, client_info: Dict[str, Any]) -> None:
        entry = {
            "type": "ORDER_SUBMITTED",
            "timestamp": utc_timestamp(),
            "data": {
                "product": order.product_name,
                "customer": order.name,
                "phone": order.phone,
                "quantity": order.quantity,
                "ip": client_info.get("ip"),
                "userAgent": client_info.get("user_agent"),
            },
        }
        logger.info("Order log: %s", json.dumps(entry, ensure_ascii=False))
