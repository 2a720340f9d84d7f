"""Classification of unexpected faults raised while relaying an order."""
from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging

import httpx

from order_relay.orders.messages import DEFAULT_LOCALE, message_text
from order_relay.orders.models import ErrorCode, failure_body

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FaultClassification:
    status_code: int
    code: ErrorCode
    message: str


def _is_timeout(exc: BaseException) -> bool:
    if isinstance(exc, (httpx.TimeoutException, TimeoutError)):
        return True
    return "timeout" in type(exc).__name__.lower()


def _is_network_failure(exc: BaseException) -> bool:
    if isinstance(exc, (httpx.TransportError, ConnectionError)):
        return True
    name = type(exc).__name__
    return name in {"FetchError", "NetworkError"} or "connect" in name.lower()


class ErrorHandler:
    def __init__(self, locale: str = DEFAULT_LOCALE, include_details: bool = False):
        self.locale = locale
        self.include_details = include_details

    def classify(self, exc: BaseException) -> FaultClassification:
        # Timeouts are transport errors too, so they are checked first.
        if _is_timeout(exc):
            return FaultClassification(504, ErrorCode.TIMEOUT_ERROR, message_text("timeout_error", self.locale))
        if _is_network_failure(exc):
            return FaultClassification(502, ErrorCode.NETWORK_ERROR, message_text("network_error", self.locale))
        return FaultClassification(500, ErrorCode.INTERNAL_SERVER_ERROR, message_text("internal_error", self.locale))

    def handle_exception(self, exc: Exception, context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Log the fault and return its status code and failure body."""
        logger.error(
            "Unhandled exception while relaying order: %s: %s context=%s",
            type(exc).__name__,
            exc,
            context or {},
            exc_info=exc,
        )
        fault = self.classify(exc)
        return {
            "status_code": fault.status_code,
            "body": failure_body(
                fault.code,
                fault.message,
                details=str(exc) if self.include_details else None,
            ),
        }
