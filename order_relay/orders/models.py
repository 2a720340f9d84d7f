from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    MISSING_FIELDS = "MISSING_FIELDS"
    INVALID_PHONE = "INVALID_PHONE"
    INVALID_QUANTITY = "INVALID_QUANTITY"
    INVALID_BODY = "INVALID_BODY"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"
    SERVER_CONFIG_ERROR = "SERVER_CONFIG_ERROR"
    CHAT_NOT_FOUND = "CHAT_NOT_FOUND"
    BOT_BLOCKED = "BOT_BLOCKED"
    INVALID_TOKEN = "INVALID_TOKEN"
    TELEGRAM_API_ERROR = "TELEGRAM_API_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


# ---------------------------------------------------------------------------
# Request / outcome models
# ---------------------------------------------------------------------------

class OrderSubmission(BaseModel):
    """A storefront order that passed validation. Lives for one request."""

    model_config = ConfigDict(populate_by_name=True)

    product_name: str = Field(..., alias="productName")
    product_price: Optional[Union[str, int, float]] = Field(default=None, alias="productPrice")
    name: str
    phone: str
    address: str
    quantity: int = Field(..., ge=1)
    notes: str = ""
    page_url: Optional[str] = Field(default=None, alias="pageUrl")
    timestamp: Optional[str] = None

    def summary(self) -> Dict[str, Any]:
        return {
            "product": self.product_name,
            "customer": self.name,
            "quantity": self.quantity,
        }


@dataclass
class NotificationOutcome:
    """Acknowledgment returned by the Telegram Bot API for one sendMessage call."""

    ok: bool
    message_id: Optional[int] = None
    description: Optional[str] = None
    error_code: Optional[int] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api_payload(cls, payload: Any) -> "NotificationOutcome":
        if not isinstance(payload, dict):
            return cls(ok=False, description=f"Unexpected Telegram response: {payload!r}")
        result = payload.get("result") if isinstance(payload.get("result"), dict) else {}
        return cls(
            ok=payload.get("ok") is True,
            message_id=result.get("message_id"),
            description=payload.get("description"),
            error_code=payload.get("error_code"),
            raw=payload,
        )


@dataclass
class OrderResponse:
    status_code: int
    body: Dict[str, Any]


def failure_body(code: ErrorCode, message: str, **extra: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": False, "error": message, "code": code.value}
    body.update({k: v for k, v in extra.items() if v is not None})
    return body
