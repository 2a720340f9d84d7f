"""Validation for storefront order submissions.

Checks run in a fixed order: HTTP method, required-field presence, phone
format, quantity bound. The first failing check raises `OrderValidationError`
and later checks are not evaluated.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from order_relay.orders import messages
from order_relay.orders.models import ErrorCode, OrderSubmission

ACCEPTED_METHOD = "POST"

REQUIRED_FIELDS = ("productName", "name", "phone", "address", "quantity")

_PHONE_RE = re.compile(r"[0-9\s\-+()]{8,20}")

_QUANTITY_RE = re.compile(r"[+-]?[0-9]+")


@dataclass
class OrderValidationError(Exception):
    """Exception raised when a submission is rejected before any outbound call.

    Attributes:
        code: machine-readable error code.
        message: caller-facing description.
        missing_fields: required fields that were absent, in canonical order.
    """

    code: ErrorCode
    message: str
    missing_fields: List[str] = field(default_factory=list)

    @property
    def status_code(self) -> int:
        return 405 if self.code is ErrorCode.METHOD_NOT_ALLOWED else 400

    def __str__(self) -> str:  # pragma: no cover
        return self.message


def _as_str(v: Any) -> str:
    return "" if v is None else str(v)


def _is_missing(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def check_method(method: str) -> None:
    if (method or "").upper() != ACCEPTED_METHOD:
        raise OrderValidationError(ErrorCode.METHOD_NOT_ALLOWED, messages.METHOD_NOT_ALLOWED)


def find_missing_fields(payload: Dict[str, Any]) -> List[str]:
    return [name for name in REQUIRED_FIELDS if _is_missing(payload.get(name))]


def is_valid_phone(value: Any) -> bool:
    return bool(_PHONE_RE.fullmatch(_as_str(value)))


def parse_quantity(value: Any) -> Optional[int]:
    """Return the quantity as an int, or None when it is not a whole number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        # Plain ASCII integers only: no "1_000", no non-ASCII digits.
        return int(text) if _QUANTITY_RE.fullmatch(text) else None
    return None


def validate_order(payload: Any) -> OrderSubmission:
    """Validate a parsed request body and build the OrderSubmission.

    A body that is not a JSON object is treated as an empty submission.
    """
    data: Dict[str, Any] = payload if isinstance(payload, dict) else {}

    missing = find_missing_fields(data)
    if missing:
        raise OrderValidationError(
            ErrorCode.MISSING_FIELDS,
            messages.MISSING_FIELDS.format(fields=", ".join(missing)),
            missing_fields=missing,
        )

    if not is_valid_phone(data.get("phone")):
        raise OrderValidationError(ErrorCode.INVALID_PHONE, messages.INVALID_PHONE)

    quantity = parse_quantity(data.get("quantity"))
    if quantity is None or quantity < 1:
        raise OrderValidationError(ErrorCode.INVALID_QUANTITY, messages.INVALID_QUANTITY)

    notes = data.get("notes")
    page_url = data.get("pageUrl")
    timestamp = data.get("timestamp")
    price = data.get("productPrice")
    return OrderSubmission(
        product_name=_as_str(data["productName"]),
        product_price=price if isinstance(price, (str, int, float)) and not isinstance(price, bool) else None,
        name=_as_str(data["name"]),
        phone=_as_str(data["phone"]),
        address=_as_str(data["address"]),
        quantity=quantity,
        notes=_as_str(notes) if notes else "",
        page_url=_as_str(page_url) if page_url else None,
        timestamp=_as_str(timestamp) if timestamp else None,
    )


def validate_request(method: str, payload: Any) -> OrderSubmission:
    """Run the method check, then validate the body."""
    check_method(method)
    return validate_order(payload)
