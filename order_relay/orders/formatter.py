"""
Rendering of the Telegram notification bodies for a validated order.
"""

from __future__ import annotations

import threading
import time
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from order_relay.orders.messages import (
    ARABIC_INDIC_DIGITS,
    DAY_PERIODS,
    DEFAULT_LOCALE,
    MONTHS,
    WEEKDAYS,
    message_text,
)
from order_relay.orders.models import OrderSubmission

_order_id_lock = threading.Lock()
_last_order_id = 0


def generate_order_id() -> str:
    """Millisecond timestamp used as a display-only order identifier.

    Monotonic within the process, so two renders never share a value.
    """
    global _last_order_id
    with _order_id_lock:
        candidate = max(int(time.time() * 1000), _last_order_id + 1)
        _last_order_id = candidate
    return str(candidate)


def format_order_time(
    now: Optional[datetime] = None,
    *,
    locale: str = DEFAULT_LOCALE,
    timezone: str = "Africa/Cairo",
) -> str:
    """Long weekday/month date with a 12-hour clock, e.g. "Monday, October 19, 2026 at 09:05:03 AM"."""
    moment = (now or datetime.now(ZoneInfo("UTC"))).astimezone(ZoneInfo(timezone))
    if locale not in WEEKDAYS:
        locale = DEFAULT_LOCALE

    hour = moment.hour % 12 or 12
    am, pm = DAY_PERIODS[locale]
    clock = f"{hour:02d}:{moment.minute:02d}:{moment.second:02d} {am if moment.hour < 12 else pm}"
    weekday = WEEKDAYS[locale][moment.weekday()]
    month = MONTHS[locale][moment.month - 1]

    if locale == "ar-EG":
        rendered = f"{weekday}، {moment.day} {month} {moment.year} في {clock}"
        return rendered.translate(ARABIC_INDIC_DIGITS)
    return f"{weekday}, {month} {moment.day}, {moment.year} at {clock}"


def build_order_message(
    order: OrderSubmission,
    *,
    store_name: str,
    order_time: str,
    order_id: Optional[str] = None,
    locale: str = DEFAULT_LOCALE,
) -> str:
    def line(key: str, value) -> str:
        return message_text(key, locale).format(value=value)

    not_specified = message_text("not_specified", locale)
    price = order.product_price if order.product_price not in (None, "") else not_specified

    blocks = [
        [message_text("order_header", locale).format(store=store_name)],
        [
            line("product", order.product_name),
            line("price", price),
            line("quantity", order.quantity),
        ],
        [
            line("customer", order.name),
            line("phone", order.phone),
            line("address", order.address),
        ],
    ]
    if order.notes:
        blocks.append([message_text("notes", locale), order.notes])
    blocks.append(
        [
            line("page_url", order.page_url or not_specified),
            line("order_time", order_time),
        ]
    )
    blocks.append([line("order_id", order_id or generate_order_id())])

    return "\n\n".join("\n".join(block) for block in blocks).strip()


def build_confirmation_message(
    order: OrderSubmission,
    *,
    order_id: Optional[str] = None,
    locale: str = DEFAULT_LOCALE,
) -> str:
    return message_text("confirmation", locale).format(
        name=order.name,
        phone=order.phone,
        product=order.product_name,
        order_id=order_id or generate_order_id(),
    )
