"""
Validation tests for storefront order submissions.

Run:
    pytest tests/test_order_validation.py -q
"""

import pytest

from order_relay.orders.models import ErrorCode
from order_relay.orders.validation import (
    OrderValidationError,
    REQUIRED_FIELDS,
    is_valid_phone,
    parse_quantity,
    validate_request,
)


@pytest.mark.parametrize("method", ["GET", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"])
def test_non_post_methods_are_rejected(method, valid_order):
    with pytest.raises(OrderValidationError) as exc:
        validate_request(method, valid_order)
    assert exc.value.code is ErrorCode.METHOD_NOT_ALLOWED
    assert exc.value.status_code == 405


def test_method_check_runs_before_field_checks():
    with pytest.raises(OrderValidationError) as exc:
        validate_request("GET", {})
    assert exc.value.code is ErrorCode.METHOD_NOT_ALLOWED


def test_lowercase_post_is_accepted(valid_order):
    order = validate_request("post", valid_order)
    assert order.product_name == "Classic Cap"


def test_missing_fields_reported_in_canonical_order():
    payload = {"quantity": 1, "name": "Ali", "address": ""}
    with pytest.raises(OrderValidationError) as exc:
        validate_request("POST", payload)
    assert exc.value.code is ErrorCode.MISSING_FIELDS
    assert exc.value.status_code == 400
    assert exc.value.missing_fields == ["productName", "phone", "address"]
    assert exc.value.message == "Missing required fields: productName, phone, address"


def test_empty_payload_reports_every_required_field():
    with pytest.raises(OrderValidationError) as exc:
        validate_request("POST", {})
    assert exc.value.missing_fields == list(REQUIRED_FIELDS)


def test_non_object_payload_is_treated_as_empty():
    with pytest.raises(OrderValidationError) as exc:
        validate_request("POST", ["productName"])
    assert exc.value.missing_fields == list(REQUIRED_FIELDS)


def test_blank_and_null_values_count_as_missing(valid_order):
    valid_order["name"] = "   "
    valid_order["address"] = None
    with pytest.raises(OrderValidationError) as exc:
        validate_request("POST", valid_order)
    assert exc.value.missing_fields == ["name", "address"]


def test_missing_fields_checked_before_phone_format(valid_order):
    valid_order["phone"] = "123"
    del valid_order["productName"]
    with pytest.raises(OrderValidationError) as exc:
        validate_request("POST", valid_order)
    assert exc.value.code is ErrorCode.MISSING_FIELDS


def test_short_phone_is_invalid(valid_order):
    valid_order["phone"] = "123"
    with pytest.raises(OrderValidationError) as exc:
        validate_request("POST", valid_order)
    assert exc.value.code is ErrorCode.INVALID_PHONE
    assert exc.value.message == "Invalid phone number format"


@pytest.mark.parametrize(
    "phone",
    ["+20 100 123 4567", "01001234567", "(02) 2345-6789", "12345678", "+1 (555) 000-1234"],
)
def test_phone_shapes_that_pass(phone):
    assert is_valid_phone(phone)


@pytest.mark.parametrize(
    "phone",
    ["123", "0100abc4567", "1234567", "+20 100 123 4567 0000 99", "phone: 0100", "1" * 20 + "\n"],
)
def test_phone_shapes_that_fail(phone):
    assert not is_valid_phone(phone)


def test_phone_checked_before_quantity(valid_order):
    valid_order["phone"] = "123"
    valid_order["quantity"] = 0
    with pytest.raises(OrderValidationError) as exc:
        validate_request("POST", valid_order)
    assert exc.value.code is ErrorCode.INVALID_PHONE


def test_zero_quantity_is_invalid_not_missing(valid_order):
    valid_order["quantity"] = 0
    with pytest.raises(OrderValidationError) as exc:
        validate_request("POST", valid_order)
    assert exc.value.code is ErrorCode.INVALID_QUANTITY
    assert exc.value.message == "Quantity must be at least 1"


@pytest.mark.parametrize("quantity", [-3, "abc", 1.5, True, [2], "0", "1_000", "٣"])
def test_non_positive_or_non_numeric_quantity_is_invalid(quantity, valid_order):
    valid_order["quantity"] = quantity
    with pytest.raises(OrderValidationError) as exc:
        validate_request("POST", valid_order)
    assert exc.value.code is ErrorCode.INVALID_QUANTITY


def test_quantity_of_one_passes(valid_order):
    valid_order["quantity"] = 1
    assert validate_request("POST", valid_order).quantity == 1


def test_large_quantity_has_no_upper_bound(valid_order):
    valid_order["quantity"] = 10_000
    assert validate_request("POST", valid_order).quantity == 10_000


@pytest.mark.parametrize("raw,expected", [(3, 3), ("4", 4), (" 5 ", 5), (2.0, 2), ("x", None), ("1_000", None), (False, None), (None, None)])
def test_parse_quantity(raw, expected):
    assert parse_quantity(raw) == expected


def test_optional_fields_are_normalized(valid_order):
    valid_order.pop("notes")
    valid_order.pop("pageUrl")
    valid_order.pop("productPrice")
    order = validate_request("POST", valid_order)
    assert order.notes == ""
    assert order.page_url is None
    assert order.product_price is None
    assert order.timestamp is None
    assert order.summary() == {"product": "Classic Cap", "customer": "Mona Adel", "quantity": 2}


def test_numeric_price_and_caller_timestamp_are_kept(valid_order):
    valid_order["productPrice"] = 199.5
    valid_order["timestamp"] = "2026-10-19 10:00"
    order = validate_request("POST", valid_order)
    assert order.product_price == 199.5
    assert order.timestamp == "2026-10-19 10:00"
