"""Status Messages — tests for the immutable message catalog."""

import pytest

from payment_instructions.core.domain_types import StatusCode
from payment_instructions.core.status_messages import (
    STATUS_MESSAGES,
    format_amount,
    insufficient_funds_reason,
    reason_for,
)


def test_catalog_covers_every_status_code():
    assert set(STATUS_MESSAGES) == set(StatusCode)


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        STATUS_MESSAGES[StatusCode.EXECUTED] = "changed"  # type: ignore[index]


def test_reason_for_looks_up_text():
    assert reason_for(StatusCode.SAME_ACCOUNT) == "Debit and credit accounts cannot be the same"


@pytest.mark.parametrize("value,expected", [(230, "230"), (230.0, "230"), (12.5, "12.5")])
def test_format_amount_drops_integral_decimal(value, expected):
    assert format_amount(value) == expected


def test_insufficient_funds_reason():
    assert insufficient_funds_reason(100.0, 500, "NGN") == (
        "Insufficient funds in debit account: has 100 NGN, needs 500 NGN"
    )
