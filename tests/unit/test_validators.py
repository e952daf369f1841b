from __future__ import annotations

from decimal import Decimal

import pytest

from services.exceptions import ValidationError
from services.models import TransferKind, TransferRequest
from services.validators import parse_transfer_kind, validate_transfer_request


def _request(**overrides) -> TransferRequest:
    fields = {
        "kind": TransferKind.OWN_ACCOUNT,
        "source_account_id": 1,
        "destination_account_id": 2,
        "amount": Decimal("100.0"),
    }
    fields.update(overrides)
    return TransferRequest(**fields)


def test_valid_request_is_returned_unchanged() -> None:
    request = _request(kind=TransferKind.THIRD_PARTY_ACCOUNT)

    assert validate_transfer_request(request) is request


@pytest.mark.parametrize(
    "overrides, expected",
    [
        ({"amount": None}, "amount is required"),
        ({"amount": Decimal("0")}, "amount must be positive"),
        ({"amount": -5}, "amount must be positive"),
        ({"amount": float("nan")}, "amount must be a finite number"),
        ({"amount": "100"}, "amount must be a number"),
        ({"amount": Decimal("100.129")}, "amount must have at most 2 decimal places"),
        ({"amount": 0.001}, "amount must have at most 2 decimal places"),
        ({"amount": Decimal("10000000000000")}, "amount must have at most 13 integer digits"),
        ({"amount": 10**20}, "amount must have at most 13 integer digits"),
        ({"source_account_id": None}, "source_account_id is required"),
        ({"source_account_id": 0}, "source_account_id must be positive"),
        ({"destination_account_id": -3}, "destination_account_id must be positive"),
        ({"destination_account_id": True}, "destination_account_id must be an integer"),
        ({"kind": "OWN_ACCOUNT"}, "kind must be OWN_ACCOUNT or THIRD_PARTY_ACCOUNT"),
        ({"kind": None}, "kind must be OWN_ACCOUNT or THIRD_PARTY_ACCOUNT"),
    ],
)
def test_invalid_request_is_rejected(overrides, expected) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_transfer_request(_request(**overrides))

    assert expected in excinfo.value.errors


@pytest.mark.parametrize(
    "amount",
    [Decimal("0.01"), Decimal("100.10"), Decimal("100.120"), Decimal("9999999999999.99"), 100.5, 250],
)
def test_amounts_that_fit_the_stored_column_are_accepted(amount) -> None:
    request = _request(amount=amount)

    assert validate_transfer_request(request) is request


def test_every_problem_is_reported() -> None:
    request = _request(source_account_id=0, destination_account_id=None, amount=Decimal("-1"))

    with pytest.raises(ValidationError) as excinfo:
        validate_transfer_request(request)

    assert len(excinfo.value.errors) == 3
    assert "source_account_id must be positive" in str(excinfo.value)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("OWN_ACCOUNT", TransferKind.OWN_ACCOUNT),
        ("third_party_account", TransferKind.THIRD_PARTY_ACCOUNT),
        ("TRANSFER_OWN_ACCOUNT", TransferKind.OWN_ACCOUNT),
        ("TRANSFER_THIRD_PARTY_ACCOUNT", TransferKind.THIRD_PARTY_ACCOUNT),
        ("TRANSFER_INTER_ACCOUNT", TransferKind.THIRD_PARTY_ACCOUNT),
        (TransferKind.OWN_ACCOUNT, TransferKind.OWN_ACCOUNT),
    ],
)
def test_parse_transfer_kind_accepts_canonical_and_legacy_names(raw, expected) -> None:
    assert parse_transfer_kind(raw) is expected


@pytest.mark.parametrize("raw", ["DEPOSIT", "", None, 1])
def test_parse_transfer_kind_rejects_unknown_values(raw) -> None:
    with pytest.raises(ValidationError):
        parse_transfer_kind(raw)
