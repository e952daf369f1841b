"""
Transfer request validation
"""

import math
from decimal import Decimal
from typing import Any, List

from .exceptions import ValidationError
from .models import AMOUNT_DECIMAL_PLACES, AMOUNT_MAX_DIGITS, TransferKind, TransferRequest

# Spellings used by neighbouring services for the same two kinds
LEGACY_KIND_NAMES = {
    "TRANSFER_OWN_ACCOUNT": TransferKind.OWN_ACCOUNT,
    "TRANSFER_THIRD_PARTY_ACCOUNT": TransferKind.THIRD_PARTY_ACCOUNT,
    "TRANSFER_INTER_ACCOUNT": TransferKind.THIRD_PARTY_ACCOUNT,
}


def parse_transfer_kind(value: Any) -> TransferKind:
    """
    Map a canonical or legacy kind name to TransferKind.
    """
    if isinstance(value, TransferKind):
        return value
    if isinstance(value, str):
        name = value.strip().upper()
        if name in TransferKind.__members__:
            return TransferKind[name]
        if name in LEGACY_KIND_NAMES:
            return LEGACY_KIND_NAMES[name]
    allowed = ", ".join(k.value for k in TransferKind)
    raise ValidationError(f"kind must be one of {allowed}; got {value!r}")


def _check_account_id(field: str, value: Any, errors: List[str]) -> None:
    if value is None:
        errors.append(f"{field} is required")
    elif isinstance(value, bool) or not isinstance(value, int):
        errors.append(f"{field} must be an integer")
    elif value <= 0:
        errors.append(f"{field} must be positive")


def _check_amount(value: Any, errors: List[str]) -> None:
    if value is None:
        errors.append("amount is required")
        return
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        errors.append("amount must be a number")
        return
    if isinstance(value, Decimal):
        finite = value.is_finite()
    else:
        finite = math.isfinite(value)
    if not finite:
        errors.append("amount must be a finite number")
    elif value <= 0:
        errors.append("amount must be positive")
    else:
        _check_amount_precision(value if isinstance(value, Decimal) else Decimal(str(value)), errors)


def _check_amount_precision(amount: Decimal, errors: List[str]) -> None:
    # must fit the stored column exactly
    integer_digits = AMOUNT_MAX_DIGITS - AMOUNT_DECIMAL_PLACES
    if amount.adjusted() + 1 > integer_digits:
        errors.append(f"amount must have at most {integer_digits} integer digits")
    elif amount != amount.quantize(Decimal(1).scaleb(-AMOUNT_DECIMAL_PLACES)):
        errors.append(f"amount must have at most {AMOUNT_DECIMAL_PLACES} decimal places")


def validate_transfer_request(request: TransferRequest) -> TransferRequest:
    """
    Check a transfer request before anything is recorded or sent.

    Returns the same request when it is valid, otherwise raises
    ValidationError listing every problem found.
    """
    errors: List[str] = []

    if not isinstance(request.kind, TransferKind):
        errors.append("kind must be OWN_ACCOUNT or THIRD_PARTY_ACCOUNT")

    _check_account_id("source_account_id", request.source_account_id, errors)
    _check_account_id("destination_account_id", request.destination_account_id, errors)
    _check_amount(request.amount, errors)

    if errors:
        raise ValidationError("; ".join(errors), errors)
    return request
