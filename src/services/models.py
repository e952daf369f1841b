"""
Domain types for transfer registration.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from .exceptions import InvalidStatusTransition

# Money columns are Numeric(15, 2)
AMOUNT_MAX_DIGITS = 15
AMOUNT_DECIMAL_PLACES = 2


class TransferKind(str, Enum):
    OWN_ACCOUNT = "OWN_ACCOUNT"
    THIRD_PARTY_ACCOUNT = "THIRD_PARTY_ACCOUNT"


class TransactionStatus(str, Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class TransferRequest:
    kind: TransferKind
    source_account_id: int
    destination_account_id: int
    amount: Decimal


@dataclass(frozen=True)
class ExecutionOutcome:
    """
    Verdict returned by the account service for one transfer.

    Use succeeded() / rejected() to build one; a rejected outcome always
    carries a non-empty error code and message, a successful one never does.
    """

    success: bool
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    source_account_id: Optional[int] = None
    destination_account_id: Optional[int] = None
    final_source_balance: Optional[Decimal] = None
    final_destination_balance: Optional[Decimal] = None

    def __post_init__(self):
        if self.success and (self.error_code is not None or self.error_message is not None):
            raise ValueError("successful outcome cannot carry error details")
        if not self.success and not (self.error_code and self.error_message):
            raise ValueError("rejected outcome needs an error code and message")

    @classmethod
    def succeeded(cls, **balances: Any) -> "ExecutionOutcome":
        return cls(success=True, **balances)

    @classmethod
    def rejected(cls, error_code: str, error_message: str, **balances: Any) -> "ExecutionOutcome":
        return cls(success=False, error_code=error_code, error_message=error_message, **balances)


class TransactionRecord:
    """
    A transfer attempt as stored by the service.

    The record starts PENDING without an id. It may be completed or failed
    once, and the store assigns its id once. amount and created_at never
    change after construction.
    """

    def __init__(
        self,
        kind: TransferKind,
        account_id: int,
        related_account_id: int,
        amount: Decimal,
        created_at: Optional[datetime] = None,
        status: TransactionStatus = TransactionStatus.PENDING,
        id: Optional[str] = None,
    ):
        self.kind = TransferKind(kind)
        self.account_id = account_id
        self.related_account_id = related_account_id
        self._amount = amount if isinstance(amount, Decimal) else Decimal(str(amount))
        self._created_at = created_at or datetime.now(timezone.utc)
        self._status = TransactionStatus(status)
        self._id = id

    @classmethod
    def pending(cls, request: TransferRequest) -> "TransactionRecord":
        return cls(
            kind=request.kind,
            account_id=request.source_account_id,
            related_account_id=request.destination_account_id,
            amount=request.amount,
        )

    @property
    def id(self) -> Optional[str]:
        return self._id

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def status(self) -> TransactionStatus:
        return self._status

    def assign_id(self, transaction_id: str) -> None:
        if self._id is not None:
            raise InvalidStatusTransition(
                f"Transaction {self._id} already has an id; refusing {transaction_id}"
            )
        self._id = transaction_id

    def mark_completed(self) -> None:
        self._finalize(TransactionStatus.COMPLETED)

    def mark_failed(self) -> None:
        self._finalize(TransactionStatus.FAILED)

    def _finalize(self, status: TransactionStatus) -> None:
        if self._status is not TransactionStatus.PENDING:
            raise InvalidStatusTransition(
                f"Cannot move transaction from {self._status.value} to {status.value}"
            )
        self._status = status

    def __eq__(self, other):
        if not isinstance(other, TransactionRecord):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self):
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self):
        return (
            f"TransactionRecord(id={self._id!r}, kind={self.kind.value}, "
            f"account_id={self.account_id}, related_account_id={self.related_account_id}, "
            f"amount={self._amount}, status={self._status.value})"
        )
