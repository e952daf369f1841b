"""
Transfer registration core: domain types, validation and the orchestrating service
"""

from .exceptions import (
    ExternalServiceError,
    InvalidStatusTransition,
    PersistenceError,
    TransactionNotFoundException,
    TransactionServiceError,
    TransferFailedException,
    ValidationError,
)
from .models import (
    ExecutionOutcome,
    TransactionRecord,
    TransactionStatus,
    TransferKind,
    TransferRequest,
)
from .transaction_service import TransactionService
from .validators import parse_transfer_kind, validate_transfer_request

__all__ = [
    "ExecutionOutcome",
    "ExternalServiceError",
    "InvalidStatusTransition",
    "PersistenceError",
    "TransactionNotFoundException",
    "TransactionRecord",
    "TransactionService",
    "TransactionServiceError",
    "TransactionStatus",
    "TransferFailedException",
    "TransferKind",
    "TransferRequest",
    "ValidationError",
    "parse_transfer_kind",
    "validate_transfer_request",
]
