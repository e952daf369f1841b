"""
Error taxonomy for the transaction service.

Every error raised by the core derives from TransactionServiceError so the
HTTP layer can map each class to one status code.
"""

from typing import List, Optional


class TransactionServiceError(Exception):
    """Base class for transaction service errors."""


class ValidationError(TransactionServiceError):
    """Raised when a transfer request is malformed. No side effects happened."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or [message]


class ExternalServiceError(TransactionServiceError):
    """
    Raised when the account service could not be reached or answered with
    something that is not a transfer outcome. The transfer's fate is unknown
    and no record is persisted.
    """


class TransferFailedException(TransactionServiceError):
    """
    Raised when the account service rejected the transfer. The FAILED record
    has already been persisted when this is raised.
    """

    def __init__(self, error_code: str, error_message: str, transaction=None):
        super().__init__(f"{error_code} - {error_message}")
        self.error_code = error_code
        self.error_message = error_message
        self.transaction = transaction


class TransactionNotFoundException(TransactionServiceError):
    """Raised when a read finds no matching transaction."""


class PersistenceError(TransactionServiceError):
    """Raised when the transaction store fails to read or write."""


class InvalidStatusTransition(TransactionServiceError):
    """Raised when a record is moved out of a non-pending status."""
