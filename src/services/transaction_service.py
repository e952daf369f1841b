"""
Transaction Service Business Logic

Registers transfers against the account service and records their outcome,
and serves the read side of the transaction history.
"""

from typing import List, Optional, Protocol

from logging_config import get_logger
from .exceptions import (
    ExternalServiceError,
    TransactionNotFoundException,
    TransferFailedException,
)
from .models import ExecutionOutcome, TransactionRecord, TransferRequest
from .validators import validate_transfer_request

logger = get_logger("transaction_service.services.transactions")


class AccountExecutor(Protocol):
    async def execute(self, request: TransferRequest) -> ExecutionOutcome:
        ...


class TransactionStore(Protocol):
    async def save(self, record: TransactionRecord) -> TransactionRecord:
        ...

    async def find_by_id(self, transaction_id: str) -> Optional[TransactionRecord]:
        ...

    async def find_by_account_id(self, account_id: int) -> List[TransactionRecord]:
        ...

    async def find_all(self) -> List[TransactionRecord]:
        ...


class TransactionService:
    """
    Business logic for transfer registration and transaction lookups
    """

    def __init__(self, repository: TransactionStore, account_client: AccountExecutor):
        self.repository = repository
        self.account_client = account_client

    async def get_all_transactions(self) -> List[TransactionRecord]:
        return await self.repository.find_all()

    async def get_transaction_by_id(self, transaction_id: str) -> TransactionRecord:
        record = await self.repository.find_by_id(transaction_id)
        if record is None:
            logger.warning("Transaction not found id=%s", transaction_id)
            raise TransactionNotFoundException(f"Transaction not found with id: {transaction_id}")
        return record

    async def get_transactions_by_account_id(self, account_id: int) -> List[TransactionRecord]:
        """
        Transactions where account_id is the source account.

        An account with no history is reported as not found, same as an
        unknown account.
        """
        records = await self.repository.find_by_account_id(account_id)
        if not records:
            logger.warning("No transactions for account_id=%s", account_id)
            raise TransactionNotFoundException(f"No transactions found for account id: {account_id}")
        return records

    async def register_transfer(self, request: TransferRequest) -> TransactionRecord:
        """
        Execute a transfer through the account service and record the result.

        The record is persisted exactly once whenever the account service
        answers, whether it completed or rejected the transfer. If the call
        itself fails nothing is persisted and ExternalServiceError propagates.

        Raises:
            ValidationError: the request is malformed; nothing was sent or saved
            ExternalServiceError: the outcome is unknown; nothing was saved
            TransferFailedException: the transfer was rejected; a FAILED record was saved
            PersistenceError: the outcome is known but could not be saved
        """
        validate_transfer_request(request)

        record = TransactionRecord.pending(request)
        logger.info(
            "Transfer pending kind=%s from=%s to=%s amount=%s",
            record.kind.value,
            record.account_id,
            record.related_account_id,
            record.amount,
        )

        try:
            outcome = await self.account_client.execute(request)
        except ExternalServiceError:
            logger.error(
                "Transfer outcome unknown from=%s to=%s; nothing recorded",
                record.account_id,
                record.related_account_id,
            )
            raise

        if outcome.success:
            record.mark_completed()
        else:
            record.mark_failed()

        saved = await self.repository.save(record)

        if not outcome.success:
            logger.warning(
                "Transfer rejected id=%s code=%s message=%s",
                saved.id,
                outcome.error_code,
                outcome.error_message,
            )
            raise TransferFailedException(outcome.error_code, outcome.error_message, saved)

        logger.info("Transfer completed id=%s", saved.id)
        return saved
