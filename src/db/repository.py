"""
SQLAlchemy-backed transaction store.
"""

from datetime import timezone
from typing import List, Optional
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from db.models import Transaction
from logging_config import get_logger
from services.exceptions import InvalidStatusTransition, PersistenceError
from services.models import TransactionRecord

logger = get_logger("transaction_service.db.repository")


def _to_record(row: Transaction) -> TransactionRecord:
    created_at = row.created_at
    # SQLite drops the offset; rows are always written in UTC
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return TransactionRecord(
        id=row.transaction_id,
        kind=row.kind,
        account_id=row.account_id,
        related_account_id=row.related_account_id,
        amount=row.amount,
        created_at=created_at,
        status=row.status,
    )


class TransactionRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, record: TransactionRecord) -> TransactionRecord:
        """
        Insert a new record in its own commit and assign its id.
        """
        if record.id is not None:
            raise InvalidStatusTransition(f"Transaction {record.id} is already saved")
        transaction_id = str(uuid4())
        row = Transaction(
            transaction_id=transaction_id,
            kind=record.kind.value,
            account_id=record.account_id,
            related_account_id=record.related_account_id,
            amount=record.amount,
            status=record.status.value,
            created_at=record.created_at,
        )
        try:
            self.session.add(row)
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.exception("Failed to save transaction account_id=%s: %s", record.account_id, e)
            await self.session.rollback()
            raise PersistenceError(f"Could not save transaction: {e}") from e

        record.assign_id(transaction_id)
        logger.info("Saved transaction id=%s status=%s", transaction_id, record.status.value)
        return record

    async def find_by_id(self, transaction_id: str) -> Optional[TransactionRecord]:
        stmt = select(Transaction).where(Transaction.transaction_id == transaction_id)
        row = (await self._execute(stmt)).scalars().first()
        return _to_record(row) if row is not None else None

    async def find_by_account_id(self, account_id: int) -> List[TransactionRecord]:
        stmt = (
            select(Transaction)
            .where(Transaction.account_id == account_id)
            .order_by(Transaction.created_at.desc(), Transaction.transaction_id.desc())
        )
        rows = (await self._execute(stmt)).scalars().all()
        return [_to_record(r) for r in rows]

    async def find_all(self) -> List[TransactionRecord]:
        stmt = select(Transaction).order_by(Transaction.created_at.desc(), Transaction.transaction_id.desc())
        rows = (await self._execute(stmt)).scalars().all()
        return [_to_record(r) for r in rows]

    async def _execute(self, stmt):
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.exception("Transaction query failed: %s", e)
            raise PersistenceError(f"Could not read transactions: {e}") from e
