from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from clients.account_client import AccountServiceClient
from db.deps import get_db
from db.repository import TransactionRepository
from services.transaction_service import TransactionService


def get_account_client(request: Request) -> AccountServiceClient:
    """
    Shared account service client created at startup.
    """
    return request.app.state.account_client


async def get_transaction_service(
    db: AsyncSession = Depends(get_db),
    account_client: AccountServiceClient = Depends(get_account_client),
) -> TransactionService:
    return TransactionService(TransactionRepository(db), account_client)
