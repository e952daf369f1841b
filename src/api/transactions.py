from typing import List

from fastapi import APIRouter, Depends

from logging_config import get_logger
from services.transaction_service import TransactionService
from .deps import get_transaction_service
from .schemas import ErrorOut, TransactionOut, TransferIn
from .serializers import serialize_transaction, to_transfer_request

logger = get_logger("transaction_service.api.transactions")

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=List[TransactionOut])
async def list_transactions(service: TransactionService = Depends(get_transaction_service)):
    """
    Return every registered transaction, newest first.
    """
    records = await service.get_all_transactions()
    return [serialize_transaction(r) for r in records]


@router.get(
    "/account/{account_id}",
    response_model=List[TransactionOut],
    responses={404: {"model": ErrorOut}},
)
async def list_account_transactions(
    account_id: int,
    service: TransactionService = Depends(get_transaction_service),
):
    """
    Return transactions whose source is account_id. 404 when there are none.
    """
    logger.info("Fetching transactions for account_id=%s", account_id)
    records = await service.get_transactions_by_account_id(account_id)
    return [serialize_transaction(r) for r in records]


@router.get(
    "/{transaction_id}",
    response_model=TransactionOut,
    responses={404: {"model": ErrorOut}},
)
async def get_transaction(
    transaction_id: str,
    service: TransactionService = Depends(get_transaction_service),
):
    record = await service.get_transaction_by_id(transaction_id)
    return serialize_transaction(record)


@router.post(
    "/transfer",
    response_model=TransactionOut,
    status_code=201,
    responses={
        400: {"model": ErrorOut},
        422: {"model": ErrorOut},
        503: {"model": ErrorOut},
    },
)
async def register_transfer(
    payload: TransferIn,
    service: TransactionService = Depends(get_transaction_service),
):
    """
    Execute a transfer through the account service and record it.
    """
    logger.info(
        "Transfer request kind=%s from=%s to=%s amount=%s",
        payload.kind.value,
        payload.source_account_id,
        payload.destination_account_id,
        payload.amount,
    )
    record = await service.register_transfer(to_transfer_request(payload))
    return serialize_transaction(record)
