from typing import Any, Dict

from services.models import TransactionRecord, TransferRequest

from .schemas import TransferIn


def serialize_transaction(t: TransactionRecord) -> Dict[str, Any]:
    return {
        "transaction_id": t.id,
        "kind": t.kind.value,
        "account_id": t.account_id,
        "related_account_id": t.related_account_id,
        "amount": float(t.amount) if t.amount is not None else None,
        "status": t.status.value,
        "created_at": t.created_at.isoformat() if t.created_at else None,
    }


def to_transfer_request(payload: TransferIn) -> TransferRequest:
    return TransferRequest(
        kind=payload.kind,
        source_account_id=payload.source_account_id,
        destination_account_id=payload.destination_account_id,
        amount=payload.amount,
    )
