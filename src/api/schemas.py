from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from services.exceptions import ValidationError
from services.models import AMOUNT_DECIMAL_PLACES, AMOUNT_MAX_DIGITS, TransactionStatus, TransferKind
from services.validators import parse_transfer_kind


class TransferIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kind: TransferKind
    source_account_id: int = Field(..., gt=0, alias="sourceAccountId")
    destination_account_id: int = Field(..., gt=0, alias="destinationAccountId")
    amount: Decimal = Field(..., gt=0, max_digits=AMOUNT_MAX_DIGITS, decimal_places=AMOUNT_DECIMAL_PLACES)

    @field_validator("kind", mode="before")
    @classmethod
    def _normalize_kind(cls, value):
        # accepts the legacy TRANSFER_* names as well
        try:
            return parse_transfer_kind(value)
        except ValidationError as e:
            raise ValueError(str(e)) from e


class TransactionOut(BaseModel):
    transaction_id: str
    kind: TransferKind
    account_id: int
    related_account_id: int
    amount: float
    status: TransactionStatus
    created_at: Optional[datetime] = None


class ErrorOut(BaseModel):
    timestamp: datetime
    message: str
    path: str
