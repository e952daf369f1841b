# src/db/models.py
from sqlalchemy import Column, String, Integer, Numeric, DateTime

from db.session import Base
from services.models import AMOUNT_DECIMAL_PLACES, AMOUNT_MAX_DIGITS


class Transaction(Base):
    __tablename__ = "transactions"

    transaction_id = Column(String(36), primary_key=True)
    kind = Column(String(30), nullable=False)
    # source account of the transfer
    account_id = Column(Integer, nullable=False, index=True)
    related_account_id = Column(Integer, nullable=False)
    amount = Column(Numeric(AMOUNT_MAX_DIGITS, AMOUNT_DECIMAL_PLACES), nullable=False)
    status = Column(String(20), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
