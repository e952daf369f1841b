"""
Pytest configuration for the transaction service.

Provides:
- Environment overrides applied before any service module is imported
- In-memory fakes for the account service and the transaction store
- A SQLite-backed session for repository tests
"""

from __future__ import annotations

import os
import tempfile

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="transaction-service-logs-"))
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ACCOUNT_SERVICE_URL", "http://accounts.test")

from decimal import Decimal  # noqa: E402
from typing import List, Optional  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from db import models  # noqa: E402,F401
from db.session import Base  # noqa: E402
from services.models import (  # noqa: E402
    ExecutionOutcome,
    TransactionRecord,
    TransferKind,
    TransferRequest,
)


class FakeAccountClient:
    """
    Stands in for AccountServiceClient. Returns `outcome` or raises `error`.
    """

    def __init__(self, events: List[str], outcome: Optional[ExecutionOutcome] = None, error=None):
        self.events = events
        self.outcome = outcome or ExecutionOutcome.succeeded()
        self.error = error
        self.requests: List[TransferRequest] = []

    async def execute(self, request: TransferRequest) -> ExecutionOutcome:
        self.events.append("execute")
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.outcome


class InMemoryStore:
    """
    Dict-backed transaction store that assigns sequential ids.
    """

    def __init__(self, events: List[str], error=None):
        self.events = events
        self.error = error
        self.records: dict[str, TransactionRecord] = {}
        self.saved_statuses: list = []

    async def save(self, record: TransactionRecord) -> TransactionRecord:
        self.events.append("save")
        self.saved_statuses.append(record.status)
        if self.error is not None:
            raise self.error
        record.assign_id(f"txn-{len(self.records) + 1}")
        self.records[record.id] = record
        return record

    async def find_by_id(self, transaction_id: str) -> Optional[TransactionRecord]:
        return self.records.get(transaction_id)

    async def find_by_account_id(self, account_id: int) -> List[TransactionRecord]:
        return [r for r in self.records.values() if r.account_id == account_id]

    async def find_all(self) -> List[TransactionRecord]:
        return list(self.records.values())


@pytest.fixture
def events() -> List[str]:
    """
    Shared call log so tests can assert execute/save ordering.
    """
    return []


@pytest.fixture
def account_client(events) -> FakeAccountClient:
    return FakeAccountClient(events)


@pytest.fixture
def store(events) -> InMemoryStore:
    return InMemoryStore(events)


@pytest.fixture
def transfer_request() -> TransferRequest:
    return TransferRequest(
        kind=TransferKind.OWN_ACCOUNT,
        source_account_id=1,
        destination_account_id=2,
        amount=Decimal("100.0"),
    )


@pytest_asyncio.fixture
async def db_session():
    """
    Fresh in-memory SQLite database per test.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()
