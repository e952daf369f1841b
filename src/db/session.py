from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker, declarative_base

import config

DATABASE_URL = config.DATABASE_URL

# Async engine
engine = create_async_engine(DATABASE_URL, echo=config.DATABASE_ECHO, future=True)

# Async session factory
AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

Base = declarative_base()


async def init_models() -> None:
    """
    Create missing tables. Safe to call on every startup.
    """
    # models must be imported so their tables are registered on Base
    from db import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
