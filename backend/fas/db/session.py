"""Async engine and session factory for the PostgreSQL store."""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from fas.config import settings


def build_engine(url: str) -> AsyncEngine:
    """
    Create the async engine for ``url``.

    SQL echo follows the development environment; the test environment gets
    no pooling so each session opens its own connection.
    """
    options = {
        "echo": settings.ENVIRONMENT == "development",
        "pool_pre_ping": True,
    }
    if settings.ENVIRONMENT == "test":
        options["poolclass"] = NullPool
    return create_async_engine(url, **options)


engine = build_engine(settings.async_database_url)

# Objects stay readable after commit so responses can be built from them.
SessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Yield one session per request as a unit of work.

    Everything the request wrote is committed together when the handler
    returns; any exception rolls the whole request back, so a rejected
    application or criterion never leaves partial rows behind.
    """
    async with SessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
