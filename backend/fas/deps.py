"""Dependency injection for FastAPI endpoints."""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fas.db.session import get_db

__all__ = ["SessionDep", "get_session"]


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped session; tests override this to use another database."""
    async for session in get_db():
        yield session


SessionDep = Annotated[AsyncSession, Depends(get_session)]
