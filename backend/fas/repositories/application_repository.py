"""Repository for scheme application data access."""

from sqlalchemy.ext.asyncio import AsyncSession

from fas.models.domain.application import Application
from fas.repositories.base import BaseRepository


class ApplicationRepository(BaseRepository[Application]):
    """Repository for Application; the generic soft-delete aware CRUD suffices."""

    def __init__(self, db: AsyncSession):
        """
        Initialize the application repository.

        Args:
            db: Async database session
        """
        super().__init__(Application, db)
