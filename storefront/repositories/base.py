"""
Base Repository

Shared session handling for repositories.

Repositories stage writes (add/flush/execute) but never commit; the request
boundary commits once so multi-statement writes land in one transaction.
"""

import logging
from typing import Any

from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)


class BaseRepository:
    """Holds the session and maps connection failures to StorageUnavailableError."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _execute(self, statement: Any) -> Any:
        """Execute a statement, surfacing connection-level failures uniformly."""
        try:
            return await self.session.execute(statement)
        except (OperationalError, InterfaceError) as e:
            logger.error(f"Database unavailable: {e}")
            raise StorageUnavailableError() from e

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except (OperationalError, InterfaceError) as e:
            logger.error(f"Database unavailable: {e}")
            raise StorageUnavailableError() from e
