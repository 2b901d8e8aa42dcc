"""
Use Case: Purge Expired Sessions

Sweeps sessions whose expiry has passed. Refresh already evicts expired rows
it encounters; this catches the ones nobody presents again.
"""

import logging
from datetime import datetime
from typing import Callable

from pydantic import BaseModel

from src.app.services.unit_of_work import UnitOfWork
from src.domain.clock import utcnow

logger = logging.getLogger(__name__)


class PurgeExpiredSessionsResponse(BaseModel):
    """Response DTO for PurgeExpiredSessionsUseCase"""

    purged_count: int


class PurgeExpiredSessionsUseCase:
    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self) -> PurgeExpiredSessionsResponse:
        async with self.uow:
            count = await self.uow.sessions.delete_expired(self.clock())
            await self.uow.commit()

        logger.info("Purged %d expired session(s)", count)
        return PurgeExpiredSessionsResponse(purged_count=count)
