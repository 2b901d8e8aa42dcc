"""
Admin API Routes - Maintenance Endpoints

These endpoints are for operators and schedulers.
Authentication is via Admin API Key, not user JWTs.
"""

from fastapi import APIRouter, Depends, status

from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admin import (
    PurgeExpiredSessionsResponse,
    PurgeExpiredSessionsUseCase,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/sessions/purge-expired",
    status_code=status.HTTP_200_OK,
    response_model=PurgeExpiredSessionsResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def purge_expired_sessions(
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Purge Expired Sessions

    Deletes every session whose expiry has passed.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
    """
    use_case = PurgeExpiredSessionsUseCase(uow)
    return await use_case.execute()
