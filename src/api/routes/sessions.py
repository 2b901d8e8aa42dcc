from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import RevokeSessionsUseCase
from src.depends import get_current_user, get_unit_of_work
from src.domain.errors import PermissionDenied, UserNotFound

router = APIRouter(prefix="/sessions", tags=["Sessions"])


class RevokeAllSessionsRequest(BaseModel):
    """Request to revoke all sessions for a user"""

    user_id: Optional[UUID] = Field(
        None, description="User whose sessions will be revoked (defaults to caller)"
    )


class RevokeSessionResponse(BaseModel):
    """Response for session revocation operations"""

    message: str
    revoked_count: int


@router.post(
    "/revoke-all",
    status_code=status.HTTP_200_OK,
    response_model=RevokeSessionResponse,
)
async def revoke_all_sessions(
    request: RevokeAllSessionsRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Revoke All Sessions

    Deletes every refresh-token session of a user (logout everywhere).
    Access tokens already issued stay valid until they expire.

    Authorization:
    - Users can revoke their own sessions
    - Admins can revoke any user's sessions

    Raises:
        - 401 Unauthorized: Missing or invalid access token
        - 403 Forbidden: Insufficient permissions
        - 404 Not Found: User not found
    """
    requesting_user_id = UUID(current_user["user_id"])
    target_user_id = request.user_id or requesting_user_id

    use_case = RevokeSessionsUseCase(uow)
    try:
        data = await use_case.revoke_all_sessions(
            target_user_id,
            requesting_user_id,
            current_user["role"],
        )
    except PermissionDenied as exc:
        raise ClientError.from_exception(exc, status.HTTP_403_FORBIDDEN)
    except UserNotFound as exc:
        raise ClientError.from_exception(exc, status.HTTP_404_NOT_FOUND)

    return {
        "message": f"Successfully revoked {data['revoked_count']} session(s)",
        "revoked_count": data["revoked_count"],
    }
