"""
Revoke Sessions Use Case

Logout-everywhere: deletes every refresh-token session of a user.
"""

import logging
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import UserRole
from src.domain.errors import PermissionDenied, UserNotFound

logger = logging.getLogger(__name__)


class RevokeSessionsUseCase:
    """
    Use case for revoking user sessions.

    Business Rules:
    - Users can revoke their own sessions
    - Admins can revoke any user's sessions
    - Revoked sessions are deleted, so their refresh tokens stop working
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def revoke_all_sessions(
        self,
        target_user_id: UUID,
        requesting_user_id: UUID,
        requesting_role: str,
    ) -> dict:
        """
        Revoke all sessions for a user.

        Args:
            target_user_id: User whose sessions will be revoked
            requesting_user_id: User requesting the revocation
            requesting_role: Role of requesting user

        Returns:
            Dict with count of revoked sessions and the target user ID

        Raises:
            PermissionDenied: non-admin revoking someone else's sessions
            UserNotFound: target user does not exist
        """
        async with self.uow:
            is_self = target_user_id == requesting_user_id
            is_admin = requesting_role == UserRole.admin.value

            if not is_self and not is_admin:
                raise PermissionDenied()

            target_user = await self.uow.users.get_by_id(target_user_id)
            if not target_user:
                raise UserNotFound()

            count = await self.uow.sessions.delete_all_by_user_id(target_user_id)

            await self.uow.commit()

        logger.info(
            "User %s revoked %d session(s) of user %s",
            requesting_user_id,
            count,
            target_user_id,
        )

        return {"revoked_count": count, "target_user_id": str(target_user_id)}
