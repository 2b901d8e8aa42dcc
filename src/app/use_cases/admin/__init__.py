"""Admin use cases for system administration operations."""

from .purge_expired_sessions_use_case import (
    PurgeExpiredSessionsUseCase,
    PurgeExpiredSessionsResponse,
)

__all__ = [
    "PurgeExpiredSessionsUseCase",
    "PurgeExpiredSessionsResponse",
]
