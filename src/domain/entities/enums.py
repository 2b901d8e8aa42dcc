"""
Auth Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Platform-wide user role"""

    user = "user"
    admin = "admin"
