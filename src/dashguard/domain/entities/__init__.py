"""Domain entities."""

from dashguard.domain.entities.user import PermissionSet, User, permission_set_from

__all__ = [
    "PermissionSet",
    "User",
    "permission_set_from",
]
