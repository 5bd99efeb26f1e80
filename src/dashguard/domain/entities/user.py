"""User snapshot - the read-only projection access control evaluates."""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from dashguard.domain.value_objects import (
    UNRESTRICTED,
    AllowList,
    Module,
    Permission,
    ReportId,
    RestrictedTo,
    Role,
    Unrestricted,
    allow_list_from,
)

PermissionSet = Mapping[Permission, bool]

_EMPTY_PERMISSIONS: PermissionSet = MappingProxyType({})


def permission_set_from(raw: object) -> PermissionSet:
    """Read-only permission set from a stored column (mapping or JSON text).

    Keys outside the catalog are dropped and only a boolean True grants.
    """
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except (ValueError, RecursionError):
            return _EMPTY_PERMISSIONS
    if not isinstance(raw, Mapping):
        return _EMPTY_PERMISSIONS

    perms: dict[Permission, bool] = {}
    for key, value in raw.items():
        permission = Permission.parse(key)
        if permission is not None:
            perms[permission] = value is True
    return MappingProxyType(perms)


@dataclass(frozen=True)
class User:
    """User as seen by the evaluator - role, active flag, overrides, allow-lists."""

    id: str
    username: str
    role: Role | None = Role.USER
    is_active: bool = True
    is_admin: bool = False
    permissions: PermissionSet = field(default_factory=lambda: _EMPTY_PERMISSIONS)
    allowed_modules: AllowList = UNRESTRICTED
    allowed_reports: AllowList = UNRESTRICTED
    first_name: str | None = None
    last_name: str | None = None

    def __post_init__(self) -> None:
        # Normalise convenience inputs (plain dicts, lists, strings) into the frozen forms.
        if not isinstance(self.role, Role):
            object.__setattr__(self, "role", Role.parse(self.role))
        object.__setattr__(self, "is_active", self.is_active is True)
        object.__setattr__(self, "is_admin", self.is_admin is True)
        if not isinstance(self.permissions, MappingProxyType):
            object.__setattr__(self, "permissions", permission_set_from(self.permissions))
        if not isinstance(self.allowed_modules, Unrestricted | RestrictedTo):
            object.__setattr__(
                self, "allowed_modules", allow_list_from(self.allowed_modules, Module.parse)
            )
        if not isinstance(self.allowed_reports, Unrestricted | RestrictedTo):
            object.__setattr__(
                self, "allowed_reports", allow_list_from(self.allowed_reports, ReportId.parse)
            )

    @property
    def is_administrator(self) -> bool:
        """Admin role or the legacy is_admin flag."""
        return self.role is Role.ADMIN or self.is_admin

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "User":
        """Build a snapshot from a stored user record.

        JSON text columns are decoded. Malformed values never raise: they
        degrade to no permissions and deny-all allow-lists.
        """
        return cls(
            id=str(record.get("id") or ""),
            username=str(record.get("username") or ""),
            role=Role.parse(record.get("role")),
            is_active=record.get("is_active", True) is True,
            is_admin=record.get("is_admin") is True,
            permissions=permission_set_from(record.get("permissions")),
            allowed_modules=allow_list_from(record.get("allowed_modules"), Module.parse),
            allowed_reports=allow_list_from(record.get("allowed_reports"), ReportId.parse),
            first_name=record.get("first_name"),
            last_name=record.get("last_name"),
        )

    def to_record(self) -> dict[str, Any]:
        """JSON-friendly record; unrestricted allow-lists are stored as null."""
        return {
            "id": self.id,
            "username": self.username,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "role": self.role.value if self.role else None,
            "is_active": self.is_active,
            "is_admin": self.is_admin,
            "permissions": {p.value: granted for p, granted in self.permissions.items()},
            "allowed_modules": self.allowed_modules.to_list(),
            "allowed_reports": self.allowed_reports.to_list(),
        }
