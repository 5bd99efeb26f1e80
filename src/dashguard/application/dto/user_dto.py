"""User DTOs."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class _Unset(Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset.UNSET
"""Marker for a field that was not sent, as opposed to one sent as null."""


@dataclass
class UserCreateInput:
    """Input for creating a managed user."""

    username: str
    first_name: str | None = None
    last_name: str | None = None
    role: str | None = None
    is_admin: bool = False
    permissions: dict[str, bool] | None = None


@dataclass
class UserAccessUpdate:
    """Partial update of a user's access settings."""

    permissions: dict[str, bool] | None | _Unset = UNSET
    role: str | None | _Unset = UNSET
    is_admin: bool | _Unset = UNSET
    is_active: bool | _Unset = UNSET
    allowed_modules: list[str] | None | _Unset = UNSET
    allowed_reports: list[str] | None | _Unset = UNSET

    @classmethod
    def from_body(cls, body: dict[str, Any]) -> "UserAccessUpdate":
        """Build from a request body; absent keys stay UNSET."""
        fields = (
            "permissions",
            "role",
            "is_admin",
            "is_active",
            "allowed_modules",
            "allowed_reports",
        )
        return cls(**{name: body[name] for name in fields if name in body})

    def changed_fields(self) -> list[str]:
        return [name for name, value in vars(self).items() if value is not UNSET]


@dataclass
class EffectiveAccess:
    """What a navigation layer needs to render for a user."""

    user_id: str
    username: str
    role: str | None
    is_active: bool
    is_administrator: bool
    permissions: list[str]
    modules: list[str]
    reports: list[str]

    def to_dict(self) -> dict[str, Any]:
        return dict(vars(self))
