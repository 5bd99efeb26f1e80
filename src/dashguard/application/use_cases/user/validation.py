"""Strict validation of admin-supplied access settings.

Stored records are read leniently (unknown entries dropped), but values an
administrator submits are rejected when they fall outside the catalogs.
"""

from collections.abc import Callable
from typing import TypeVar

from dashguard.domain.exceptions import ValidationError
from dashguard.domain.value_objects import UNRESTRICTED, AllowList, Permission, RestrictedTo, Role

T = TypeVar("T")


def validated_role(raw: object) -> Role | None:
    """Role from input; an empty or null role means "not given"."""
    if raw is None or raw == "":
        return None
    role = Role.parse(raw)
    if role is None:
        raise ValidationError(f"Unknown role: {raw}")
    return role


def validated_permissions(raw: object) -> dict[Permission, bool]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValidationError("permissions must be an object")
    perms: dict[Permission, bool] = {}
    for key, value in raw.items():
        permission = Permission.parse(key)
        if permission is None:
            raise ValidationError(f"Unknown permission: {key}")
        if not isinstance(value, bool):
            raise ValidationError(f"Permission {key} must be true or false")
        perms[permission] = value
    return perms


def validated_flag(raw: object, name: str) -> bool:
    if not isinstance(raw, bool):
        raise ValidationError(f"{name} must be true or false")
    return raw


def validated_allow_list(
    raw: object, parse: Callable[[object], T | None], label: str
) -> AllowList:
    # null and [] keep their stored meaning: no restriction
    if raw is None:
        return UNRESTRICTED
    if not isinstance(raw, list):
        raise ValidationError(f"allowed {label}s must be a list")
    if not raw:
        return UNRESTRICTED
    values: list[T] = []
    for item in raw:
        parsed = parse(item)
        if parsed is None:
            raise ValidationError(f"Unknown {label}: {item}")
        if parsed not in values:
            values.append(parsed)
    return RestrictedTo(tuple(values))
