"""Update user access use case - the administrative permission-editing flow."""

import logging
from dataclasses import replace
from typing import Any

from dashguard.application.dto.user_dto import UNSET, UserAccessUpdate
from dashguard.application.use_cases.user.validation import (
    validated_allow_list,
    validated_flag,
    validated_permissions,
    validated_role,
)
from dashguard.domain.access_control import AccessControlEvaluator
from dashguard.domain.entities import User
from dashguard.domain.exceptions import (
    LastAdminError,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from dashguard.domain.value_objects import Module, ReportId, Role

logger = logging.getLogger(__name__)


class UpdateUserAccessUseCase:
    """Change a user's role, admin flag, active flag, permission overrides and allow-lists."""

    def __init__(
        self,
        unit_of_work_factory: type,
        evaluator: AccessControlEvaluator,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._evaluator = evaluator

    async def execute(
        self,
        actor: User | None,
        user_id: str,
        update: UserAccessUpdate,
    ) -> User:
        """Apply update to user_id. Actor must be an administrator.

        A role change without explicit permissions re-seeds the overrides from
        the new role's defaults. Moving to a non-admin role also clears the
        legacy is_admin flag unless the update sets it explicitly.
        """
        if not self._evaluator.is_administrator(actor):
            raise PermissionDenied("Access denied. Admin privileges required.")

        changes: dict[str, Any] = {}

        new_role = validated_role(update.role) if update.role is not UNSET else None
        if new_role is not None:
            changes["role"] = new_role
            if new_role is not Role.ADMIN:
                changes["is_admin"] = False

        if update.is_admin is not UNSET:
            changes["is_admin"] = validated_flag(update.is_admin, "is_admin")

        if update.permissions is not UNSET:
            changes["permissions"] = validated_permissions(update.permissions)
        if new_role is not None and update.permissions in (UNSET, None):
            changes["permissions"] = self._evaluator.default_permissions_for_role(new_role)

        if update.is_active is not UNSET:
            changes["is_active"] = validated_flag(update.is_active, "is_active")

        if update.allowed_modules is not UNSET:
            changes["allowed_modules"] = validated_allow_list(
                update.allowed_modules, Module.parse, "module"
            )
        if update.allowed_reports is not UNSET:
            changes["allowed_reports"] = validated_allow_list(
                update.allowed_reports, ReportId.parse, "report"
            )

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)

            if (
                actor.id == user.id
                and update.is_admin is not UNSET
                and changes["is_admin"] != user.is_admin
            ):
                raise ValidationError("You cannot change your own admin status")

            updated = replace(user, **changes)

            if user.is_administrator and user.is_active and not updated.is_active:
                if await uow.users.count_admins(active_only=True) <= 1:
                    raise LastAdminError("Cannot deactivate the last active admin user")

            if user.is_administrator and not updated.is_administrator:
                if await uow.users.count_admins() <= 1:
                    raise LastAdminError("Cannot demote the last admin user")

            await uow.users.update(updated)

        logger.info(
            "Access of user %s updated by %s: %s",
            updated.username,
            actor.username,
            ", ".join(update.changed_fields()) or "no changes",
        )
        return updated
