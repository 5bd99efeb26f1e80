"""Create user use case."""

import logging
from uuid import uuid4

from dashguard.application.dto.user_dto import UserCreateInput
from dashguard.application.use_cases.user.validation import validated_permissions, validated_role
from dashguard.domain.access_control import AccessControlEvaluator
from dashguard.domain.entities import User
from dashguard.domain.exceptions import PermissionDenied, ValidationError
from dashguard.domain.value_objects import Role

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Create a managed user seeded with the defaults of their role."""

    def __init__(
        self,
        unit_of_work_factory: type,
        evaluator: AccessControlEvaluator,
        default_role: Role = Role.USER,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._evaluator = evaluator
        self._default_role = default_role

    async def execute(self, actor: User | None, data: UserCreateInput) -> User:
        """Create user. Actor must be an administrator."""
        if not self._evaluator.is_administrator(actor):
            raise PermissionDenied("Access denied. Admin privileges required.")

        if not isinstance(data.username, str):
            raise ValidationError("Username must be a string")
        username = data.username.strip()
        if not username:
            raise ValidationError("Username is required")

        role = validated_role(data.role)
        if role is None:
            role = Role.ADMIN if data.is_admin else self._default_role

        if data.permissions is not None:
            permissions = validated_permissions(data.permissions)
        else:
            permissions = self._evaluator.default_permissions_for_role(role)

        async with self._uow_factory() as uow:
            if await uow.users.get_by_username(username):
                raise ValidationError("Username already exists")

            user = User(
                id=str(uuid4()),
                username=username,
                first_name=data.first_name,
                last_name=data.last_name,
                role=role,
                is_active=True,
                is_admin=data.is_admin,
                permissions=permissions,
            )
            await uow.users.create(user)

        logger.info("User %s created by %s with role %s", user.username, actor.username, role)
        return user
