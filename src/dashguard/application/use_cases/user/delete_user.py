"""Delete user use case."""

import logging

from dashguard.domain.access_control import AccessControlEvaluator
from dashguard.domain.entities import User
from dashguard.domain.exceptions import (
    LastAdminError,
    NotFound,
    PermissionDenied,
    ValidationError,
)

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Remove a managed user. The last administrator and the actor's own account are kept."""

    def __init__(self, unit_of_work_factory: type, evaluator: AccessControlEvaluator) -> None:
        self._uow_factory = unit_of_work_factory
        self._evaluator = evaluator

    async def execute(self, actor: User | None, user_id: str) -> None:
        if not self._evaluator.is_administrator(actor):
            raise PermissionDenied("Access denied. Admin privileges required.")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)
            if user.id == actor.id:
                raise ValidationError("You cannot delete your own account")
            if user.is_administrator and await uow.users.count_admins() <= 1:
                raise LastAdminError("Cannot delete the last admin user")
            await uow.users.delete(user.id)

        logger.info("User %s deleted by %s", user.username, actor.username)
