"""List users use case."""

from dashguard.domain.access_control import AccessControlEvaluator
from dashguard.domain.entities import User
from dashguard.domain.exceptions import PermissionDenied


class ListUsersUseCase:
    """All managed users, ordered by username. Admin only."""

    def __init__(self, unit_of_work_factory: type, evaluator: AccessControlEvaluator) -> None:
        self._uow_factory = unit_of_work_factory
        self._evaluator = evaluator

    async def execute(self, actor: User | None) -> list[User]:
        if not self._evaluator.is_administrator(actor):
            raise PermissionDenied("Access denied. Admin privileges required.")
        async with self._uow_factory() as uow:
            return await uow.users.list_all()
