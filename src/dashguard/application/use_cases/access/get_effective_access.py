"""Effective access use case."""

from dashguard.application.dto.user_dto import EffectiveAccess
from dashguard.domain.access_control import AccessControlEvaluator
from dashguard.domain.entities import User


class GetEffectiveAccessUseCase:
    """Resolve what a user may do, open and view."""

    def __init__(self, evaluator: AccessControlEvaluator) -> None:
        self._evaluator = evaluator

    def execute(self, user: User) -> EffectiveAccess:
        return EffectiveAccess(
            user_id=user.id,
            username=user.username,
            role=user.role.value if user.role else None,
            is_active=user.is_active,
            is_administrator=user.is_administrator,
            permissions=[p.value for p in self._evaluator.effective_permissions(user)],
            modules=[m.value for m in self._evaluator.allowed_modules(user)],
            reports=[r.value for r in self._evaluator.allowed_reports(user)],
        )
