"""Access control evaluation - capability, module and report checks.

Every check is a pure function of the user snapshot it is given. Nothing here
raises: missing users, unknown identifiers and malformed records all evaluate
to False.

Precedence for every predicate:

1. no user -> deny
2. identifier outside its catalog -> deny
3. administrator -> allow (the active flag is not consulted)
4. inactive -> deny
5. permission override / allow-list decides
"""

from collections.abc import Mapping

from dashguard.domain.entities import User
from dashguard.domain.role_defaults import DEFAULT_ROLE_DEFAULTS, RoleDefaults
from dashguard.domain.value_objects import Module, Permission, ReportId


def _resolve_user(user: object) -> User | None:
    if isinstance(user, User):
        return user
    if isinstance(user, Mapping):
        return User.from_record(user)
    return None


class AccessControlEvaluator:
    """Answers "may this user ...?" questions against a user snapshot."""

    def __init__(self, role_defaults: RoleDefaults = DEFAULT_ROLE_DEFAULTS) -> None:
        self._role_defaults = role_defaults

    @property
    def role_defaults(self) -> RoleDefaults:
        return self._role_defaults

    def can_use_capability(self, user: User | Mapping | None, permission: object) -> bool:
        """Check a capability permission."""
        subject = _resolve_user(user)
        if subject is None:
            return False
        parsed = Permission.parse(permission)
        if parsed is None:
            return False
        if subject.is_administrator:
            return True
        if not subject.is_active:
            return False
        return subject.permissions.get(parsed) is True

    def can_open_module(self, user: User | Mapping | None, module: object) -> bool:
        """Check module access. An unrestricted allow-list opens every module."""
        subject = _resolve_user(user)
        if subject is None:
            return False
        parsed = Module.parse(module)
        if parsed is None:
            return False
        if subject.is_administrator:
            return True
        if not subject.is_active:
            return False
        return subject.allowed_modules.permits(parsed)

    def can_view_report(self, user: User | Mapping | None, report_id: object) -> bool:
        """Check report access. An unrestricted allow-list shows every report."""
        subject = _resolve_user(user)
        if subject is None:
            return False
        parsed = ReportId.parse(report_id)
        if parsed is None:
            return False
        if subject.is_administrator:
            return True
        if not subject.is_active:
            return False
        return subject.allowed_reports.permits(parsed)

    def all_of(self, user: User | Mapping | None, *permissions: object) -> bool:
        if _resolve_user(user) is None:
            return False
        return all(self.can_use_capability(user, p) for p in permissions)

    def any_of(self, user: User | Mapping | None, *permissions: object) -> bool:
        return any(self.can_use_capability(user, p) for p in permissions)

    def default_permissions_for_role(self, role: object) -> dict[Permission, bool]:
        """Defaults used to seed a user's overrides when an admin changes their role."""
        return self._role_defaults.for_role(role)

    def is_administrator(self, user: User | Mapping | None) -> bool:
        subject = _resolve_user(user)
        return subject is not None and subject.is_administrator

    def allowed_modules(self, user: User | Mapping | None) -> tuple[Module, ...]:
        """Modules the user can open, in catalog or allow-list order."""
        subject = _resolve_user(user)
        if subject is None:
            return ()
        if subject.is_administrator:
            return tuple(Module)
        if not subject.is_active:
            return ()
        return subject.allowed_modules.resolve(Module)

    def allowed_reports(self, user: User | Mapping | None) -> tuple[ReportId, ...]:
        """Reports the user can view, in catalog or allow-list order."""
        subject = _resolve_user(user)
        if subject is None:
            return ()
        if subject.is_administrator:
            return tuple(ReportId)
        if not subject.is_active:
            return ()
        return subject.allowed_reports.resolve(ReportId)

    def effective_permissions(self, user: User | Mapping | None) -> tuple[Permission, ...]:
        subject = _resolve_user(user)
        if subject is None:
            return ()
        return tuple(p for p in Permission if self.can_use_capability(subject, p))


default_evaluator = AccessControlEvaluator()

can_use_capability = default_evaluator.can_use_capability
can_open_module = default_evaluator.can_open_module
can_view_report = default_evaluator.can_view_report
all_of = default_evaluator.all_of
any_of = default_evaluator.any_of
default_permissions_for_role = default_evaluator.default_permissions_for_role
is_administrator = default_evaluator.is_administrator
allowed_modules = default_evaluator.allowed_modules
allowed_reports = default_evaluator.allowed_reports
effective_permissions = default_evaluator.effective_permissions
