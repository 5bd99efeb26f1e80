"""Default permission set per role."""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from dashguard.domain.value_objects import Permission, Role


class RoleDefaults:
    """Immutable role -> default permission table, built once and shared."""

    def __init__(self, table: Mapping[Role, Iterable[Permission]]) -> None:
        self._table: Mapping[Role, Mapping[Permission, bool]] = MappingProxyType(
            {
                role: MappingProxyType({permission: True for permission in permissions})
                for role, permissions in table.items()
            }
        )

    @property
    def roles(self) -> tuple[Role, ...]:
        return tuple(self._table)

    def for_role(self, role: object) -> dict[Permission, bool]:
        """Copy of the defaults for role. Unknown roles get an empty set."""
        parsed = Role.parse(role)
        if parsed is None:
            return {}
        return dict(self._table.get(parsed, {}))

    def as_dict(self) -> dict[str, dict[str, bool]]:
        return {
            role.value: {permission.value: granted for permission, granted in perms.items()}
            for role, perms in self._table.items()
        }


DEFAULT_ROLE_DEFAULTS = RoleDefaults(
    {
        Role.ADMIN: tuple(Permission),
        Role.USER: (
            Permission.VIEW_DASHBOARD,
            Permission.VIEW_REPORTS,
            Permission.VIEW_SALES,
            Permission.CREATE_SALES,
            Permission.EDIT_SALES,
            Permission.VIEW_EXPENSES,
            Permission.CREATE_EXPENSES,
            Permission.EDIT_EXPENSES,
            Permission.VIEW_DEPARTMENTS,
            Permission.VIEW_TARGETS,
            Permission.EXPORT_DATA,
        ),
        Role.VIEWER: (
            Permission.VIEW_DASHBOARD,
            Permission.VIEW_REPORTS,
            Permission.VIEW_SALES,
            Permission.VIEW_EXPENSES,
            Permission.VIEW_DEPARTMENTS,
            Permission.VIEW_TARGETS,
        ),
    }
)
