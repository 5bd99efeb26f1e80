"""Unit tests for use cases."""

import pytest

from dashguard.application.dto.user_dto import UNSET, UserAccessUpdate, UserCreateInput
from dashguard.application.use_cases.access.describe_catalog import describe_catalog
from dashguard.application.use_cases.access.get_effective_access import (
    GetEffectiveAccessUseCase,
)
from dashguard.application.use_cases.user.create_user import CreateUserUseCase
from dashguard.application.use_cases.user.delete_user import DeleteUserUseCase
from dashguard.application.use_cases.user.list_users import ListUsersUseCase
from dashguard.application.use_cases.user.update_user_access import UpdateUserAccessUseCase
from dashguard.domain.access_control import AccessControlEvaluator
from dashguard.domain.entities import User
from dashguard.domain.exceptions import (
    LastAdminError,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from dashguard.domain.value_objects import (
    UNRESTRICTED,
    Module,
    Permission,
    ReportId,
    RestrictedTo,
    Role,
)
from dashguard.infrastructure.persistence.memory.unit_of_work import InMemoryUserStore

from tests.conftest import make_user


# --- CreateUserUseCase ---


@pytest.mark.asyncio
async def test_create_user_seeds_role_defaults(store, evaluator, admin) -> None:
    use_case = CreateUserUseCase(unit_of_work_factory=store.unit_of_work, evaluator=evaluator)

    user = await use_case.execute(admin, UserCreateInput(username="analyst", role="viewer"))

    assert user.role is Role.VIEWER
    assert dict(user.permissions) == evaluator.default_permissions_for_role(Role.VIEWER)
    assert user.is_active is True
    assert user.allowed_modules is UNRESTRICTED
    assert store.get(user.id) == user


@pytest.mark.asyncio
async def test_create_user_role_from_is_admin_flag(store, evaluator, admin) -> None:
    use_case = CreateUserUseCase(unit_of_work_factory=store.unit_of_work, evaluator=evaluator)

    user = await use_case.execute(admin, UserCreateInput(username="boss", is_admin=True))

    assert user.role is Role.ADMIN
    assert set(user.permissions) == set(Permission)


@pytest.mark.asyncio
async def test_create_user_uses_configured_default_role(store, evaluator, admin) -> None:
    use_case = CreateUserUseCase(
        unit_of_work_factory=store.unit_of_work,
        evaluator=evaluator,
        default_role=Role.VIEWER,
    )

    user = await use_case.execute(admin, UserCreateInput(username="newbie"))

    assert user.role is Role.VIEWER


@pytest.mark.asyncio
async def test_create_user_explicit_permissions(store, evaluator, admin) -> None:
    use_case = CreateUserUseCase(unit_of_work_factory=store.unit_of_work, evaluator=evaluator)

    user = await use_case.execute(
        admin,
        UserCreateInput(username="clerk", role="user", permissions={"view_sales": True}),
    )

    assert dict(user.permissions) == {Permission.VIEW_SALES: True}


@pytest.mark.asyncio
async def test_create_user_requires_admin(store, evaluator, regular_user) -> None:
    use_case = CreateUserUseCase(unit_of_work_factory=store.unit_of_work, evaluator=evaluator)

    with pytest.raises(PermissionDenied):
        await use_case.execute(regular_user, UserCreateInput(username="x"))
    with pytest.raises(PermissionDenied):
        await use_case.execute(None, UserCreateInput(username="x"))


@pytest.mark.asyncio
async def test_create_user_rejects_unknown_role(store, evaluator, admin) -> None:
    use_case = CreateUserUseCase(unit_of_work_factory=store.unit_of_work, evaluator=evaluator)

    with pytest.raises(ValidationError, match="Unknown role"):
        await use_case.execute(admin, UserCreateInput(username="x", role="owner"))


@pytest.mark.asyncio
async def test_create_user_rejects_duplicate_username(store, evaluator, admin) -> None:
    use_case = CreateUserUseCase(unit_of_work_factory=store.unit_of_work, evaluator=evaluator)

    with pytest.raises(ValidationError, match="already exists"):
        await use_case.execute(admin, UserCreateInput(username="johndoe"))
    assert len(store) == 3


@pytest.mark.asyncio
async def test_create_user_rejects_invalid_permissions(store, evaluator, admin) -> None:
    use_case = CreateUserUseCase(unit_of_work_factory=store.unit_of_work, evaluator=evaluator)

    with pytest.raises(ValidationError, match="Unknown permission"):
        await use_case.execute(admin, UserCreateInput(username="x", permissions={"bogus": True}))
    with pytest.raises(ValidationError, match="must be true or false"):
        await use_case.execute(
            admin, UserCreateInput(username="x", permissions={"view_sales": "yes"})
        )
    with pytest.raises(ValidationError, match="must be an object"):
        await use_case.execute(admin, UserCreateInput(username="x", permissions=["view_sales"]))
    assert len(store) == 3


@pytest.mark.asyncio
async def test_create_user_rejects_non_string_username(store, evaluator, admin) -> None:
    use_case = CreateUserUseCase(unit_of_work_factory=store.unit_of_work, evaluator=evaluator)

    with pytest.raises(ValidationError, match="Username must be a string"):
        await use_case.execute(admin, UserCreateInput(username=None))


@pytest.mark.asyncio
async def test_create_user_empty_role_uses_default(store, evaluator, admin) -> None:
    use_case = CreateUserUseCase(
        unit_of_work_factory=store.unit_of_work,
        evaluator=evaluator,
        default_role=Role.VIEWER,
    )

    user = await use_case.execute(admin, UserCreateInput(username="blank", role=""))

    assert user.role is Role.VIEWER


# --- UpdateUserAccessUseCase ---


@pytest.mark.asyncio
async def test_role_change_seeds_new_defaults(store, evaluator, admin, regular_user) -> None:
    use_case = UpdateUserAccessUseCase(store.unit_of_work, evaluator)

    updated = await use_case.execute(admin, regular_user.id, UserAccessUpdate(role="viewer"))

    assert updated.role is Role.VIEWER
    assert dict(updated.permissions) == evaluator.default_permissions_for_role("viewer")
    assert evaluator.can_use_capability(updated, Permission.CREATE_SALES) is False
    assert store.get(regular_user.id) == updated


@pytest.mark.asyncio
async def test_role_change_with_explicit_permissions(store, evaluator, admin, viewer) -> None:
    use_case = UpdateUserAccessUseCase(store.unit_of_work, evaluator)

    updated = await use_case.execute(
        admin,
        viewer.id,
        UserAccessUpdate(role="user", permissions={"view_sales": True, "export_data": False}),
    )

    assert updated.role is Role.USER
    assert dict(updated.permissions) == {
        Permission.VIEW_SALES: True,
        Permission.EXPORT_DATA: False,
    }


@pytest.mark.asyncio
async def test_allow_lists_update(store, evaluator, admin, regular_user) -> None:
    use_case = UpdateUserAccessUseCase(store.unit_of_work, evaluator)

    updated = await use_case.execute(
        admin,
        regular_user.id,
        UserAccessUpdate(allowed_modules=["sales", "reports"], allowed_reports=["ytd-sales"]),
    )

    assert updated.allowed_modules == RestrictedTo((Module.SALES, Module.REPORTS))
    assert updated.allowed_reports == RestrictedTo((ReportId.YTD_SALES,))
    assert dict(updated.permissions) == dict(regular_user.permissions)

    cleared = await use_case.execute(
        admin,
        regular_user.id,
        UserAccessUpdate(allowed_modules=[], allowed_reports=None),
    )
    assert cleared.allowed_modules is UNRESTRICTED
    assert cleared.allowed_reports is UNRESTRICTED


@pytest.mark.asyncio
async def test_unknown_values_are_rejected(store, evaluator, admin, regular_user) -> None:
    use_case = UpdateUserAccessUseCase(store.unit_of_work, evaluator)

    with pytest.raises(ValidationError, match="Unknown module"):
        await use_case.execute(admin, regular_user.id, UserAccessUpdate(allowed_modules=["inventory"]))
    with pytest.raises(ValidationError, match="Unknown report"):
        await use_case.execute(admin, regular_user.id, UserAccessUpdate(allowed_reports=["weekly"]))
    with pytest.raises(ValidationError, match="Unknown permission"):
        await use_case.execute(admin, regular_user.id, UserAccessUpdate(permissions={"fly": True}))
    with pytest.raises(ValidationError, match="Unknown role"):
        await use_case.execute(admin, regular_user.id, UserAccessUpdate(role="owner"))
    with pytest.raises(ValidationError):
        await use_case.execute(admin, regular_user.id, UserAccessUpdate(is_active="no"))

    assert store.get(regular_user.id) == regular_user


@pytest.mark.asyncio
async def test_deactivate_user(store, evaluator, admin, regular_user) -> None:
    use_case = UpdateUserAccessUseCase(store.unit_of_work, evaluator)

    updated = await use_case.execute(admin, regular_user.id, UserAccessUpdate(is_active=False))

    assert updated.is_active is False
    assert evaluator.can_use_capability(updated, Permission.VIEW_SALES) is False


@pytest.mark.asyncio
async def test_cannot_deactivate_last_active_admin(store, evaluator, admin) -> None:
    use_case = UpdateUserAccessUseCase(store.unit_of_work, evaluator)

    with pytest.raises(LastAdminError, match="deactivate the last active admin"):
        await use_case.execute(admin, admin.id, UserAccessUpdate(is_active=False))


@pytest.mark.asyncio
async def test_cannot_demote_last_admin(store, evaluator, admin) -> None:
    use_case = UpdateUserAccessUseCase(store.unit_of_work, evaluator)

    with pytest.raises(LastAdminError, match="demote the last admin"):
        await use_case.execute(admin, admin.id, UserAccessUpdate(role="user"))


@pytest.mark.asyncio
async def test_second_admin_can_be_demoted(evaluator, admin) -> None:
    other = make_user("admin-2", Role.ADMIN)
    store = InMemoryUserStore([admin, other])
    use_case = UpdateUserAccessUseCase(store.unit_of_work, evaluator)

    updated = await use_case.execute(admin, other.id, UserAccessUpdate(role="viewer"))

    assert updated.role is Role.VIEWER
    with pytest.raises(LastAdminError):
        await use_case.execute(admin, admin.id, UserAccessUpdate(role="viewer"))


@pytest.mark.asyncio
async def test_demoting_flagged_admin_clears_flag(evaluator, admin) -> None:
    boss = make_user("boss", Role.ADMIN, is_admin=True)
    store = InMemoryUserStore([admin, boss])
    use_case = UpdateUserAccessUseCase(store.unit_of_work, evaluator)

    updated = await use_case.execute(admin, boss.id, UserAccessUpdate(role="viewer"))

    assert updated.role is Role.VIEWER
    assert updated.is_admin is False
    assert evaluator.is_administrator(updated) is False
    assert evaluator.can_use_capability(updated, Permission.MANAGE_USERS) is False


@pytest.mark.asyncio
async def test_admin_flag_can_be_set_and_cleared(store, evaluator, admin, regular_user) -> None:
    use_case = UpdateUserAccessUseCase(store.unit_of_work, evaluator)

    promoted = await use_case.execute(admin, regular_user.id, UserAccessUpdate(is_admin=True))
    assert promoted.is_administrator is True

    demoted = await use_case.execute(admin, regular_user.id, UserAccessUpdate(is_admin=False))
    assert demoted.is_administrator is False
    assert demoted.role is Role.USER


@pytest.mark.asyncio
async def test_cannot_change_own_admin_status(evaluator) -> None:
    flagged = make_user("flagged", Role.USER, is_admin=True)
    other = make_user("admin-2", Role.ADMIN)
    store = InMemoryUserStore([flagged, other])
    use_case = UpdateUserAccessUseCase(store.unit_of_work, evaluator)

    with pytest.raises(ValidationError, match="your own admin status"):
        await use_case.execute(flagged, flagged.id, UserAccessUpdate(is_admin=False))
    assert store.get(flagged.id) == flagged


@pytest.mark.asyncio
async def test_flagged_admin_counts_as_last_admin(evaluator) -> None:
    flagged = make_user("flagged", Role.USER, is_admin=True)
    store = InMemoryUserStore([flagged])
    use_case = UpdateUserAccessUseCase(store.unit_of_work, evaluator)

    with pytest.raises(LastAdminError, match="demote the last admin"):
        await use_case.execute(flagged, flagged.id, UserAccessUpdate(role="viewer"))
    with pytest.raises(LastAdminError, match="deactivate the last active admin"):
        await use_case.execute(flagged, flagged.id, UserAccessUpdate(is_active=False))
    assert store.get(flagged.id) == flagged


@pytest.mark.asyncio
async def test_update_rejects_non_boolean_admin_flag(store, evaluator, admin, viewer) -> None:
    use_case = UpdateUserAccessUseCase(store.unit_of_work, evaluator)

    with pytest.raises(ValidationError, match="is_admin must be true or false"):
        await use_case.execute(admin, viewer.id, UserAccessUpdate(is_admin="yes"))


@pytest.mark.asyncio
async def test_update_requires_admin(store, evaluator, regular_user, viewer) -> None:
    use_case = UpdateUserAccessUseCase(store.unit_of_work, evaluator)

    with pytest.raises(PermissionDenied):
        await use_case.execute(regular_user, viewer.id, UserAccessUpdate(role="admin"))


@pytest.mark.asyncio
async def test_update_missing_user(store, evaluator, admin) -> None:
    use_case = UpdateUserAccessUseCase(store.unit_of_work, evaluator)

    with pytest.raises(NotFound):
        await use_case.execute(admin, "missing", UserAccessUpdate(is_active=True))


def test_access_update_from_body_keeps_absent_fields_unset() -> None:
    update = UserAccessUpdate.from_body({"allowed_modules": None, "other": 1})
    assert update.allowed_modules is None
    assert update.role is UNSET
    assert update.permissions is UNSET
    assert update.changed_fields() == ["allowed_modules"]


# --- ListUsersUseCase / DeleteUserUseCase ---


@pytest.mark.asyncio
async def test_list_users_sorted_by_username(store, evaluator, admin) -> None:
    users = await ListUsersUseCase(store.unit_of_work, evaluator).execute(admin)

    assert [u.username for u in users] == ["admin", "janesmith", "johndoe"]


@pytest.mark.asyncio
async def test_list_users_requires_admin(store, evaluator, viewer) -> None:
    with pytest.raises(PermissionDenied):
        await ListUsersUseCase(store.unit_of_work, evaluator).execute(viewer)


@pytest.mark.asyncio
async def test_delete_user(store, evaluator, admin, viewer) -> None:
    await DeleteUserUseCase(store.unit_of_work, evaluator).execute(admin, viewer.id)

    assert store.get(viewer.id) is None
    assert len(store) == 2


@pytest.mark.asyncio
async def test_cannot_delete_own_account(store, evaluator, admin) -> None:
    with pytest.raises(ValidationError, match="your own account"):
        await DeleteUserUseCase(store.unit_of_work, evaluator).execute(admin, admin.id)
    assert store.get(admin.id) == admin


@pytest.mark.asyncio
async def test_cannot_delete_last_admin(evaluator, admin) -> None:
    flagged = make_user("flagged", Role.USER, is_admin=True)
    store = InMemoryUserStore([flagged])

    with pytest.raises(LastAdminError, match="delete the last admin"):
        await DeleteUserUseCase(store.unit_of_work, evaluator).execute(admin, flagged.id)
    assert store.get(flagged.id) == flagged


@pytest.mark.asyncio
async def test_second_admin_can_be_deleted(evaluator, admin) -> None:
    other = make_user("admin-2", Role.ADMIN)
    store = InMemoryUserStore([admin, other])

    await DeleteUserUseCase(store.unit_of_work, evaluator).execute(admin, other.id)

    assert store.get(other.id) is None


@pytest.mark.asyncio
async def test_delete_missing_user(store, evaluator, admin) -> None:
    with pytest.raises(NotFound):
        await DeleteUserUseCase(store.unit_of_work, evaluator).execute(admin, "missing")


@pytest.mark.asyncio
async def test_delete_requires_admin(store, evaluator, regular_user, viewer) -> None:
    with pytest.raises(PermissionDenied):
        await DeleteUserUseCase(store.unit_of_work, evaluator).execute(regular_user, viewer.id)
    assert store.get(viewer.id) == viewer


# --- GetEffectiveAccessUseCase / describe_catalog ---


def test_effective_access_for_restricted_user(evaluator: AccessControlEvaluator) -> None:
    user = make_user("u", Role.VIEWER, allowed_modules=["reports"], allowed_reports=["ytd-income"])

    access = GetEffectiveAccessUseCase(evaluator).execute(user)

    assert access.role == "viewer"
    assert access.is_administrator is False
    assert "view_reports" in access.permissions
    assert "create_sales" not in access.permissions
    assert access.modules == ["reports"]
    assert access.reports == ["ytd-income"]


def test_effective_access_for_inactive_user(evaluator: AccessControlEvaluator) -> None:
    user: User = make_user("u", Role.USER, is_active=False)

    access = GetEffectiveAccessUseCase(evaluator).execute(user).to_dict()

    assert access["permissions"] == []
    assert access["modules"] == []
    assert access["reports"] == []


def test_describe_catalog(evaluator: AccessControlEvaluator) -> None:
    catalog = describe_catalog(evaluator)

    assert catalog["permissions"]["MANAGE_USERS"] == "manage_users"
    assert catalog["modules"]["AUDIT"] == "audit"
    assert {"id": "monthly-expense", "name": "Monthly Expense Report"} in catalog["reports"]
    assert catalog["roles"] == ["admin", "user", "viewer"]
    assert catalog["default_permissions"]["viewer"]["view_sales"] is True
    assert len(catalog["default_permissions"]["admin"]) == len(Permission)
