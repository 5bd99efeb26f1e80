"""Pytest fixtures for dashguard tests."""

from __future__ import annotations

import pytest

from dashguard.application.ports import Identity
from dashguard.domain.access_control import AccessControlEvaluator
from dashguard.domain.entities import User
from dashguard.domain.role_defaults import DEFAULT_ROLE_DEFAULTS
from dashguard.domain.value_objects import Role
from dashguard.infrastructure.persistence.memory.unit_of_work import InMemoryUserStore


def make_user(
    user_id: str = "u-1",
    role: Role | str | None = Role.USER,
    *,
    username: str | None = None,
    is_active: bool = True,
    is_admin: bool = False,
    permissions: dict | None = None,
    allowed_modules: list | None = None,
    allowed_reports: list | None = None,
) -> User:
    """User seeded with the defaults of its role unless permissions are given."""
    if permissions is None:
        permissions = DEFAULT_ROLE_DEFAULTS.for_role(role)
    return User(
        id=user_id,
        username=username or user_id,
        role=role,
        is_active=is_active,
        is_admin=is_admin,
        permissions=permissions,
        allowed_modules=allowed_modules,
        allowed_reports=allowed_reports,
    )


# --- Fake identity provider ---


class FakeIdentityProvider:
    """Maps tokens to subjects; unknown tokens are invalid."""

    def __init__(self, tokens: dict[str, str] | None = None) -> None:
        self._tokens = dict(tokens or {})

    def add(self, token: str, subject: str) -> None:
        self._tokens[token] = subject

    def decode_token(self, token: str) -> Identity | None:
        subject = self._tokens.get(token)
        if subject is None:
            return None
        return Identity(subject=subject, username=subject)


# --- Fixtures ---


@pytest.fixture
def evaluator() -> AccessControlEvaluator:
    return AccessControlEvaluator()


@pytest.fixture
def admin() -> User:
    return make_user("admin-1", Role.ADMIN, username="admin")


@pytest.fixture
def regular_user() -> User:
    return make_user("user-1", Role.USER, username="johndoe")


@pytest.fixture
def viewer() -> User:
    return make_user("viewer-1", Role.VIEWER, username="janesmith")


@pytest.fixture
def store(admin: User, regular_user: User, viewer: User) -> InMemoryUserStore:
    """Store with one admin, one user and one viewer."""
    return InMemoryUserStore([admin, regular_user, viewer])


@pytest.fixture
def uow_factory(store: InMemoryUserStore):
    return store.unit_of_work
