"""In-memory Unit of Work."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dashguard.domain.entities import User
from dashguard.infrastructure.persistence.memory.user_repository import (
    InMemoryUserRepository,
)


class InMemoryUnitOfWork:
    """Unit of Work over a shared user dict. Rollback restores the state at entry."""

    def __init__(self, users: dict[str, User]) -> None:
        self._users = users
        self._snapshot: dict[str, User] = dict(users)
        self.users = InMemoryUserRepository(users)

    async def commit(self) -> None:
        self._snapshot = dict(self._users)

    async def rollback(self) -> None:
        self._users.clear()
        self._users.update(self._snapshot)


class InMemoryUserStore:
    """Process-local user store; one lock serialises units of work."""

    def __init__(self, users: list[User] | None = None) -> None:
        self._users: dict[str, User] = {u.id: u for u in users or []}
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def unit_of_work(self) -> AsyncIterator[InMemoryUnitOfWork]:
        async with self._lock:
            uow = InMemoryUnitOfWork(self._users)
            try:
                yield uow
            except BaseException:
                await uow.rollback()
                raise
            await uow.commit()

    def get(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def __len__(self) -> int:
        return len(self._users)
