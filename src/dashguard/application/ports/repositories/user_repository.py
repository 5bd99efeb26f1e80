"""User repository port."""

from typing import Protocol

from dashguard.domain.entities import User


class UserRepository(Protocol):
    """Port for user record persistence."""

    async def get_by_id(self, user_id: str) -> User | None: ...

    async def get_by_username(self, username: str) -> User | None: ...

    async def list_all(self) -> list[User]: ...

    async def count_admins(self, *, active_only: bool = False) -> int: ...

    async def create(self, user: User) -> User: ...

    async def update(self, user: User) -> User: ...

    async def delete(self, user_id: str) -> None: ...
