"""In-memory user repository."""

from dashguard.domain.entities import User
from dashguard.domain.exceptions import ValidationError


class InMemoryUserRepository:
    """Users kept in a dict keyed by id. Snapshots are immutable, so no copies are needed."""

    def __init__(self, users: dict[str, User] | None = None) -> None:
        self._by_id: dict[str, User] = users if users is not None else {}

    async def get_by_id(self, user_id: str) -> User | None:
        return self._by_id.get(user_id)

    async def get_by_username(self, username: str) -> User | None:
        for user in self._by_id.values():
            if user.username == username:
                return user
        return None

    async def list_all(self) -> list[User]:
        return sorted(self._by_id.values(), key=lambda u: u.username)

    async def count_admins(self, *, active_only: bool = False) -> int:
        return sum(
            1
            for u in self._by_id.values()
            if u.is_administrator and (u.is_active or not active_only)
        )

    async def create(self, user: User) -> User:
        if user.id in self._by_id:
            raise ValidationError(f"User {user.id} already exists")
        self._by_id[user.id] = user
        return user

    async def update(self, user: User) -> User:
        self._by_id[user.id] = user
        return user

    async def delete(self, user_id: str) -> None:
        self._by_id.pop(user_id, None)
