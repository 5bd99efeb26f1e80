"""Optional per-user allow-lists for modules and reports.

Stored records encode "no restriction" as a null or empty list. In memory that
convention is replaced by an explicit variant so an empty restriction can never
be mistaken for full access.
"""

import json
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Unrestricted:
    """Every catalog value is permitted."""

    def permits(self, value: object) -> bool:
        return True

    def resolve(self, catalog: Iterable[T]) -> tuple[T, ...]:
        return tuple(catalog)

    def to_list(self) -> None:
        return None


@dataclass(frozen=True)
class RestrictedTo(Generic[T]):
    """Only the listed values are permitted. An empty tuple permits nothing."""

    values: tuple[T, ...] = ()

    def permits(self, value: object) -> bool:
        return value in self.values

    def resolve(self, catalog: Iterable[T]) -> tuple[T, ...]:
        return self.values

    def to_list(self) -> list[str]:
        return [str(v) for v in self.values]


AllowList = Unrestricted | RestrictedTo

UNRESTRICTED = Unrestricted()
DENY_ALL: RestrictedTo = RestrictedTo(())


def allow_list_from(raw: object, parse: Callable[[object], T | None]) -> AllowList:
    """Build an allow-list from a stored column value.

    None and [] are unrestricted. Unknown entries are dropped, so a list made
    only of unknown entries permits nothing. Anything unreadable permits nothing.
    """
    if isinstance(raw, Unrestricted | RestrictedTo):
        return raw
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except (ValueError, RecursionError):
            return DENY_ALL
    if raw is None:
        return UNRESTRICTED
    if not isinstance(raw, list | tuple):
        return DENY_ALL
    if not raw:
        return UNRESTRICTED

    values: list[T] = []
    for item in raw:
        parsed = parse(item)
        if parsed is not None and parsed not in values:
            values.append(parsed)
    return RestrictedTo(tuple(values))
