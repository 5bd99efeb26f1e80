"""Base for closed string catalogs."""

from enum import StrEnum
from typing import Self


class CatalogEnum(StrEnum):
    """String enum with a non-raising parser."""

    @classmethod
    def parse(cls, value: object) -> Self | None:
        """Return the member for an exact value, or None for anything else."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None
