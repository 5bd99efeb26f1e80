"""User roles."""

from dashguard.domain.value_objects.catalog import CatalogEnum


class Role(CatalogEnum):
    """Role assigned to a user; selects the default permission set."""

    ADMIN = "admin"
    USER = "user"
    VIEWER = "viewer"
