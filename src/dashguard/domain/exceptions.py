"""Domain exceptions."""


class DashGuardError(Exception):
    """Base exception for dashguard."""

    pass


class PermissionDenied(DashGuardError):
    """Actor is not allowed to perform the requested action."""

    pass


class NotFound(DashGuardError):
    """Requested resource was not found."""

    def __init__(self, entity: str, key: object) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found: {key}")


class ValidationError(DashGuardError):
    """Validation failed for input data."""

    pass


class LastAdminError(ValidationError):
    """Change would leave the system without an (active) administrator."""

    pass
