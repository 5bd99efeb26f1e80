"""Repository ports."""

from dashguard.application.ports.repositories.user_repository import UserRepository

__all__ = ["UserRepository"]
