"""Application ports - interfaces for external adapters."""

from dashguard.application.ports.identity_provider import Identity, IdentityProvider
from dashguard.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "Identity",
    "IdentityProvider",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
