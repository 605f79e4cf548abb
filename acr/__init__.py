"""In-process role-based access-control registry."""

from .domain.registry.model.bootstrap import Bootstrap, UserSeed
from .domain.registry.service.registry import Registry
from .domain.shared.error import (
    ACRError,
    AlreadyExistsError,
    AuthorizationError,
    ConfigurationError,
    DomainError,
    NotFoundError,
    NotMemberError,
    ValidationError,
)
from .infrastructure.locking import LockedRegistry
from .infrastructure.seed import build_registry

__all__ = [
    "ACRError",
    "AlreadyExistsError",
    "AuthorizationError",
    "Bootstrap",
    "ConfigurationError",
    "DomainError",
    "LockedRegistry",
    "NotFoundError",
    "NotMemberError",
    "Registry",
    "UserSeed",
    "ValidationError",
    "build_registry",
]
