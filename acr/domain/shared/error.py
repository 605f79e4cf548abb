"""Error hierarchy for the access-control registry.

Error layers:
- ACRError: Base class for all registry errors
- DomainError: Lookups of unknown identifiers, relation violations, bad input
- ConfigurationError: Invalid bootstrap data or handler wiring

Every error carries a stable ``code`` so callers can tell failures apart without
matching on message text (see ``acr.application.errors.map_acr_error``).
"""


class ACRError(Exception):
    """Base class for all registry errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors
# =============================================================================


class DomainError(ACRError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Referenced user, group or right does not exist."""


class AlreadyExistsError(DomainError):
    """A user with the same nickname is already registered."""


class NotMemberError(DomainError):
    """The relation being removed does not currently hold."""


class ValidationError(DomainError):
    """Input of the wrong shape was passed to the registry."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class AuthorizationError(DomainError):
    """Current session is missing or lacks the required right."""


# =============================================================================
# System Errors
# =============================================================================


class ConfigurationError(ACRError):
    """System misconfiguration detected."""
