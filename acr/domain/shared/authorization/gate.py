"""Handler-level authorization gates: public(), authenticated() and requires_right(right)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from acr.domain.shared.error import AuthorizationError, NotFoundError

if TYPE_CHECKING:
    from acr.domain.registry.service.registry import Registry

_auth_logger = logging.getLogger("acr.authz")


class Gate:
    """Base for handler-level authorization gates.

    Every CommandHandler/QueryHandler must declare ``__auth__: ClassVar[Gate]``.
    ``enforce`` raises AuthorizationError when the registry's current session
    does not satisfy the gate.
    """

    def enforce(self, registry: Registry, handler_name: str) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class Public(Gate):
    """No session required."""

    def enforce(self, registry: Registry, handler_name: str) -> None:
        return None


@dataclass(frozen=True)
class Authenticated(Gate):
    """Gate that requires an open session."""

    def enforce(self, registry: Registry, handler_name: str) -> None:
        if registry.current_user() is None:
            raise AuthorizationError("Login required", code="missing_session")


@dataclass(frozen=True)
class RequiresRight(Gate):
    """Gate that requires the session holder to be authorized for ``right``."""

    right: str

    def enforce(self, registry: Registry, handler_name: str) -> None:
        holder = registry.current_user()
        if holder is None:
            raise AuthorizationError("Login required", code="missing_session")

        _auth_logger.debug(
            "Auth check: handler=%s, required=%s, user=%s",
            handler_name,
            self.right,
            holder,
        )

        try:
            allowed = registry.is_authorized(holder, self.right)
        except NotFoundError:
            # Right deleted, or the holder's record is gone.
            allowed = False

        if not allowed:
            raise AuthorizationError(
                f"Access denied: '{self.right}' required for {handler_name}",
                code="access_denied",
            )


_PUBLIC = Public()
_AUTHENTICATED = Authenticated()


def public() -> Public:
    """Mark a handler as usable without logging in."""
    return _PUBLIC


def authenticated() -> Authenticated:
    """Mark a handler as requiring any logged-in user."""
    return _AUTHENTICATED


def requires_right(right: str) -> RequiresRight:
    """Mark a handler as requiring the given right."""
    return RequiresRight(right=right)
