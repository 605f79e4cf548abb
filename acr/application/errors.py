"""Centralized error transformation for registry callers.

Maps registry errors to ``Failure`` values so a surrounding service can treat
every handler call as success-or-failure without catching exceptions itself.
"""

import logging
from typing import Literal

from pydantic import BaseModel

from acr.domain.shared.command import Command, CommandHandler
from acr.domain.shared.command import Result as CommandResult
from acr.domain.shared.error import (
    ACRError,
    AlreadyExistsError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    NotMemberError,
    ValidationError,
)
from acr.domain.shared.query import Query, QueryHandler
from acr.domain.shared.query import Result as QueryResult

logger = logging.getLogger(__name__)

FailureKind = Literal[
    "not_found",
    "already_exists",
    "not_member",
    "invalid_argument",
    "unauthorized",
    "internal",
]

DOMAIN_ERROR_KIND_MAP: dict[type[DomainError], FailureKind] = {
    NotFoundError: "not_found",
    AlreadyExistsError: "already_exists",
    NotMemberError: "not_member",
    ValidationError: "invalid_argument",
    AuthorizationError: "unauthorized",
}


class Failure(BaseModel):
    """A failed operation, tagged by error kind."""

    ok: Literal[False] = False
    kind: FailureKind
    code: str
    message: str
    field: str | None = None


def map_acr_error(error: ACRError) -> Failure:
    """Map a registry error to a Failure.

    Args:
        error: The registry error to map.

    Returns:
        Failure with the error's kind, code and message.
    """
    kind = DOMAIN_ERROR_KIND_MAP.get(type(error), "internal")
    field = error.field if isinstance(error, ValidationError) else None
    return Failure(kind=kind, code=error.code, message=error.message, field=field)


def execute(
    handler: CommandHandler | QueryHandler, request: Command | Query
) -> CommandResult | QueryResult | Failure:
    """Run a handler, returning its Result on success and a Failure on a domain error."""
    try:
        return handler.run(request)
    except DomainError as e:
        logger.info("%s failed: %s (%s)", type(handler).__name__, e.message, e.code)
        return map_acr_error(e)
