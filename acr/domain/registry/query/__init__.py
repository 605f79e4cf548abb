"""Registry domain queries."""

from .catalog import (
    GetGroupRights,
    GetGroupRightsHandler,
    GetGroupRightsResult,
    GetUserGroups,
    GetUserGroupsHandler,
    GetUserGroupsResult,
    ListGroups,
    ListGroupsHandler,
    ListGroupsResult,
    ListRights,
    ListRightsHandler,
    ListRightsResult,
    ListUsers,
    ListUsersHandler,
    ListUsersResult,
)
from .session import (
    CheckAuthorization,
    CheckAuthorizationHandler,
    CheckAuthorizationResult,
    GetCurrentUser,
    GetCurrentUserHandler,
    GetCurrentUserResult,
)

__all__ = [
    "CheckAuthorization",
    "CheckAuthorizationHandler",
    "CheckAuthorizationResult",
    "GetCurrentUser",
    "GetCurrentUserHandler",
    "GetCurrentUserResult",
    "GetGroupRights",
    "GetGroupRightsHandler",
    "GetGroupRightsResult",
    "GetUserGroups",
    "GetUserGroupsHandler",
    "GetUserGroupsResult",
    "ListGroups",
    "ListGroupsHandler",
    "ListGroupsResult",
    "ListRights",
    "ListRightsHandler",
    "ListRightsResult",
    "ListUsers",
    "ListUsersHandler",
    "ListUsersResult",
]
