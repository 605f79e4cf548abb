"""Registry domain commands."""

from .group import (
    CreateGroup,
    CreateGroupHandler,
    CreateGroupResult,
    DeleteGroup,
    DeleteGroupHandler,
    DeleteGroupResult,
)
from .right import (
    AddRightToGroup,
    AddRightToGroupHandler,
    CreateRight,
    CreateRightHandler,
    CreateRightResult,
    DeleteRight,
    DeleteRightHandler,
    DeleteRightResult,
    GroupRightsResult,
    RemoveRightFromGroup,
    RemoveRightFromGroupHandler,
)
from .session import Login, LoginHandler, LoginResult, Logout, LogoutHandler, LogoutResult
from .user import (
    AddUserToGroup,
    AddUserToGroupHandler,
    CreateUser,
    CreateUserHandler,
    CreateUserResult,
    DeleteUser,
    DeleteUserHandler,
    DeleteUserResult,
    RemoveUserFromGroup,
    RemoveUserFromGroupHandler,
    UserGroupsResult,
)

__all__ = [
    "AddRightToGroup",
    "AddRightToGroupHandler",
    "AddUserToGroup",
    "AddUserToGroupHandler",
    "CreateGroup",
    "CreateGroupHandler",
    "CreateGroupResult",
    "CreateRight",
    "CreateRightHandler",
    "CreateRightResult",
    "CreateUser",
    "CreateUserHandler",
    "CreateUserResult",
    "DeleteGroup",
    "DeleteGroupHandler",
    "DeleteGroupResult",
    "DeleteRight",
    "DeleteRightHandler",
    "DeleteRightResult",
    "DeleteUser",
    "DeleteUserHandler",
    "DeleteUserResult",
    "GroupRightsResult",
    "Login",
    "LoginHandler",
    "LoginResult",
    "Logout",
    "LogoutHandler",
    "LogoutResult",
    "RemoveRightFromGroup",
    "RemoveRightFromGroupHandler",
    "RemoveUserFromGroup",
    "RemoveUserFromGroupHandler",
    "UserGroupsResult",
]
