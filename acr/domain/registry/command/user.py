"""User commands: registration, removal and group membership."""

from pydantic import Field

from acr.domain.registry.model.value import ADMIN_RIGHT
from acr.domain.registry.service.registry import Registry
from acr.domain.shared.authorization.gate import public, requires_right
from acr.domain.shared.command import Command, CommandHandler, Result


class CreateUser(Command):
    """Command to register a new user in the default group."""

    nickname: str
    password: str = Field(repr=False)


class CreateUserResult(Result):
    nickname: str
    groups: list[str]


class CreateUserHandler(CommandHandler[CreateUser, CreateUserResult]):
    __auth__ = public()
    registry: Registry

    def run(self, cmd: CreateUser) -> CreateUserResult:
        nickname = self.registry.create_user(cmd.nickname, cmd.password)
        return CreateUserResult(nickname=nickname, groups=self.registry.user_groups(nickname))


class DeleteUser(Command):
    nickname: str


class DeleteUserResult(Result):
    nickname: str


class DeleteUserHandler(CommandHandler[DeleteUser, DeleteUserResult]):
    __auth__ = requires_right(ADMIN_RIGHT)
    registry: Registry

    def run(self, cmd: DeleteUser) -> DeleteUserResult:
        self.registry.delete_user(cmd.nickname)
        return DeleteUserResult(nickname=cmd.nickname)


class AddUserToGroup(Command):
    user: str
    group: str


class RemoveUserFromGroup(Command):
    user: str
    group: str


class UserGroupsResult(Result):
    """The user's membership list after the change."""

    user: str
    groups: list[str]


class AddUserToGroupHandler(CommandHandler[AddUserToGroup, UserGroupsResult]):
    __auth__ = requires_right(ADMIN_RIGHT)
    registry: Registry

    def run(self, cmd: AddUserToGroup) -> UserGroupsResult:
        self.registry.add_user_to_group(cmd.user, cmd.group)
        return UserGroupsResult(user=cmd.user, groups=self.registry.user_groups(cmd.user))


class RemoveUserFromGroupHandler(CommandHandler[RemoveUserFromGroup, UserGroupsResult]):
    __auth__ = requires_right(ADMIN_RIGHT)
    registry: Registry

    def run(self, cmd: RemoveUserFromGroup) -> UserGroupsResult:
        self.registry.remove_user_from_group(cmd.user, cmd.group)
        return UserGroupsResult(user=cmd.user, groups=self.registry.user_groups(cmd.user))
