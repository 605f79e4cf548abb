"""Right commands: create, delete, grant to and revoke from a group."""

from acr.domain.registry.model.value import ADMIN_RIGHT
from acr.domain.registry.service.registry import Registry
from acr.domain.shared.authorization.gate import requires_right
from acr.domain.shared.command import Command, CommandHandler, Result


class CreateRight(Command):
    """Command to create a right with a generated name."""


class CreateRightResult(Result):
    right: str


class CreateRightHandler(CommandHandler[CreateRight, CreateRightResult]):
    __auth__ = requires_right(ADMIN_RIGHT)
    registry: Registry

    def run(self, cmd: CreateRight) -> CreateRightResult:
        return CreateRightResult(right=self.registry.create_right())


class DeleteRight(Command):
    """Command to delete a right from the registry and from every group."""

    right: str


class DeleteRightResult(Result):
    right: str


class DeleteRightHandler(CommandHandler[DeleteRight, DeleteRightResult]):
    __auth__ = requires_right(ADMIN_RIGHT)
    registry: Registry

    def run(self, cmd: DeleteRight) -> DeleteRightResult:
        self.registry.delete_right(cmd.right)
        return DeleteRightResult(right=cmd.right)


class AddRightToGroup(Command):
    right: str
    group: str


class RemoveRightFromGroup(Command):
    right: str
    group: str


class GroupRightsResult(Result):
    """The group's right list after the change."""

    group: str
    rights: list[str]


class AddRightToGroupHandler(CommandHandler[AddRightToGroup, GroupRightsResult]):
    __auth__ = requires_right(ADMIN_RIGHT)
    registry: Registry

    def run(self, cmd: AddRightToGroup) -> GroupRightsResult:
        self.registry.add_right_to_group(cmd.right, cmd.group)
        return GroupRightsResult(group=cmd.group, rights=self.registry.group_rights(cmd.group))


class RemoveRightFromGroupHandler(CommandHandler[RemoveRightFromGroup, GroupRightsResult]):
    __auth__ = requires_right(ADMIN_RIGHT)
    registry: Registry

    def run(self, cmd: RemoveRightFromGroup) -> GroupRightsResult:
        self.registry.remove_right_from_group(cmd.right, cmd.group)
        return GroupRightsResult(group=cmd.group, rights=self.registry.group_rights(cmd.group))
