"""Group commands: create and delete."""

from acr.domain.registry.model.value import ADMIN_RIGHT
from acr.domain.registry.service.registry import Registry
from acr.domain.shared.authorization.gate import requires_right
from acr.domain.shared.command import Command, CommandHandler, Result


class CreateGroup(Command):
    """Command to create an empty group with a generated name."""


class CreateGroupResult(Result):
    group: str


class CreateGroupHandler(CommandHandler[CreateGroup, CreateGroupResult]):
    __auth__ = requires_right(ADMIN_RIGHT)
    registry: Registry

    def run(self, cmd: CreateGroup) -> CreateGroupResult:
        return CreateGroupResult(group=self.registry.create_group())


class DeleteGroup(Command):
    """Command to delete a group and drop it from every user."""

    group: str


class DeleteGroupResult(Result):
    group: str


class DeleteGroupHandler(CommandHandler[DeleteGroup, DeleteGroupResult]):
    __auth__ = requires_right(ADMIN_RIGHT)
    registry: Registry

    def run(self, cmd: DeleteGroup) -> DeleteGroupResult:
        self.registry.delete_group(cmd.group)
        return DeleteGroupResult(group=cmd.group)
