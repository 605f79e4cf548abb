from pydantic import Field

from acr.domain.registry.model.value import GroupId, Nickname
from acr.domain.shared.error import NotMemberError
from acr.domain.shared.model.entity import Entity


class User(Entity):
    """An account record with credentials and group memberships.

    Invariants:
    - `nickname` is unique across the registry
    - `password` is stored verbatim
    - `groups` may list the same group more than once
    """

    nickname: Nickname
    password: str = Field(repr=False)
    groups: list[GroupId] = Field(default_factory=list)

    def matches(self, nickname: str, password: str) -> bool:
        return self.nickname == nickname and self.password == password

    def join(self, group: GroupId) -> None:
        self.groups.append(group)

    def leave(self, group: GroupId) -> None:
        if group not in self.groups:
            raise NotMemberError(
                f"User '{self.nickname}' is not in group '{group}'",
                code="user_not_in_group",
            )
        self.groups.remove(group)

    def drop_group(self, group: GroupId) -> int:
        """Remove every occurrence of ``group``. Returns how many were removed."""
        kept = [g for g in self.groups if g != group]
        removed = len(self.groups) - len(kept)
        if removed:
            self.groups = kept
        return removed
