from pydantic import Field

from acr.domain.registry.model.value import GroupId, RightId
from acr.domain.shared.error import NotMemberError
from acr.domain.shared.model.entity import Entity


class Group(Entity):
    """A named bundle of rights.

    The right list is ordered and may hold the same right more than once:
    granting an already-granted right appends a second entry, and revoking
    removes only the first one.
    """

    name: GroupId
    rights: list[RightId] = Field(default_factory=list)

    def grant(self, right: RightId) -> None:
        self.rights.append(right)

    def revoke(self, right: RightId) -> None:
        if right not in self.rights:
            raise NotMemberError(
                f"Right '{right}' is not in group '{self.name}'",
                code="right_not_in_group",
            )
        self.rights.remove(right)

    def drop_right(self, right: RightId) -> int:
        """Remove every occurrence of ``right``. Returns how many were removed."""
        kept = [r for r in self.rights if r != right]
        removed = len(self.rights) - len(kept)
        if removed:
            self.rights = kept
        return removed

    def has_right(self, right: RightId) -> bool:
        return right in self.rights
