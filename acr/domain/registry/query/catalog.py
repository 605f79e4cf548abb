"""Listing queries over users, groups and rights."""

from acr.domain.registry.service.registry import Registry
from acr.domain.shared.authorization.gate import authenticated
from acr.domain.shared.query import Query, QueryHandler, Result


class ListRights(Query): ...


class ListRightsResult(Result):
    rights: list[str]


class ListRightsHandler(QueryHandler[ListRights, ListRightsResult]):
    __auth__ = authenticated()
    registry: Registry

    def run(self, query: ListRights) -> ListRightsResult:
        return ListRightsResult(rights=self.registry.rights())


class ListGroups(Query): ...


class ListGroupsResult(Result):
    groups: list[str]


class ListGroupsHandler(QueryHandler[ListGroups, ListGroupsResult]):
    __auth__ = authenticated()
    registry: Registry

    def run(self, query: ListGroups) -> ListGroupsResult:
        return ListGroupsResult(groups=self.registry.groups())


class ListUsers(Query): ...


class ListUsersResult(Result):
    users: list[str]


class ListUsersHandler(QueryHandler[ListUsers, ListUsersResult]):
    __auth__ = authenticated()
    registry: Registry

    def run(self, query: ListUsers) -> ListUsersResult:
        return ListUsersResult(users=self.registry.users())


class GetGroupRights(Query):
    group: str


class GetGroupRightsResult(Result):
    group: str
    rights: list[str]


class GetGroupRightsHandler(QueryHandler[GetGroupRights, GetGroupRightsResult]):
    __auth__ = authenticated()
    registry: Registry

    def run(self, query: GetGroupRights) -> GetGroupRightsResult:
        return GetGroupRightsResult(
            group=query.group,
            rights=self.registry.group_rights(query.group),
        )


class GetUserGroups(Query):
    user: str


class GetUserGroupsResult(Result):
    user: str
    groups: list[str]


class GetUserGroupsHandler(QueryHandler[GetUserGroups, GetUserGroupsResult]):
    __auth__ = authenticated()
    registry: Registry

    def run(self, query: GetUserGroups) -> GetUserGroupsResult:
        return GetUserGroupsResult(
            user=query.user,
            groups=self.registry.user_groups(query.user),
        )
