"""Session queries: who is logged in, and what they may do."""

from acr.domain.registry.service.registry import Registry
from acr.domain.shared.authorization.gate import authenticated, public
from acr.domain.shared.query import Query, QueryHandler, Result


class GetCurrentUser(Query): ...


class GetCurrentUserResult(Result):
    nickname: str | None


class GetCurrentUserHandler(QueryHandler[GetCurrentUser, GetCurrentUserResult]):
    __auth__ = public()
    registry: Registry

    def run(self, query: GetCurrentUser) -> GetCurrentUserResult:
        return GetCurrentUserResult(nickname=self.registry.current_user())


class CheckAuthorization(Query):
    """Ask whether ``user`` holds ``right`` through any of their groups."""

    user: str
    right: str


class CheckAuthorizationResult(Result):
    user: str
    right: str
    authorized: bool


class CheckAuthorizationHandler(QueryHandler[CheckAuthorization, CheckAuthorizationResult]):
    __auth__ = authenticated()
    registry: Registry

    def run(self, query: CheckAuthorization) -> CheckAuthorizationResult:
        return CheckAuthorizationResult(
            user=query.user,
            right=query.right,
            authorized=self.registry.is_authorized(query.user, query.right),
        )
