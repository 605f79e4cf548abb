"""Registry service: accounts, groups, rights, the login session and authorization."""

import logging
from collections.abc import Collection
from dataclasses import field

from acr.domain.registry.model.bootstrap import Bootstrap
from acr.domain.registry.model.group import Group
from acr.domain.registry.model.session import Session
from acr.domain.registry.model.user import User
from acr.domain.registry.model.value import (
    DEFAULT_GROUP,
    GROUP_PREFIX,
    RIGHT_PREFIX,
    GroupId,
    Nickname,
    RightId,
)
from acr.domain.shared.error import AlreadyExistsError, NotFoundError, ValidationError
from acr.domain.shared.service import Service

logger = logging.getLogger(__name__)


class Registry(Service):
    """Owns all user, group, right and session state.

    Read operations return fresh lists, never the internal collections.
    Every write validates its inputs before touching state, so a failed call
    leaves the registry unchanged.

    Not thread-safe. Wrap in ``acr.infrastructure.locking.LockedRegistry`` when
    more than one thread drives the same instance.
    """

    default_group: GroupId = DEFAULT_GROUP
    logout_on_user_delete: bool = True
    _rights: list[RightId] = field(default_factory=list)
    _groups: dict[GroupId, Group] = field(default_factory=dict)
    _users: dict[Nickname, User] = field(default_factory=dict)
    _session: Session = field(default_factory=Session)
    _right_counter: int = 1
    _group_counter: int = 1

    @classmethod
    def from_bootstrap(
        cls, bootstrap: Bootstrap, *, logout_on_user_delete: bool = True
    ) -> "Registry":
        """Build a registry pre-populated with the given rights, groups and users."""
        registry = cls(
            default_group=GroupId(bootstrap.default_group),
            logout_on_user_delete=logout_on_user_delete,
        )
        registry._rights = [RightId(r) for r in bootstrap.rights]
        registry._groups = {
            GroupId(name): Group(name=GroupId(name), rights=[RightId(r) for r in rights])
            for name, rights in bootstrap.groups.items()
        }
        registry._users = {
            Nickname(seed.nickname): User(
                nickname=Nickname(seed.nickname),
                password=seed.password,
                groups=[GroupId(g) for g in seed.groups],
            )
            for seed in bootstrap.users
        }
        return registry

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def _require_user(self, nickname: str) -> User:
        user = self._users.get(Nickname(nickname))
        if user is None:
            raise NotFoundError(f"User not found: {nickname}", code="user_not_found")
        return user

    def _require_group(self, group: str) -> Group:
        found = self._groups.get(GroupId(group))
        if found is None:
            raise NotFoundError(f"Group not found: {group}", code="group_not_found")
        return found

    def _require_right(self, right: str) -> None:
        if right not in self._rights:
            raise NotFoundError(f"Right not found: {right}", code="right_not_found")

    def _next_name(self, prefix: str, counter: int, taken: Collection[str]) -> tuple[str, int]:
        # Counters only move forward; skip names already supplied at bootstrap.
        name = f"{prefix}{counter}"
        while name in taken:
            counter += 1
            name = f"{prefix}{counter}"
        return name, counter + 1

    # -------------------------------------------------------------------------
    # Rights
    # -------------------------------------------------------------------------

    def create_right(self) -> RightId:
        name, self._right_counter = self._next_name(
            RIGHT_PREFIX, self._right_counter, self._rights
        )
        right = RightId(name)
        self._rights.append(right)
        logger.info("Created right %s", right)
        return right

    def delete_right(self, right: str) -> None:
        """Delete a right and strip it from every group that grants it."""
        self._require_right(right)
        self._rights.remove(RightId(right))
        for group in self._groups.values():
            if group.drop_right(RightId(right)):
                logger.debug("Cascade: removed right %s from group %s", right, group.name)
        logger.info("Deleted right %s", right)

    def rights(self) -> list[RightId]:
        return list(self._rights)

    # -------------------------------------------------------------------------
    # Groups
    # -------------------------------------------------------------------------

    def create_group(self) -> GroupId:
        name, self._group_counter = self._next_name(
            GROUP_PREFIX, self._group_counter, self._groups
        )
        group = GroupId(name)
        self._groups[group] = Group(name=group)
        logger.info("Created group %s", group)
        return group

    def delete_group(self, group: str) -> None:
        """Delete a group and strip it from every user's membership list."""
        self._require_group(group)
        del self._groups[GroupId(group)]
        for user in self._users.values():
            if user.drop_group(GroupId(group)):
                logger.debug("Cascade: removed user %s from group %s", user.nickname, group)
        logger.info("Deleted group %s", group)

    def groups(self) -> list[GroupId]:
        return list(self._groups)

    def group_rights(self, group: str) -> list[RightId]:
        return list(self._require_group(group).rights)

    def add_right_to_group(self, right: str, group: str) -> None:
        """Grant ``right`` to ``group``. Granting twice leaves a duplicate entry."""
        target = self._require_group(group)
        self._require_right(right)
        target.grant(RightId(right))
        logger.info("Added right %s to group %s", right, group)

    def remove_right_from_group(self, right: str, group: str) -> None:
        """Remove the first occurrence of ``right`` from ``group``."""
        self._require_group(group).revoke(RightId(right))
        logger.info("Removed right %s from group %s", right, group)

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    def create_user(self, nickname: str, password: str) -> Nickname:
        if Nickname(nickname) in self._users:
            raise AlreadyExistsError(
                f"User already exists: {nickname}",
                code="user_already_exists",
            )
        # The default group may have been deleted since bootstrap.
        self._require_group(self.default_group)
        user = User(nickname=Nickname(nickname), password=password, groups=[self.default_group])
        self._users[user.nickname] = user
        logger.info("Created user %s", user.nickname)
        return user.nickname

    def delete_user(self, nickname: str) -> None:
        user = self._require_user(nickname)
        del self._users[user.nickname]
        logger.info("Deleted user %s", user.nickname)

        if self.logout_on_user_delete and self._session.holder == user.nickname:
            self._session.close()
            logger.info("Session closed: holder %s was deleted", user.nickname)

    def users(self) -> list[Nickname]:
        return list(self._users)

    def add_user_to_group(self, user: str, group: str) -> None:
        """Add ``user`` to ``group``. Adding twice leaves a duplicate membership."""
        record = self._require_user(user)
        self._require_group(group)
        record.join(GroupId(group))
        logger.info("Added user %s to group %s", user, group)

    def remove_user_from_group(self, user: str, group: str) -> None:
        """Remove the first occurrence of ``group`` from the user's memberships."""
        self._require_user(user).leave(GroupId(group))
        logger.info("Removed user %s from group %s", user, group)

    def user_groups(self, user: str) -> list[GroupId]:
        return list(self._require_user(user).groups)

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------

    def login(self, username: str, password: str) -> bool:
        """Open the session for matching credentials.

        Returns False without checking credentials while any session is open,
        and False on a nickname/password mismatch. Never raises.
        """
        if self._session.is_open:
            logger.info("Login rejected: a session is already open")
            return False

        user = self._users.get(Nickname(username)) if isinstance(username, str) else None
        if user is None or not user.matches(username, password):
            logger.info("Login failed for %r", username)
            return False

        self._session.open(user.nickname)
        logger.info("User %s logged in", user.nickname)
        return True

    def current_user(self) -> Nickname | None:
        return self._session.holder

    def logout(self) -> None:
        if self._session.is_open:
            logger.info("User %s logged out", self._session.holder)
        self._session.close()

    # -------------------------------------------------------------------------
    # Authorization
    # -------------------------------------------------------------------------

    def is_authorized(self, user: str, right: str) -> bool:
        """Check whether any of the user's groups grants ``right``.

        Raises:
            ValidationError: ``user`` or ``right`` is not a string.
            NotFoundError: the user or the right does not exist.
        """
        if not isinstance(user, str):
            raise ValidationError(f"Invalid user: {user!r}", field="user")
        if not isinstance(right, str):
            raise ValidationError(f"Invalid right: {right!r}", field="right")

        record = self._require_user(user)
        self._require_right(right)

        for name in record.groups:
            # A membership left pointing at a missing group grants nothing.
            group = self._groups.get(name)
            if group is not None and group.has_right(RightId(right)):
                return True
        return False
