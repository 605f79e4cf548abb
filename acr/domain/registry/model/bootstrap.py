"""Initial registry contents supplied at startup."""

from pydantic import Field, model_validator
from typing_extensions import Self

from acr.domain.registry.model.value import DEFAULT_GROUP
from acr.domain.shared.model.value import ValueObject


class UserSeed(ValueObject):
    """A user record to create at startup."""

    nickname: str
    password: str = Field(repr=False)
    groups: list[str]


def _default_rights() -> list[str]:
    return ["manage content", "play games", "delete users", "view site"]


def _default_groups() -> dict[str, list[str]]:
    return {
        "admin": ["delete users"],
        "manager": ["manage content"],
        "basic": ["play games", "view site"],
    }


def _default_users() -> list[UserSeed]:
    return [
        UserSeed(nickname="admin", password="1234", groups=["admin", "manager", "basic"]),
        UserSeed(nickname="sobakajozhec", password="sanyok228", groups=["basic", "manager"]),
        UserSeed(nickname="patriot007", password="russiaFTW", groups=["basic"]),
    ]


class Bootstrap(ValueObject):
    """Rights, group-to-rights mapping and users the registry starts with.

    References are checked once, here: right names are unique, every group
    right must be a known right, every user belongs to at least one known
    group, and the default group must exist.
    """

    rights: list[str] = Field(default_factory=_default_rights)
    groups: dict[str, list[str]] = Field(default_factory=_default_groups)
    users: list[UserSeed] = Field(default_factory=_default_users)
    default_group: str = DEFAULT_GROUP

    @model_validator(mode="after")
    def check_references(self) -> Self:
        known_rights = set(self.rights)
        if len(known_rights) != len(self.rights):
            duplicates = sorted({r for r in self.rights if self.rights.count(r) > 1})
            raise ValueError(f"Duplicate right names: {duplicates}")

        for group, rights in self.groups.items():
            unknown = [r for r in rights if r not in known_rights]
            if unknown:
                raise ValueError(f"Group '{group}' references unknown rights: {unknown}")

        seen: set[str] = set()
        for user in self.users:
            if user.nickname in seen:
                raise ValueError(f"Duplicate user nickname: {user.nickname}")
            seen.add(user.nickname)
            if not user.groups:
                raise ValueError(f"User '{user.nickname}' has no groups")
            unknown = [g for g in user.groups if g not in self.groups]
            if unknown:
                raise ValueError(f"User '{user.nickname}' references unknown groups: {unknown}")

        if self.default_group not in self.groups:
            raise ValueError(f"Default group '{self.default_group}' is not defined")
        return self
