"""Session: the single process-wide login slot."""

from acr.domain.registry.model.value import Nickname
from acr.domain.shared.model.entity import Entity


class Session(Entity):
    """Holds the nickname of the logged-in user, or nothing.

    Two states: empty (``holder is None``) and occupied. Opening an occupied
    session is the caller's job to prevent; ``close`` is idempotent.
    """

    holder: Nickname | None = None

    @property
    def is_open(self) -> bool:
        return self.holder is not None

    def open(self, nickname: Nickname) -> None:
        self.holder = nickname

    def close(self) -> None:
        self.holder = None
