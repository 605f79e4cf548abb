"""Tests for LockedRegistry."""

import threading

import pytest

from acr.domain.registry.model.bootstrap import Bootstrap
from acr.domain.registry.service.registry import Registry
from acr.domain.shared.error import NotFoundError
from acr.infrastructure.locking import LockedRegistry


def _make_locked() -> LockedRegistry:
    return LockedRegistry(Registry.from_bootstrap(Bootstrap()))


class TestLockedRegistry:
    def test_delegates_operations(self):
        locked = _make_locked()

        assert locked.login("admin", "1234") is True
        assert locked.current_user() == "admin"
        assert locked.is_authorized("admin", "delete users") is True

    def test_propagates_errors(self):
        with pytest.raises(NotFoundError):
            _make_locked().delete_user("ghost")

    def test_private_state_not_proxied(self):
        with pytest.raises(AttributeError):
            _make_locked()._users

    def test_lock_is_reentrant(self):
        locked = _make_locked()

        with locked.lock:
            locked.create_user("vasya", "qwerty")
            assert "vasya" in locked.users()

    def test_concurrent_creates_yield_unique_names(self):
        locked = _make_locked()
        created: list[str] = []
        created_lock = threading.Lock()

        def worker() -> None:
            for _ in range(50):
                group = locked.create_group()
                with created_lock:
                    created.append(group)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(created) == 400
        assert len(set(created)) == 400
        assert len(locked.groups()) == 403
