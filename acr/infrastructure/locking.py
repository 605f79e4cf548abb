"""Serialized access to a Registry for multi-threaded hosts."""

from __future__ import annotations

import threading
from functools import wraps
from typing import Any

from acr.domain.registry.service.registry import Registry


class LockedRegistry:
    """Proxy that runs every public Registry method under one re-entrant lock.

    Cascading deletes and counter increments in ``Registry`` are not safe
    under concurrent mutation; this wrapper makes each call atomic with
    respect to the others. Private attributes are not proxied.
    """

    def __init__(self, registry: Registry) -> None:
        self._registry = registry
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        """The lock guarding the registry, for callers grouping several calls."""
        return self._lock

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)

        attr = getattr(self._registry, name)
        if not callable(attr):
            return attr

        @wraps(attr)
        def locked(*args: Any, **kwargs: Any) -> Any:
            with self._lock:
                return attr(*args, **kwargs)

        return locked
