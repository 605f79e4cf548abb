"""Global test fixtures."""

import pytest

from acr.domain.registry.model.bootstrap import Bootstrap
from acr.domain.registry.service.registry import Registry


@pytest.fixture(autouse=True)
def _isolate_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's ACR_* environment from leaking into Config() in tests."""
    import os

    for key in list(os.environ):
        if key.startswith("ACR_"):
            monkeypatch.delenv(key)


@pytest.fixture
def registry() -> Registry:
    """A fresh registry holding the default bootstrap data."""
    return Registry.from_bootstrap(Bootstrap())
