"""Registry construction from configured bootstrap data."""

import logging

from pydantic import ValidationError as PydanticValidationError

from acr.config import Config
from acr.domain.registry.service.registry import Registry
from acr.domain.shared.error import ConfigurationError

logger = logging.getLogger(__name__)


def load_config() -> Config:
    """Load Config from env, .env and YAML. Invalid bootstrap data raises ConfigurationError."""
    try:
        return Config()
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid registry configuration: {e}") from e


def build_registry(config: Config | None = None) -> Registry:
    """Create a registry seeded with ``config.bootstrap``."""
    if config is None:
        config = load_config()

    registry = Registry.from_bootstrap(
        config.bootstrap,
        logout_on_user_delete=config.session.logout_on_user_delete,
    )
    logger.info(
        "Registry seeded (rights=%d, groups=%d, users=%d, default_group=%s)",
        len(registry.rights()),
        len(registry.groups()),
        len(registry.users()),
        registry.default_group,
    )
    return registry
