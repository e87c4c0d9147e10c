"""Service initialization and dependency injection."""

import logging

from fastapi import Depends

from user_api.config import Settings, get_settings
from user_api.services.user_store import InMemoryUserStore, UserStore

logger = logging.getLogger(__name__)

# Service instances cache
_services_cache: dict[str, UserStore] = {}


def get_user_store(settings: Settings = Depends(get_settings)) -> UserStore:
    """Get the user store instance.

    Args:
        settings: Application settings

    Returns:
        InMemoryUserStore shared by all requests
    """
    if "user_store" not in _services_cache:
        _services_cache["user_store"] = InMemoryUserStore(seed=settings.seed_data)
        logger.info("Initialized InMemoryUserStore (seed_data=%s)", settings.seed_data)

    return _services_cache["user_store"]


__all__ = ["InMemoryUserStore", "UserStore", "get_user_store"]
