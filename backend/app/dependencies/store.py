"""
Store and service dependencies for configuration routes.
"""
from fastapi import Depends, Request

from app.services.config_service import AlgoConfigService
from app.services.config_store import ConfigStore


def get_config_store(request: Request) -> ConfigStore:
    """
    Return the store created by the application lifespan.

    The store lives on ``app.state`` for the whole process; tests can
    swap it through ``app.dependency_overrides``.
    """
    return request.app.state.config_store


def get_config_service(
    store: ConfigStore = Depends(get_config_store),
) -> AlgoConfigService:
    """Dependency to get AlgoConfigService instance."""
    return AlgoConfigService(store)
