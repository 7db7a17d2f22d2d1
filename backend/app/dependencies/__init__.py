"""
Dependencies for dependency injection in routes.
"""
from app.dependencies.store import get_config_store, get_config_service

__all__ = [
    "get_config_store",
    "get_config_service",
]
