"""
Service layer for business logic.
"""
from app.services.config_service import AlgoConfigService
from app.services.config_store import ConfigStore

__all__ = [
    "AlgoConfigService",
    "ConfigStore",
]
