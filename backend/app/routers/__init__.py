"""
API Routers module.
"""
from app.routers import configs, health

__all__ = ["configs", "health"]
