"""
Core module - Domain exceptions.
"""
from app.core.exceptions import ConfigValidationError

__all__ = [
    "ConfigValidationError",
]
