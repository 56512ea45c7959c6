"""
core.exceptions — Re-exports for convenient imports.

Usage::

    from core.exceptions import ValidationError, NotFoundError
    from core.exceptions import albait_exception_handler
"""

from .base import (
    AlbaitError,
    ValidationError,
    NotFoundError,
    ConfigurationError,
)

from .handlers import albait_exception_handler

__all__ = [
    # Base
    "AlbaitError",
    # Client
    "ValidationError",
    "NotFoundError",
    # Config
    "ConfigurationError",
    # Handler
    "albait_exception_handler",
]
