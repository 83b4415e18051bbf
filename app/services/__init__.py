"""
Services Layer

Provides business logic services on top of the data-access layer.
"""

from .core import UserService

__all__ = ["UserService"]
