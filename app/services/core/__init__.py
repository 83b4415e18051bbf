"""
Core Services Module

Provides basic CRUD services for fundamental business operations.
"""

from .user_service import UserService, SAMPLE_USERS

__all__ = ["UserService", "SAMPLE_USERS"]
