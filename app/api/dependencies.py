"""
API Dependencies

Provides dependency injection for the session factory and user services.
The session factory is created once by the application factory and kept
on ``app.state``; every request builds its repository and service on top of it.
"""

from fastapi import Depends, Request

from app.db.session import SessionFactory
from app.repositories.user_repository import UserRepository
from app.services import UserService


def get_session_factory(request: Request) -> SessionFactory:
    """
    Get the process-wide session factory

    Returns:
        SessionFactory: Factory created at application startup
    """
    return request.app.state.session_factory


def get_user_repository(
    session_factory: SessionFactory = Depends(get_session_factory),
) -> UserRepository:
    return UserRepository(session_factory)


def get_user_service(
    repository: UserRepository = Depends(get_user_repository),
) -> UserService:
    """
    Get User Service instance

    Returns:
        UserService: Service backed by the shared session factory
    """
    return UserService(repository)
