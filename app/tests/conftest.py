"""
测试公共 fixture

所有测试使用内存 SQLite，通过与生产相同的 SessionFactory 创建
"""
import pytest
from fastapi.testclient import TestClient

from app.core.config import load_settings
from app.db.session import SessionFactory
from app.main import create_app
from app.repositories.user_repository import UserRepository
from app.services import UserService


@pytest.fixture
def settings():
    return load_settings(
        _env_file=None,
        DB_USERNAME="test",
        DB_PASSWORD="test",
        DATABASE_URI="sqlite://",
        LOG_DIR="",
    )


@pytest.fixture
def session_factory(settings):
    factory = SessionFactory.from_settings(settings)
    factory.create_tables()
    yield factory
    factory.close()


@pytest.fixture
def repository(session_factory):
    return UserRepository(session_factory)


@pytest.fixture
def user_service(repository):
    return UserService(repository)


@pytest.fixture
def client(settings, session_factory):
    app = create_app(settings, session_factory)
    with TestClient(app) as test_client:
        yield test_client
