"""
测试控制台入口
"""
from app import console
from app.core.config import load_settings
from app.db.session import SessionFactory
from app.infrastructure.exceptions import ConfigurationError
from app.repositories.user_repository import UserRepository


def test_console_seeds_and_lists_users(tmp_path, monkeypatch):
    settings = load_settings(
        _env_file=None,
        DB_USERNAME="test",
        DB_PASSWORD="test",
        DATABASE_URI=f"sqlite:///{tmp_path / 'demo.db'}",
    )
    monkeypatch.setattr(console, "get_settings", lambda: settings)
    monkeypatch.setattr(console, "setup_logging", lambda log_dir=None: None)

    assert console.main() == 0
    # 再运行一次不会重复创建
    assert console.main() == 0

    factory = SessionFactory.from_settings(settings)
    try:
        emails = sorted(user.email for user in UserRepository(factory).find_all())
    finally:
        factory.close()
    assert emails == ["jane.smith@example.com", "john.doe@example.com"]


def test_console_exits_on_missing_credentials(monkeypatch):
    def missing_credentials():
        raise ConfigurationError("Database credentials not found in environment variables")

    monkeypatch.setattr(console, "get_settings", missing_credentials)
    monkeypatch.setattr(console, "setup_logging", lambda log_dir=None: None)

    assert console.main() == 1
