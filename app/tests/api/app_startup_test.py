"""
测试应用工厂：缺少数据库凭证时无法创建应用
"""
import pytest

from app.core.config import get_settings
from app.infrastructure.exceptions import ConfigurationError
from app.main import create_app


@pytest.fixture
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_create_app_fails_without_credentials(tmp_path, monkeypatch, clear_settings_cache):
    monkeypatch.delenv("DB_USERNAME", raising=False)
    monkeypatch.delenv("DB_PASSWORD", raising=False)
    # 工作目录下没有 .env 文件
    monkeypatch.chdir(tmp_path)

    with pytest.raises(ConfigurationError) as exc_info:
        create_app()

    assert "DB_USERNAME" in str(exc_info.value)
    assert "DB_PASSWORD" in str(exc_info.value)
