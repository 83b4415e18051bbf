"""
测试事务作用域：成功提交、异常回滚、关闭后不可再用
"""
import pytest

from app.db.session import SessionFactory
from app.models.user import User


def test_transaction_commits_on_success(session_factory):
    with session_factory.transaction() as db:
        db.add(User("John", "Doe", "john.doe@example.com"))

    with session_factory.session() as db:
        assert db.query(User).count() == 1


def test_transaction_rolls_back_on_error(session_factory):
    with pytest.raises(ValueError):
        with session_factory.transaction() as db:
            db.add(User("John", "Doe", "john.doe@example.com"))
            db.flush()
            raise ValueError("boom")

    with session_factory.session() as db:
        assert db.query(User).count() == 0


def test_close_is_idempotent(settings):
    factory = SessionFactory.from_settings(settings)
    factory.close()
    factory.close()

    assert factory.closed
    with pytest.raises(RuntimeError):
        factory.open_session()
