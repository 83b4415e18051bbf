import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import Settings
from app.db.base import build_engine
from app.db.init_db import create_tables, drop_tables

logger = logging.getLogger(__name__)


class SessionFactory:
    """
    数据库会话工厂

    启动时根据配置显式创建一次，注入到每个数据访问对象中，关闭时释放连接池。
    引擎本身就是连接池，可以被多个请求并发使用。
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._sessionmaker = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=engine,
        )
        self._closed = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "SessionFactory":
        engine = build_engine(settings)
        logger.info(f"数据库引擎已创建: {engine.url.render_as_string(hide_password=True)}")
        return cls(engine)

    @property
    def closed(self) -> bool:
        return self._closed

    def open_session(self) -> Session:
        if self._closed:
            raise RuntimeError("SessionFactory 已关闭")
        return self._sessionmaker()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """只读作用域：用完即关闭"""
        db = self.open_session()
        try:
            yield db
        finally:
            db.close()

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        事务作用域

        成功时提交，任何异常都回滚后重新抛出，所有退出路径都会关闭会话
        """
        db = self.open_session()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def create_tables(self) -> None:
        create_tables(self.engine)

    def drop_tables(self) -> None:
        drop_tables(self.engine)

    def close(self) -> None:
        if self._closed:
            return
        self.engine.dispose()
        self._closed = True
        logger.info("数据库连接池已关闭")
