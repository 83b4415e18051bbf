from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from app.core.config import Settings

# 创建基本模型类
Base = declarative_base()


def build_engine(settings: Settings) -> Engine:
    """
    根据配置创建数据库引擎（带连接池）

    SQLite 不支持 pool_size 等参数，内存库需要所有连接共享同一个底层连接
    """
    uri = settings.SQLALCHEMY_DATABASE_URI
    url = make_url(uri)

    if url.get_backend_name() == "sqlite":
        options = {
            "echo": settings.DB_ECHO,
            "connect_args": {"check_same_thread": False},
        }
        if url.database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
        return create_engine(uri, **options)

    return create_engine(uri, **settings.ENGINE_OPTIONS)
