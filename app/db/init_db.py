import logging

from sqlalchemy.engine import Engine

from app.db.base import Base

# 导入模型，确保表已注册到 Base.metadata
from app.models import user  # noqa: F401

logger = logging.getLogger(__name__)


# 创建所有表
def create_tables(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("所有表已创建或已存在")


# 删除所有表
def drop_tables(engine: Engine) -> None:
    Base.metadata.drop_all(bind=engine)
    logger.info("所有表已删除")


if __name__ == "__main__":
    from app.core.config import get_settings
    from app.db.base import build_engine

    logging.basicConfig(level=logging.INFO)
    db_engine = build_engine(get_settings())
    try:
        create_tables(db_engine)
    finally:
        db_engine.dispose()
