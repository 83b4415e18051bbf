"""
控制台入口

不启动 HTTP 服务，直接调用服务层：创建示例用户，然后用两种方式列出所有用户。

    python -m app.console
"""
import logging
import os
import sys
from typing import Optional

from app.core.config import env_path, get_settings
from app.core.logging_config import setup_logging
from app.db.session import SessionFactory
from app.infrastructure.exceptions import ConfigurationError
from app.repositories.user_repository import UserRepository
from app.services import UserService

logger = logging.getLogger(__name__)


def main() -> int:
    setup_logging(log_dir=None)

    env_file = env_path if os.path.exists(env_path) else None
    logger.info(f".env found at: {env_file}")

    session_factory: Optional[SessionFactory] = None
    try:
        settings = get_settings()
        session_factory = SessionFactory.from_settings(settings)
        if settings.CREATE_TABLES:
            session_factory.create_tables()

        user_service = UserService(UserRepository(session_factory))

        user_service.create_sample_users()
        # 一次查询，逐条打印
        user_service.retrieve_and_display_users()
        # 同一次查询结果按序号逐条访问
        user_service.retrieve_users_one_by_one()
        return 0
    except ConfigurationError as e:
        logger.error(f"配置加载失败: {str(e)}")
        return 1
    except Exception:
        logger.exception("Error in main application")
        return 1
    finally:
        if session_factory is not None:
            session_factory.close()


if __name__ == "__main__":
    sys.exit(main())
