#!/usr/bin/env python3
import logging
import sys

import uvicorn

from app.core.config import get_settings
from app.core.logging_config import setup_logging
from app.infrastructure.exceptions import ConfigurationError

logger = logging.getLogger()


def main() -> int:
    try:
        settings = get_settings()
    except ConfigurationError as e:
        setup_logging(log_dir=None)
        logger.error(f"配置加载失败，服务无法启动: {str(e)}")
        return 1

    log_filename = setup_logging(settings.LOG_DIR)

    # 启动FastAPI应用
    logger.info(f"启动API服务 - 监听 {settings.HOST}:{settings.PORT}")
    logger.info(f"日志文件路径: {log_filename}")
    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
