import logging
import os
import sys
from datetime import datetime
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_dir: Optional[str] = "logs", level: int = logging.INFO) -> Optional[str]:
    """
    配置根日志记录器：控制台输出，并按启动时间生成日志文件

    Returns:
        日志文件路径；log_dir 为空时只输出到控制台，返回 None
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    # 创建控制台处理器
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # 清除可能已存在的处理器，然后添加新的处理器
    logger.handlers = []
    logger.addHandler(console_handler)

    # 降低watchfiles日志级别，避免频繁输出
    logging.getLogger('watchfiles').setLevel(logging.ERROR)
    logging.getLogger('watchfiles.main').setLevel(logging.ERROR)

    if not log_dir:
        return None

    os.makedirs(log_dir, exist_ok=True)
    log_filename = os.path.join(log_dir, f"app_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")
    file_handler = logging.FileHandler(log_filename, encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    return log_filename
