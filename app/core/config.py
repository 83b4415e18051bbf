import os
import json
from functools import lru_cache
from typing import Any, Dict, List, Optional, Union

from dotenv import load_dotenv
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url

from app.infrastructure.exceptions import ConfigurationError

project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
env_path = os.path.join(project_root, '.env')
load_dotenv(env_path)

# 必须由环境变量提供的数据库凭证
REQUIRED_CREDENTIALS = ("DB_USERNAME", "DB_PASSWORD")


class Settings(BaseSettings):
    # 基本设置
    API_V1_STR: str = "/api"
    PROJECT_NAME: str = "User CRUD Demo"

    # CORS 设置，默认只允许本地 React 前端
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            # 如果是一个字符串，尝试将其解析为JSON数组
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                if v.startswith("[") and v.endswith("]"):
                    # 可能是格式不正确的JSON，尝试手动处理
                    v = v.strip("[]").strip()
                    if v:
                        return [i.strip().strip('"\'') for i in v.split(",")]
                    return []
                # 普通的逗号分隔字符串
                return [i.strip() for i in v.split(",") if i.strip()]

        if isinstance(v, list):
            return v

        return []

    # 数据库设置
    DB_DRIVER: str = "mysql+pymysql"
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_NAME: str = "demo"

    # 数据库凭证，没有默认值
    DB_USERNAME: str
    DB_PASSWORD: str

    # 完整连接串，设置后覆盖上面的 host/port/name
    DATABASE_URI: Optional[str] = None

    # 连接池设置
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_RECYCLE: int = 3600
    # 启用回显SQL语句，便于调试
    DB_ECHO: bool = False

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """
        获取数据库URI

        凭证总是来自 DB_USERNAME / DB_PASSWORD，SQLite 除外
        """
        if self.DATABASE_URI:
            url = make_url(self.DATABASE_URI)
            if url.get_backend_name() != "sqlite":
                url = url.set(username=self.DB_USERNAME, password=self.DB_PASSWORD)
            return url.render_as_string(hide_password=False)

        return URL.create(
            self.DB_DRIVER,
            username=self.DB_USERNAME,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        ).render_as_string(hide_password=False)

    @property
    def ENGINE_OPTIONS(self) -> Dict[str, Any]:
        """连接池参数"""
        return {
            "pool_pre_ping": True,
            "pool_size": self.DB_POOL_SIZE,
            "max_overflow": self.DB_MAX_OVERFLOW,
            "pool_recycle": self.DB_POOL_RECYCLE,
            "echo": self.DB_ECHO,
        }

    # 是否自动创建数据库表结构
    CREATE_TABLES: bool = True

    # 服务器启动配置
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    RELOAD: bool = False
    LOG_DIR: str = "logs"

    class Config:
        case_sensitive = True
        env_file = ".env"
        extra = "ignore"


def load_settings(**overrides: Any) -> Settings:
    """
    创建配置实例

    缺少数据库凭证时抛出 ConfigurationError，应用不能继续启动
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        missing = [
            str(error["loc"][0]) for error in e.errors()
            if error["type"] == "missing" and error["loc"] and error["loc"][0] in REQUIRED_CREDENTIALS
        ]
        if missing:
            raise ConfigurationError(
                f"Database credentials not found in environment variables: {', '.join(missing)}"
            ) from e
        raise ConfigurationError(f"配置无效: {e}") from e


@lru_cache()
def get_settings() -> Settings:
    return load_settings()
