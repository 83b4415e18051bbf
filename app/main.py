from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import logging
import traceback
from typing import Optional

from app.api.v1.api import api_router
from app.core.config import Settings, get_settings
from app.db.session import SessionFactory
from app.infrastructure.exceptions import RepositoryError
from app.infrastructure.response import standard_response, error_response

logger = logging.getLogger(__name__)


def create_app(
        settings: Optional[Settings] = None,
        session_factory: Optional[SessionFactory] = None,
) -> FastAPI:
    """
    创建应用实例

    缺少数据库凭证时 get_settings 抛出 ConfigurationError，应用不会启动。
    session_factory 只创建一次，保存在 app.state 上，关闭应用时释放。
    """
    if settings is None:
        settings = get_settings()
    if session_factory is None:
        session_factory = SessionFactory.from_settings(settings)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="0.1.0",
        description="用户增删改查示例API"
    )
    app.state.settings = settings
    app.state.session_factory = session_factory

    # 配置CORS - 重要: 必须在其他中间件之前添加
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RepositoryError)
    async def repository_error_handler(request: Request, exc: RepositoryError):
        logger.error(f"数据库操作失败 {request.method} {request.url.path}: {str(exc)}")
        return error_response(msg=str(exc), code=500)

    # 包含API路由
    app.include_router(api_router, prefix=settings.API_V1_STR)

    @app.on_event("startup")
    async def startup_db_client():
        """
        应用启动时初始化数据库
        """
        if not settings.CREATE_TABLES:
            logger.info("自动创建表功能已禁用")
            return

        logger.info("正在初始化数据库...")
        try:
            session_factory.create_tables()
            logger.info("数据库初始化成功")
        except Exception as e:
            logger.error(f"数据库初始化失败: {str(e)}")
            logger.error(traceback.format_exc())
            logger.warning("应用将继续启动，但数据库功能可能不可用")

    @app.on_event("shutdown")
    async def shutdown_db_client():
        session_factory.close()

    @app.get("/")
    async def root():
        """健康检查接口"""
        return standard_response(
            data={
                "status": "online",
                "version": "0.1.0"
            },
            msg=f"{settings.PROJECT_NAME} 服务正在运行"
        )

    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:create_app", factory=True, host="0.0.0.0", port=8080)
