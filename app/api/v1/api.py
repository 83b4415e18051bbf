from fastapi import APIRouter

from app.api.v1.endpoints import users


api_router = APIRouter()

# 包含各模块的路由

api_router.include_router(users.router, prefix="/users", tags=["用户管理"])
