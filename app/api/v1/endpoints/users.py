"""
用户相关API接口模块

提供用户的增删改查、示例数据初始化以及两种列表查询接口。
数据库操作是同步的，接口使用普通函数定义，由 FastAPI 放到线程池中执行。
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from app.api.dependencies import get_user_service
from app.infrastructure.response import success_response, error_response, not_found_response
from app.models.user import User
from app.schemas.user import UserCreate, UserRead, UserUpdate
from app.services import UserService

# 配置日志记录器
logger = logging.getLogger(__name__)

# 创建API路由实例
router = APIRouter()


# 获取用户列表接口
@router.get("", response_model=List[UserRead])
def get_all_users(
        user_service: UserService = Depends(get_user_service),
):
    return user_service.find_all()


# 批量查询并逐条打印
@router.get("/display", response_model=List[UserRead])
def retrieve_and_display_users(
        user_service: UserService = Depends(get_user_service),
):
    return user_service.retrieve_and_display_users()


# 逐条遍历查询结果
@router.get("/display-one-by-one", response_model=List[UserRead])
def retrieve_users_one_by_one(
        user_service: UserService = Depends(get_user_service),
):
    return user_service.retrieve_users_one_by_one()


# 获取用户详情接口
@router.get("/{user_id}", response_model=UserRead)
def get_user_by_id(
        user_id: int,  # 用户ID参数，从URL路径中提取
        user_service: UserService = Depends(get_user_service),
):
    """
    根据ID获取用户

    Returns:
        用户信息；不存在时返回404
    """
    user = user_service.find_by_id(user_id)
    if user is None:
        return not_found_response(entity="用户")
    return user


# 创建用户接口
@router.post("", response_model=UserRead)
def create_user(
        user_data: UserCreate,  # 用户创建请求体数据
        user_service: UserService = Depends(get_user_service),
):
    """
    创建新用户

    邮箱已存在时返回400；检查与插入之间没有加锁
    """
    if user_service.exists_by_email(user_data.email):
        logger.info(f"User with email {user_data.email} already exists")
        return error_response(msg=f"邮箱 {user_data.email} 已存在", code=400)

    user = User(user_data.first_name, user_data.last_name, user_data.email)
    return user_service.save(user)


# 更新用户接口
@router.put("/{user_id}", response_model=UserRead)
def update_user(
        user_id: int,
        user_data: UserUpdate,
        user_service: UserService = Depends(get_user_service),
):
    """
    整条替换用户记录，id 以路径参数为准
    """
    if user_service.find_by_id(user_id) is None:
        return not_found_response(entity="用户")

    user = User(user_data.first_name, user_data.last_name, user_data.email, id=user_id)
    return user_service.save(user)


# 删除用户接口
@router.delete("/{user_id}")
def delete_user(
        user_id: int,
        user_service: UserService = Depends(get_user_service),
):
    if user_service.find_by_id(user_id) is None:
        return not_found_response(entity="用户")

    user_service.delete_by_id(user_id)
    return Response(status_code=200)


# 初始化示例用户接口
@router.post("/sample-users")
def create_sample_users(
        user_service: UserService = Depends(get_user_service),
):
    """
    创建示例用户，已存在的邮箱会被跳过

    Returns:
        dict: data 为本次新建的用户列表
    """
    created = user_service.create_sample_users()
    return success_response(
        data=[user.to_dict() for user in created],
        msg="Sample users created successfully",
    )
