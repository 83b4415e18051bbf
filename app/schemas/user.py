from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UserBase(BaseModel):
    """
    用户基础模式

    对外使用 camelCase 字段名（firstName / lastName），也接受 snake_case 输入
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str
    last_name: str
    email: str


class UserWrite(UserBase):
    """写入请求的公共字段，要求非空"""
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)


class UserCreate(UserWrite):
    """
    用户创建请求模型

    请求体中的 id 会被忽略，由数据库生成
    """
    id: Optional[int] = Field(default=None, exclude=True)


class UserUpdate(UserWrite):
    """
    用户更新请求模型

    整条记录替换，id 以 URL 路径中的为准
    """
    id: Optional[int] = Field(default=None, exclude=True)


class UserRead(UserBase):
    """
    用户响应模型

    不做长度校验，数据库中已有的记录都能原样返回
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
