from typing import Dict, Any

from sqlalchemy import Column, INT, VARCHAR

from app.db.base import Base


class User(Base):
    """
    用户数据库模型

    id 由数据库在插入时生成，之后不可修改。
    email 只在应用层通过 exists_by_email 预检查去重，数据库层没有唯一约束。
    """
    __tablename__ = "users"

    id = Column(INT, primary_key=True, autoincrement=True, index=True)
    first_name = Column(VARCHAR(255), nullable=False)
    last_name = Column(VARCHAR(255), nullable=False)
    email = Column(VARCHAR(255), nullable=False, index=True)

    def __init__(self, first_name: str = None, last_name: str = None, email: str = None, id: int = None):
        super().__init__(first_name=first_name, last_name=last_name, email=email)
        if id is not None:
            self.id = id

    def to_dict(self) -> Dict[str, Any]:
        """将用户转换为字典表示形式"""
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
        }

    def __repr__(self) -> str:
        return (
            f"User(id={self.id!r}, firstName={self.first_name!r}, "
            f"lastName={self.last_name!r}, email={self.email!r})"
        )
