import logging
from typing import List, Optional, Tuple

from app.models.user import User
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

# 示例用户 (first_name, last_name, email)
SAMPLE_USERS: Tuple[Tuple[str, str, str], ...] = (
    ("John", "Doe", "john.doe@example.com"),
    ("Jane", "Smith", "jane.smith@example.com"),
)


class UserService:
    """
    用户服务

    编排数据访问层，提供示例数据初始化和两种用户列表查询方式
    """

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def exists_by_email(self, email: str) -> bool:
        return self.repository.exists_by_email(email)

    def save(self, user: User) -> User:
        return self.repository.save(user)

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.repository.find_by_id(user_id)

    def find_all(self) -> List[User]:
        return self.repository.find_all()

    def delete_by_id(self, user_id: int) -> None:
        self.repository.delete_by_id(user_id)

    def create_user(self, first_name: str, last_name: str, email: str) -> Optional[User]:
        """
        邮箱不存在时创建用户

        Returns:
            新建的用户；邮箱已存在时返回 None
        """
        if self.exists_by_email(email):
            logger.info(f"User with email {email} already exists, skipping creation")
            return None

        user = self.save(User(first_name, last_name, email))
        logger.info(f"Created new user: {user}")
        return user

    def create_sample_users(self) -> List[User]:
        """
        创建示例用户，已存在的邮箱跳过

        整批操作不是原子的，中途失败会留下部分数据
        """
        created = []
        for first_name, last_name, email in SAMPLE_USERS:
            user = self.create_user(first_name, last_name, email)
            if user is not None:
                created.append(user)
        return created

    def retrieve_and_display_users(self) -> List[User]:
        users = self.find_all()
        for user in users:
            logger.info(f"Retrieved user: {user}")
        return users

    def retrieve_users_one_by_one(self) -> List[User]:
        """逐条访问同一次查询的结果，不会再次查询数据库"""
        users = self.find_all()
        logger.info(f"Total number of users to retrieve: {len(users)}")

        for index, user in enumerate(users, start=1):
            logger.info(f"Retrieved user #{index}: {user}")

        logger.info("Completed retrieving all users one by one")
        return users
