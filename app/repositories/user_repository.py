"""
用户数据访问层

每个操作从注入的 SessionFactory 打开一个独立的会话作用域，执行一条语句后关闭。
写操作在事务中执行：失败时回滚，记录日志，并以 RepositoryError 重新抛出。
"""
import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from app.db.session import SessionFactory
from app.infrastructure.exceptions import RepositoryError
from app.models.user import User

logger = logging.getLogger(__name__)


class UserRepository:

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def exists_by_email(self, email: str) -> bool:
        """
        按邮箱精确匹配统计用户数量

        不做大小写转换或去空格；与 save 之间没有加锁，并发写入时可能重复
        """
        try:
            with self.session_factory.session() as db:
                count = db.query(func.count(User.id)).filter(User.email == email).scalar()
            return count is not None and count > 0
        except SQLAlchemyError as e:
            logger.error(f"按邮箱查询用户失败 {email}: {str(e)}")
            raise RepositoryError("Failed to check user email") from e

    def save(self, user: User) -> User:
        """
        保存用户

        id 为空时插入并返回带新 id 的记录，否则按 id 整条更新
        """
        try:
            with self.session_factory.transaction() as db:
                if user.id is None:
                    db.add(user)
                    db.flush()
                    saved = user
                else:
                    saved = db.merge(user)
                    db.flush()
            logger.info(f"User saved successfully: {saved}")
            return saved
        except SQLAlchemyError as e:
            logger.error(f"保存用户失败 {user}: {str(e)}")
            raise RepositoryError("Failed to save user") from e

    def find_by_id(self, user_id: int) -> Optional[User]:
        try:
            with self.session_factory.session() as db:
                user = db.get(User, user_id)
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving user with ID {user_id}: {str(e)}")
            raise RepositoryError("Failed to retrieve user") from e

        if user is not None:
            logger.info(f"Retrieved user by ID {user_id}: {user}")
        else:
            logger.warning(f"No user found with ID: {user_id}")
        return user

    def find_all(self) -> List[User]:
        # 顺序由数据库决定
        try:
            with self.session_factory.session() as db:
                return db.query(User).all()
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving all users: {str(e)}")
            raise RepositoryError("Failed to retrieve users") from e

    def delete_by_id(self, user_id: int) -> None:
        """
        按 id 删除用户，记录不存在时什么也不做
        """
        try:
            with self.session_factory.transaction() as db:
                user = db.get(User, user_id)
                if user is None:
                    return
                db.delete(user)
            logger.info(f"User deleted successfully: {user}")
        except SQLAlchemyError as e:
            logger.error(f"Error deleting user with ID {user_id}: {str(e)}")
            raise RepositoryError("Failed to delete user") from e
