"""
认证服务
基于内存用户表的模拟登录：邮箱不区分大小写，密码明文比对
"""

import logging
from typing import Optional

from ..constants import DEMO_USERS
from ..core.database import DatabaseManager, db_manager
from ..core.exceptions import AuthenticationError, DuplicateEmailError
from ..core.security import Session, SecurityManager, security_manager
from ..models.user import User, UserRole
from .user_service import UserService

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD = "123456"

# 一键演示登录只对普通演示账号开放
PASSWORDLESS_EMAILS = {u["email"] for u in DEMO_USERS if u["role"] == UserRole.USER.value}


class AuthService:
    """认证服务"""

    def __init__(self, db: Optional[DatabaseManager] = None,
                 security: Optional[SecurityManager] = None):
        self.db = db or db_manager
        self.security = security or security_manager
        self.users = UserService(self.db)

    def email_exists(self, email: str) -> bool:
        row = self.db.execute_one(
            "SELECT 1 FROM users WHERE lower(email) = lower(?)", [email.strip()])
        return row is not None

    def login(self, email: str, password: Optional[str] = None) -> dict:
        """
        登录

        仅普通演示账号可不带密码登录；其他账号（含管理员）必须提供正确密码

        Raises:
            AuthenticationError: 邮箱不存在或密码错误
        """
        row = self.db.execute_one(
            "SELECT id, password FROM users WHERE lower(email) = lower(?)", [email.strip()])
        if not row or not self._password_ok(email, password, row[1]):
            logger.info("Failed sign-in for %s", email)
            raise AuthenticationError("Authentication failed. Check credentials or email availability.")

        user = self.users.get_user(row[0])
        logger.info("User %s signed in", user.id)
        return self._issue(user)

    def register(self, name: str, email: str, password: Optional[str] = None) -> dict:
        """
        注册并直接登录

        Raises:
            DuplicateEmailError: 邮箱已存在
        """
        if self.email_exists(email):
            raise DuplicateEmailError(
                "Authentication failed. Check credentials or email availability.",
                details={"email": email})

        user = self.users.create_user(
            name=name, email=email.strip(), password=password or DEFAULT_PASSWORD, role=UserRole.USER.value)
        logger.info("User %s registered", user.id)
        return self._issue(user)

    def _password_ok(self, email: str, password: Optional[str], stored: str) -> bool:
        if not password:
            return email.strip().lower() in PASSWORDLESS_EMAILS
        return password == stored

    def logout(self, session: Session):
        self.security.revoke(session.jti)

    def _issue(self, user: User) -> dict:
        token = self.security.create_jwt_token(user.id, user.role, user.name)
        return {"token": token, "token_type": "Bearer", "user": user}
