"""
安全相关功能
会话以 JWT 表示，携带 user_id 与 role；管理员权限只在路由边界检查一次
"""

import logging
import threading
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Set

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from ..config.settings import settings
from .exceptions import AuthenticationError, AuthorizationError

logger = logging.getLogger(__name__)


class Session(BaseModel):
    """已认证的会话"""
    user_id: int
    role: str
    name: str
    jti: str
    expires_at: datetime

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


class SecurityManager:
    """安全管理器"""

    def __init__(self):
        self._revoked: Set[str] = set()
        self._lock = threading.Lock()

    def create_jwt_token(self, user_id: int, role: str, name: str,
                         additional_claims: Optional[Dict[str, Any]] = None) -> str:
        """创建JWT token"""
        now = datetime.now(timezone.utc)
        payload = {
            "user_id": user_id,
            "role": role,
            "name": name,
            "jti": uuid.uuid4().hex,
            "exp": now + timedelta(hours=settings.jwt_expire_hours),
            "iat": now,
        }
        if additional_claims:
            payload.update(additional_claims)

        return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)

    def decode_jwt_token(self, token: str) -> Dict[str, Any]:
        """解码JWT token"""
        try:
            return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token has expired", error_code="AUTHENTICATION_REQUIRED")
        except jwt.InvalidTokenError as e:
            raise AuthenticationError(f"Invalid token: {e}", error_code="AUTHENTICATION_REQUIRED")

    def get_session(self, token: str) -> Session:
        """校验 token 并还原会话"""
        payload = self.decode_jwt_token(token)
        jti = payload.get("jti")
        if not jti or payload.get("user_id") is None:
            raise AuthenticationError("Token missing claims", error_code="AUTHENTICATION_REQUIRED")
        if self.is_revoked(jti):
            raise AuthenticationError("Session has been signed out", error_code="AUTHENTICATION_REQUIRED")

        return Session(
            user_id=payload["user_id"],
            role=payload.get("role", "user"),
            name=payload.get("name", ""),
            jti=jti,
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )

    def revoke(self, jti: str):
        with self._lock:
            self._revoked.add(jti)
        logger.info("Session %s revoked", jti)

    def is_revoked(self, jti: str) -> bool:
        with self._lock:
            return jti in self._revoked

    def clear_revocations(self):
        with self._lock:
            self._revoked.clear()


# 全局安全管理器实例
security_manager = SecurityManager()

_bearer = HTTPBearer(auto_error=False)


def get_current_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer)
) -> Session:
    """从Authorization header中提取并验证会话"""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Missing bearer token", error_code="AUTHENTICATION_REQUIRED")
    return security_manager.get_session(credentials.credentials)


def require_admin(session: Session = Depends(get_current_session)) -> Session:
    """要求管理员角色"""
    if not session.is_admin:
        raise AuthorizationError("Administrator access required")
    return session
