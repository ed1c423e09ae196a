"""
会话令牌与认证依赖测试
"""

import inspect

import pytest

from dietitian.api.deps import get_current_user
from dietitian.config.settings import settings
from dietitian.core.exceptions import AuthenticationError
from dietitian.core.security import SecurityManager, get_current_session, require_admin


class TestSecurityManager:

    def test_default_secret_long_enough_for_hs256(self):
        # HS256 要求密钥不少于 32 字节
        assert len(settings.jwt_secret_key.encode("utf-8")) >= 32

    def test_token_roundtrip(self):
        manager = SecurityManager()
        session = manager.get_session(manager.create_jwt_token(7, "admin", "Admin User"))
        assert session.user_id == 7
        assert session.is_admin is True

    def test_revoked_token_rejected(self):
        manager = SecurityManager()
        token = manager.create_jwt_token(1, "user", "Kwame Mensah")
        manager.revoke(manager.get_session(token).jti)

        with pytest.raises(AuthenticationError) as exc_info:
            manager.get_session(token)
        assert exc_info.value.error_code == "AUTHENTICATION_REQUIRED"


class TestDependencies:

    def test_db_dependencies_run_in_threadpool(self):
        """访问数据库的依赖为普通函数，由 FastAPI 放到线程池执行"""
        for dependency in (get_current_session, require_admin, get_current_user):
            assert not inspect.iscoroutinefunction(dependency)
