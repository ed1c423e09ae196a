"""
测试配置文件
提供测试所需的fixtures和配置
"""

import pytest
from fastapi.testclient import TestClient

from dietitian.app import create_app
from dietitian.config.settings import settings
from dietitian.core.database import DatabaseManager, db_manager
from dietitian.core.security import security_manager
from dietitian.seed import seed
from dietitian.services.meal_service import MealService
from dietitian.services.preference_service import ThemeStore, theme_store_default
from dietitian.services.user_service import UserService


@pytest.fixture
def test_db():
    """独立的内存库，已写入演示数据"""
    db = DatabaseManager(":memory:")
    seed(db)
    yield db
    db.reset()


@pytest.fixture
def demo_user(test_db):
    """演示普通用户 Kwame Mensah"""
    user_id = test_db.execute_one("SELECT id FROM users WHERE email = 'user@example.com'")[0]
    return UserService(test_db).get_user(user_id)


@pytest.fixture
def demo_admin(test_db):
    user_id = test_db.execute_one("SELECT id FROM users WHERE email = 'admin@example.com'")[0]
    return UserService(test_db).get_user(user_id)


@pytest.fixture
def jollof(test_db):
    """演示餐品：Grilled Chicken Jollof Bowl（$12，加料 Extra Chicken $3 / Avocado $1.5）"""
    return next(m for m in MealService(test_db).list_meals() if m.name == "Grilled Chicken Jollof Bowl")


@pytest.fixture
def theme_store(tmp_path):
    return ThemeStore(str(tmp_path / "theme.json"))


@pytest.fixture
def client(tmp_path, monkeypatch):
    """测试客户端：全局库重置并写入演示数据，主题文件写到临时目录，支付无延迟"""
    db_manager.reset()
    seed()
    security_manager.clear_revocations()

    monkeypatch.setattr(settings, "payment_delay_seconds", 0)
    monkeypatch.setattr(theme_store_default, "path", tmp_path / "theme.json")
    monkeypatch.setattr(theme_store_default, "_theme", None)

    yield TestClient(create_app())

    db_manager.reset()


def _login(client, email, password):
    response = client.post("/api/v1/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200
    token = response.json()["data"]["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(client):
    """普通用户认证请求头"""
    return _login(client, "user@example.com", "user123")


@pytest.fixture
def admin_headers(client):
    """管理员认证请求头"""
    return _login(client, "admin@example.com", "admin123")
