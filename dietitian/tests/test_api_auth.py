"""
认证API集成测试
测试认证相关的API端点
"""


class TestAuthAPI:
    """认证API测试"""

    def test_login_demo_user(self, client):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "user@example.com", "password": "user123"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["data"]["token_type"] == "Bearer"
        assert data["data"]["user"]["name"] == "Kwame Mensah"
        assert data["data"]["user"]["role"] == "user"
        assert "password" not in data["data"]["user"]

    def test_login_wrong_password(self, client):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "user@example.com", "password": "nope"}
        )

        assert response.status_code == 401
        data = response.json()
        assert data["success"] is False
        assert data["error_code"] == "AUTHENTICATION_FAILED"

    def test_login_unknown_email(self, client):
        response = client.post("/api/v1/auth/login", json={"email": "ghost@example.com"})
        assert response.status_code == 401

    def test_demo_user_one_click_login(self, client):
        """普通演示账号可不带密码登录"""
        response = client.post("/api/v1/auth/login", json={"email": "user@example.com"})
        assert response.status_code == 200
        assert response.json()["data"]["user"]["role"] == "user"

    def test_admin_requires_password(self, client):
        for body in ({"email": "admin@example.com"}, {"email": "admin@example.com", "password": ""}):
            response = client.post("/api/v1/auth/login", json=body)
            assert response.status_code == 401
            assert response.json()["error_code"] == "AUTHENTICATION_FAILED"

    def test_registered_user_requires_password(self, client):
        client.post(
            "/api/v1/auth/register",
            json={"name": "Efua Boateng", "email": "efua@example.com", "password": "s3cret!"}
        )

        response = client.post("/api/v1/auth/login", json={"email": "efua@example.com", "password": ""})
        assert response.status_code == 401
        response = client.post("/api/v1/auth/login", json={"email": "efua@example.com"})
        assert response.status_code == 401

        response = client.post("/api/v1/auth/login", json={"email": "efua@example.com", "password": "s3cret!"})
        assert response.status_code == 200

    def test_register_then_duplicate(self, client):
        response = client.post(
            "/api/v1/auth/register",
            json={"name": "Ama Owusu", "email": "ama@example.com"}
        )
        assert response.status_code == 200
        assert response.json()["data"]["user"]["role"] == "user"

        # 默认密码
        login = client.post("/api/v1/auth/login", json={"email": "ama@example.com", "password": "123456"})
        assert login.status_code == 200

        duplicate = client.post(
            "/api/v1/auth/register",
            json={"name": "Ama Again", "email": "AMA@example.com"}
        )
        assert duplicate.status_code == 409
        assert duplicate.json()["error_code"] == "DUPLICATE_EMAIL"

    def test_email_exists(self, client):
        response = client.get("/api/v1/auth/email-exists", params={"email": "admin@example.com"})
        assert response.json()["data"]["exists"] is True

        response = client.get("/api/v1/auth/email-exists", params={"email": "new@example.com"})
        assert response.json()["data"]["exists"] is False

    def test_logout_revokes_token(self, client, user_headers):
        assert client.get("/api/v1/users/me", headers=user_headers).status_code == 200

        response = client.post("/api/v1/auth/logout", headers=user_headers)
        assert response.status_code == 200

        response = client.get("/api/v1/users/me", headers=user_headers)
        assert response.status_code == 401
        assert response.json()["error_code"] == "AUTHENTICATION_REQUIRED"

    def test_missing_token(self, client):
        response = client.get("/api/v1/users/me")
        assert response.status_code == 401

    def test_invalid_token(self, client):
        response = client.get("/api/v1/cart", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401
