"""
餐品目录API集成测试
"""


def _meal_id(client, name):
    meals = client.get("/api/v1/meals").json()["data"]
    return next(m["id"] for m in meals if m["name"] == name)


class TestMealsAPI:
    """餐品API测试"""

    def test_list_all(self, client):
        response = client.get("/api/v1/meals")
        assert response.status_code == 200
        assert len(response.json()["data"]) == 4

        response = client.get("/api/v1/meals", params={"category": "All"})
        assert len(response.json()["data"]) == 4

    def test_filter_by_category(self, client):
        response = client.get("/api/v1/meals", params={"category": "Premium"})
        names = [m["name"] for m in response.json()["data"]]
        assert names == ["Paleo Beef Suya Salad"]

    def test_unknown_category(self, client):
        response = client.get("/api/v1/meals", params={"category": "Gold"})
        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_get_missing_meal(self, client):
        response = client.get("/api/v1/meals/9999")
        assert response.status_code == 404
        assert response.json()["error_code"] == "MEAL_NOT_FOUND"

    def test_quote(self, client):
        meal_id = _meal_id(client, "Grilled Chicken Jollof Bowl")
        response = client.post(
            f"/api/v1/meals/{meal_id}/quote",
            params={"currency": "USD"},
            json={"portion": "Large", "frequency": "Weekly", "add_ons": ["Extra Chicken"]}
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert abs(data["unit_price"] - 18.9) < 1e-9
        assert data["formatted_price"] == "$ 18.90"

    def test_quote_in_cedis(self, client):
        meal_id = _meal_id(client, "Grilled Chicken Jollof Bowl")
        response = client.post(f"/api/v1/meals/{meal_id}/quote", json={})
        assert response.json()["data"]["formatted_price"] == "₵ 180.00"


class TestMealAdminAPI:
    """餐品管理（管理员）"""

    def test_user_cannot_create(self, client, user_headers):
        response = client.post(
            "/api/v1/meals",
            json={"name": "Waakye Bowl", "price": 8, "category": "Regular"},
            headers=user_headers
        )
        assert response.status_code == 403
        assert response.json()["error_code"] == "ADMIN_REQUIRED"

    def test_create_update_delete(self, client, admin_headers):
        response = client.post(
            "/api/v1/meals",
            json={
                "name": "Waakye Bowl",
                "price": 8,
                "category": "Regular",
                "tags": ["Balanced"],
                "ingredients": "rice, beans, egg",
                "available_add_ons": [{"name": "Wele", "price": 1}],
            },
            headers=admin_headers
        )
        assert response.status_code == 200
        meal = response.json()["data"]
        assert meal["in_stock"] is True
        assert meal["ingredients"] == ["rice", "beans", "egg"]
        assert meal["calories"] == 0

        response = client.patch(f"/api/v1/meals/{meal['id']}", json={"price": 9.5}, headers=admin_headers)
        assert response.json()["data"]["price"] == 9.5
        assert response.json()["data"]["name"] == "Waakye Bowl"

        response = client.delete(f"/api/v1/meals/{meal['id']}", headers=admin_headers)
        assert response.status_code == 200
        assert client.get(f"/api/v1/meals/{meal['id']}").status_code == 404

    def test_invalid_meal_rejected(self, client, admin_headers):
        response = client.post(
            "/api/v1/meals",
            json={"name": "Free Lunch", "price": 0, "category": "Regular"},
            headers=admin_headers
        )
        assert response.status_code == 422

    def test_toggle_stock_blocks_cart(self, client, admin_headers, user_headers):
        meal_id = _meal_id(client, "Keto Tilapia Plate")

        response = client.post(f"/api/v1/meals/{meal_id}/toggle-stock", headers=admin_headers)
        assert response.json()["data"]["in_stock"] is False

        response = client.post("/api/v1/cart/items", json={"meal_id": meal_id}, headers=user_headers)
        assert response.status_code == 400
        assert response.json()["error_code"] == "MEAL_OUT_OF_STOCK"

        response = client.post(f"/api/v1/meals/{meal_id}/toggle-stock", headers=admin_headers)
        assert response.json()["data"]["in_stock"] is True
