"""
预约、评价与管理后台API集成测试
"""


class TestAppointmentsAPI:

    def test_services(self, client):
        services = client.get("/api/v1/appointments/services").json()["data"]
        assert [s["id"] for s in services] == ["s1", "s2", "s3"]

    def test_book_and_confirm(self, client, user_headers, admin_headers):
        response = client.post(
            "/api/v1/appointments",
            json={"service_id": "s3", "date": "2026-11-10", "time": "09:30", "notes": "Goal: -5kg"},
            headers=user_headers
        )
        assert response.status_code == 200
        appointment = response.json()["data"]
        assert appointment["status"] == "Pending"
        assert appointment["service_name"] == "Weight Management Program"

        mine = client.get("/api/v1/appointments/mine", headers=user_headers).json()["data"]
        assert len(mine) == 1

        response = client.patch(
            f"/api/v1/appointments/{appointment['id']}/status",
            json={"status": "Confirmed"},
            headers=admin_headers
        )
        assert response.json()["data"]["status"] == "Confirmed"
        assert len(response.json()["data"]["history"]) == 2

    def test_bad_date_format(self, client, user_headers):
        response = client.post(
            "/api/v1/appointments",
            json={"service_id": "s1", "date": "10/11/2026", "time": "09:30"},
            headers=user_headers
        )
        assert response.status_code == 422

    def test_list_requires_admin(self, client, user_headers):
        assert client.get("/api/v1/appointments", headers=user_headers).status_code == 403


class TestStoriesAPI:

    def test_submit_approve_delete(self, client, user_headers, admin_headers):
        public_before = len(client.get("/api/v1/stories").json()["data"])

        response = client.post(
            "/api/v1/stories",
            json={"content": "The weekly plan changed my mornings.", "rating": 5},
            headers=user_headers
        )
        story = response.json()["data"]
        assert story["approved"] is False
        assert len(client.get("/api/v1/stories").json()["data"]) == public_before

        all_stories = client.get("/api/v1/stories/all", headers=admin_headers).json()["data"]
        assert story["id"] in [s["id"] for s in all_stories]

        response = client.post(f"/api/v1/stories/{story['id']}/approve", headers=admin_headers)
        assert response.json()["data"]["approved"] is True
        assert len(client.get("/api/v1/stories").json()["data"]) == public_before + 1

        assert client.delete(f"/api/v1/stories/{story['id']}", headers=admin_headers).status_code == 200
        assert story["id"] not in [s["id"] for s in client.get("/api/v1/stories").json()["data"]]
        all_stories = client.get("/api/v1/stories/all", headers=admin_headers).json()["data"]
        assert story["id"] not in [s["id"] for s in all_stories]
        assert client.delete(f"/api/v1/stories/{story['id']}", headers=admin_headers).status_code == 404

    def test_rating_out_of_range(self, client, user_headers):
        response = client.post("/api/v1/stories", json={"content": "Meh", "rating": 6}, headers=user_headers)
        assert response.status_code == 422

    def test_top(self, client):
        top = client.get("/api/v1/stories/top").json()["data"]
        assert len(top) == 3
        assert top[0]["rating"] == 5


class TestAdminOverviewAPI:

    def test_overview(self, client, user_headers, admin_headers):
        meals = client.get("/api/v1/meals").json()["data"]
        meal_id = next(m["id"] for m in meals if m["name"] == "Kontomire Veggie Stew")
        client.post("/api/v1/cart/items", json={"meal_id": meal_id}, headers=user_headers)
        client.post(
            "/api/v1/orders/checkout",
            json={"shipping_address": "Accra",
                  "payment": {"method": "momo", "momo_network": "Telecel", "momo_number": "0201234567"}},
            headers=user_headers
        )
        client.post("/api/v1/appointments",
                    json={"service_id": "s1", "date": "2026-11-02", "time": "10:00"},
                    headers=user_headers)
        client.post("/api/v1/stories", json={"content": "Great!", "rating": 4}, headers=user_headers)

        response = client.get("/api/v1/admin/overview", headers=admin_headers)
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["total_revenue"] == 9.0
        assert data["pending_orders"] == 1
        assert data["pending_appointments"] == 1
        assert data["meal_count"] == 4
        assert data["stories_awaiting_approval"] == 1
        assert len(data["recent_orders"]) == 1
        assert data["recent_orders"][0]["payment_method"] == "Telecel MoMo (0201234567)"

    def test_overview_requires_admin(self, client, user_headers):
        assert client.get("/api/v1/admin/overview", headers=user_headers).status_code == 403


class TestHealthAPI:

    def test_health(self, client):
        response = client.get("/health")
        assert response.json()["status"] == "healthy"

    def test_root(self, client):
        assert client.get("/").json()["name"] == "The Dietitian API"
