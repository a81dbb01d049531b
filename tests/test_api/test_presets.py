"""Tests for presets API endpoints."""


class TestPresets:
    """Tests for /api/presets endpoints."""

    def test_list_includes_built_ins(self, client):
        response = client.get("/api/presets")
        assert response.status_code == 200

        ids = {preset["id"] for preset in response.json() if preset["isBuiltIn"]}
        assert ids == {"delayed_deliveries", "open_bookings", "oslo_pickups"}

    def test_list_without_built_ins(self, client):
        response = client.get("/api/presets", params={"include_built_in": False})
        assert response.json() == []

    def test_create_get_delete(self, client):
        response = client.post(
            "/api/presets",
            json={"name": "Oslo bookings", "filters": {"search": "Oslo", "statuses": ["Booked"]}},
        )
        assert response.status_code == 201
        preset = response.json()
        assert preset["isBuiltIn"] is False
        assert preset["filters"]["statuses"] == ["Booked"]
        assert preset["filters"]["search"] == "Oslo"

        response = client.get(f"/api/presets/{preset['id']}")
        assert response.status_code == 200
        assert response.json()["name"] == "Oslo bookings"

        response = client.delete(f"/api/presets/{preset['id']}")
        assert response.status_code == 204

        response = client.get(f"/api/presets/{preset['id']}")
        assert response.status_code == 404

    def test_duplicate_names_allowed(self, client):
        first = client.post("/api/presets", json={"name": "Same"}).json()
        second = client.post("/api/presets", json={"name": "Same"}).json()
        assert first["id"] != second["id"]

    def test_cannot_delete_built_in(self, client):
        response = client.delete("/api/presets/open_bookings")
        assert response.status_code == 403

    def test_delete_unknown(self, client):
        response = client.delete("/api/presets/missing")
        assert response.status_code == 404

    def test_invalid_filters(self, client):
        response = client.post("/api/presets", json={"name": "Bad", "filters": {"price_range": ["cheap", None]}})
        assert response.status_code == 400
