"""Tests for orders API endpoints."""

import json

from orderbrowser.api.services import reset_services
from orderbrowser.listview.engine import filtered_orders, page_of, sorted_orders


class TestListOrders:
    """Tests for GET /api/orders endpoint."""

    def test_default_page(self, client):
        response = client.get("/api/orders")
        assert response.status_code == 200

        data = response.json()
        assert len(data["orders"]) == 10
        assert data["pagination"]["page"] == 0
        assert data["pagination"]["total"] == 64
        assert data["pagination"]["total_pages"] == 7
        assert data["pagination"]["display_range"] == "Showing 1–10 of 64 results"
        assert data["chips"] == []

    def test_status_filter(self, client):
        response = client.get("/api/orders", params={"statuses": "Booked,Closed", "page_size": 100})
        assert response.status_code == 200

        data = response.json()
        assert {order["status"] for order in data["orders"]} == {"Booked", "Closed"}
        assert [chip["label"] for chip in data["chips"]] == ["Status: Booked", "Status: Closed"]

    def test_price_filter_and_sort(self, client):
        response = client.get("/api/orders", params={"price_max": 400, "sort": "price:desc"})
        assert response.status_code == 200

        data = response.json()
        assert [order["ref"] for order in data["orders"]] == ["QE50", "AA23", "TS49"]
        assert data["chips"][0]["label"] == "Max 400 NOK"
        assert data["sort"] == "price:desc"

    def test_search(self, client):
        response = client.get("/api/orders", params={"search": "qh29"})
        data = response.json()
        assert [order["ref"] for order in data["orders"]] == ["QH29"]

    def test_custom_date_range(self, client):
        response = client.get("/api/orders", params={"date_from": "2020-07-01", "date_to": "2020-07-03"})
        data = response.json()
        assert [order["ref"] for order in data["orders"]] == ["GEN01", "GEN02", "GEN03"]
        assert data["chips"][0]["label"] == "Date: Custom"

    def test_page_clamped(self, client):
        response = client.get("/api/orders", params={"page": 99})
        data = response.json()
        assert data["pagination"]["page"] == 6
        assert len(data["orders"]) == 4

    def test_negative_page_clamped_to_first(self, client):
        response = client.get("/api/orders", params={"page": -1})
        assert response.status_code == 200

        data = response.json()
        assert data["pagination"]["page"] == 0
        assert data["orders"][0]["ref"] == client.get("/api/orders").json()["orders"][0]["ref"]

    def test_invalid_page_size(self, client):
        response = client.get("/api/orders", params={"page_size": 0})
        assert response.status_code == 422

    def test_invalid_sort(self, client):
        response = client.get("/api/orders", params={"sort": "colour"})
        assert response.status_code == 400

    def test_invalid_date_preset(self, client):
        response = client.get("/api/orders", params={"date_preset": "Custom"})
        assert response.status_code == 400


class TestGetOrder:
    """Tests for GET /api/orders/{ref} endpoint."""

    def test_get_order(self, client):
        response = client.get("/api/orders/QH29")
        assert response.status_code == 200

        data = response.json()
        assert data["customer"] == "Peter Kristiansen"
        assert data["createdBy"] == "Camilla"

    def test_unknown_order(self, client):
        response = client.get("/api/orders/NOPE")
        assert response.status_code == 404


class TestOptions:
    """Tests for GET /api/orders/options endpoint."""

    def test_options(self, client):
        response = client.get("/api/orders/options")
        assert response.status_code == 200

        data = response.json()
        assert data["page_size_options"] == [10, 20, 50, 100]
        assert "Booked" in data["statuses"]
        assert data["date_presets"] == ["Today", "Last 7", "This month", "Custom"]


class TestExport:
    """Tests for GET /api/orders/export endpoint."""

    def test_export_csv(self, client):
        response = client.get("/api/orders/export", params={"format": "csv", "price_max": 400})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "orders.csv" in response.headers["content-disposition"]

        lines = response.text.strip().split("\n")
        assert lines[0].startswith("ref,created,customer")
        assert len(lines) == 4

    def test_export_selected_refs_in_sorted_order(self, client):
        response = client.get(
            "/api/orders/export",
            params={"format": "json", "refs": "VB58,TS49", "sort": "price"},
        )
        assert response.status_code == 200
        assert [record["ref"] for record in json.loads(response.text)] == ["TS49", "VB58"]

    def test_export_xlsx(self, client):
        response = client.get("/api/orders/export", params={"format": "xlsx"})
        assert response.status_code == 200
        assert response.content[:2] == b"PK"

    def test_unsupported_format(self, client):
        response = client.get("/api/orders/export", params={"format": "pdf"})
        assert response.status_code == 400


class TestHealth:
    """Tests for GET /health endpoint."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["total_orders"] == 64


class TestServices:
    """Tests for service reset."""

    def test_reset_drops_memoized_views(self, client):
        """Test resetting services releases stores held by the view caches."""
        client.get("/api/orders", params={"sort": "price"})
        assert page_of.cache_info().currsize > 0

        reset_services()

        for stage in (filtered_orders, sorted_orders, page_of):
            assert stage.cache_info().currsize == 0
