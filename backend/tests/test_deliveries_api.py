"""End-to-end tests for the /api/deliveries routes."""

import pytest


def create(client, **fields):
    response = client.post("/api/deliveries", json=fields)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateDelivery:
    def test_create_returns_201_with_location_and_alert(self, client):
        response = client.post("/api/deliveries", json={"address": "1 Main St", "parcels": 3})

        assert response.status_code == 201
        body = response.json()
        assert body["id"]
        assert body["address"] == "1 Main St"
        assert body["parcels"] == 3
        assert response.headers["location"] == f"/api/deliveries/{body['id']}"
        assert response.headers["x-crownapp-alert"] == "crownApp.delivery.created"
        assert response.headers["x-crownapp-params"] == body["id"]

    def test_create_with_id_is_rejected(self, client):
        response = client.post("/api/deliveries", json={"id": "abc", "address": "1 Main St"})

        assert response.status_code == 400
        assert response.headers["x-crownapp-error"] == "error.idexists"
        assert response.headers["x-crownapp-params"] == "delivery"
        problem = response.json()
        assert problem["title"] == "A new delivery cannot already have an ID"
        assert problem["message"] == "error.idexists"
        assert problem["entityName"] == "delivery"
        assert problem["errorKey"] == "idexists"
        assert problem["status"] == 400
        assert client.get("/api/deliveries").headers["x-total-count"] == "0"

    def test_null_id_counts_as_absent(self, client):
        response = client.post("/api/deliveries", json={"id": None, "address": "1 Main St"})

        assert response.status_code == 201

    def test_non_string_id_is_unprocessable(self, client):
        response = client.post("/api/deliveries", json={"id": 12, "address": "1 Main St"})

        assert response.status_code == 422


class TestUpdateDelivery:
    def test_update_replaces_delivery(self, client):
        created = create(client, address="1 Main St", note="fragile")

        response = client.put("/api/deliveries", json={"id": created["id"], "address": "2 High St"})

        assert response.status_code == 200
        assert response.json() == {"id": created["id"], "address": "2 High St"}
        assert response.headers["x-crownapp-alert"] == "crownApp.delivery.updated"
        assert response.headers["x-crownapp-params"] == created["id"]
        assert client.get(f"/api/deliveries/{created['id']}").json() == {"id": created["id"], "address": "2 High St"}

    def test_update_without_id_is_rejected(self, client):
        response = client.put("/api/deliveries", json={"address": "2 High St"})

        assert response.status_code == 400
        assert response.headers["x-crownapp-error"] == "error.idnull"
        assert response.json()["title"] == "Invalid id"
        assert client.get("/api/deliveries").headers["x-total-count"] == "0"


class TestListDeliveries:
    def test_list_pages_with_headers(self, client):
        ids = [create(client, n=n)["id"] for n in range(5)]

        response = client.get("/api/deliveries", params={"page": 0, "size": 2})

        assert response.status_code == 200
        body = response.json()
        assert len(body) == 2
        assert {d["id"] for d in body} <= set(ids)
        assert response.headers["x-total-count"] == "5"
        link = response.headers["link"]
        assert 'rel="next"' in link
        assert 'rel="prev"' not in link
        assert "page=2&size=2>; rel=\"last\"" in link

    def test_list_walks_all_pages_without_overlap(self, client):
        ids = {create(client, n=n)["id"] for n in range(5)}

        seen = []
        for page in range(3):
            seen.extend(d["id"] for d in client.get("/api/deliveries", params={"page": page, "size": 2}).json())

        assert len(seen) == 5
        assert set(seen) == ids

    def test_list_sorted_by_id_descending(self, client):
        ids = [create(client)["id"] for _ in range(3)]

        body = client.get("/api/deliveries", params={"sort": "id,desc"}).json()

        assert [d["id"] for d in body] == sorted(ids, reverse=True)

    def test_list_defaults(self, client):
        response = client.get("/api/deliveries")

        assert response.status_code == 200
        assert response.json() == []
        assert response.headers["x-total-count"] == "0"
        assert "page=0&size=20" in response.headers["link"]

    @pytest.mark.parametrize("params", [{"page": -1}, {"size": 0}, {"size": 2001}, {"page": "x"}])
    def test_invalid_paging_params(self, client, params):
        assert client.get("/api/deliveries", params=params).status_code == 422


class TestGetDelivery:
    def test_get_existing(self, client):
        created = create(client, address="1 Main St")

        response = client.get(f"/api/deliveries/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing_is_404_with_empty_body(self, client):
        response = client.get("/api/deliveries/does-not-exist")

        assert response.status_code == 404
        assert response.content == b""


class TestDeleteDelivery:
    def test_delete_then_get_is_404(self, client):
        created = create(client)

        response = client.delete(f"/api/deliveries/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert response.headers["x-crownapp-alert"] == "crownApp.delivery.deleted"
        assert response.headers["x-crownapp-params"] == created["id"]
        assert client.get(f"/api/deliveries/{created['id']}").status_code == 404

    def test_delete_is_idempotent(self, client):
        assert client.delete("/api/deliveries/ghost").status_code == 204
        assert client.delete("/api/deliveries/ghost").status_code == 204


class TestErrorHandling:
    def test_storage_failure_is_500(self, client, db_session, monkeypatch):
        from sqlalchemy.exc import SQLAlchemyError

        def broken_commit():
            raise SQLAlchemyError("database is locked")

        monkeypatch.setattr(db_session, "commit", broken_commit)

        response = client.post("/api/deliveries", json={"address": "1 Main St"})

        assert response.status_code == 500
        assert response.json()["detail"].startswith("Database operation failed")


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_request_id_is_echoed(client):
    response = client.get("/api/health", headers={"X-Request-ID": "req-42"})

    assert response.headers["x-request-id"] == "req-42"


class TestEmptyStringId:
    def test_update_with_empty_id_replaces_under_that_id(self, client):
        first = client.put("/api/deliveries", json={"id": "", "address": "1 Main St"})
        second = client.put("/api/deliveries", json={"id": "", "address": "2 High St"})

        assert first.status_code == second.status_code == 200
        assert second.json() == {"id": "", "address": "2 High St"}
        assert second.headers["x-crownapp-params"] == ""
        assert client.get("/api/deliveries").headers["x-total-count"] == "1"

    def test_create_with_empty_id_is_rejected(self, client):
        response = client.post("/api/deliveries", json={"id": "", "address": "1 Main St"})

        assert response.status_code == 400
        assert response.headers["x-crownapp-error"] == "error.idexists"
