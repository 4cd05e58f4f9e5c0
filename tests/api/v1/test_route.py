import complaint_tracker.api.v1.route as v1_router_module
from complaint_tracker.service.complaint.errors import StorageError

PAYLOAD = {
    "title": "Defective part",
    "description": "Cracked casing",
    "customer_email": "a@b.com",
}


def _post(client, **overrides):
    response = client.post("/api/v1/complaints", json={**PAYLOAD, **overrides})
    assert response.status_code == 201
    return response.json()


def test_healthcheck(client):
    response = client.get("/api/v1/healthcheck")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["timestamp"]


def test_create_complaint_endpoint(client):
    body = _post(client)

    assert body["id"] > 0
    assert body["status"] == "new"
    assert body["customer_email"] == "a@b.com"
    assert body["created_at"] == body["updated_at"]
    assert set(body) == {
        "id",
        "title",
        "description",
        "customer_email",
        "status",
        "created_at",
        "updated_at",
    }


def test_create_complaint_ignores_smuggled_status(client):
    body = _post(client, status="resolved")

    assert body["status"] == "new"


def test_create_complaint_validation_error_check(client):
    assert client.post("/api/v1/complaints", json={**PAYLOAD, "title": ""}).status_code == 422
    assert client.post("/api/v1/complaints", json={**PAYLOAD, "customer_email": "nope"}).status_code == 422
    assert client.post("/api/v1/complaints", json={"title": "only title"}).status_code == 422
    assert client.get("/api/v1/complaints").json() == []


def test_complaint_lifecycle_over_http(client):
    created = _post(client)

    response = client.patch(f"/api/v1/complaints/{created['id']}/status", json={"status": "resolved"})

    assert response.status_code == 200
    updated = response.json()
    assert updated["id"] == created["id"]
    assert updated["status"] == "resolved"
    assert updated["created_at"] == created["created_at"]

    fetched = client.get(f"/api/v1/complaints/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == updated


def test_get_missing_complaint_returns_null(client):
    response = client.get("/api/v1/complaints/99999")

    assert response.status_code == 200
    assert response.json() is None


def test_get_complaint_rejects_non_positive_id(client):
    assert client.get("/api/v1/complaints/0").status_code == 422


def test_out_of_range_id_is_missing_not_a_crash(client):
    fetched = client.get("/api/v1/complaints/99999999999999999999")
    updated = client.patch("/api/v1/complaints/99999999999999999999/status", json={"status": "resolved"})

    assert fetched.status_code == 200
    assert fetched.json() is None
    assert updated.status_code == 404


def test_update_missing_complaint_returns_404(client):
    response = client.patch("/api/v1/complaints/99999/status", json={"status": "resolved"})

    assert response.status_code == 404
    assert "99999" in response.json()["detail"]


def test_update_with_unknown_status_returns_422(client):
    created = _post(client)

    response = client.patch(f"/api/v1/complaints/{created['id']}/status", json={"status": "closed"})

    assert response.status_code == 422


def test_complaints_by_email_endpoint(client):
    ids = [_post(client, customer_email="x@y.com", title=f"Complaint {n}")["id"] for n in range(3)]
    _post(client, customer_email="X@y.com")

    response = client.get("/api/v1/complaints/by-email", params={"customer_email": "x@y.com"})

    assert response.status_code == 200
    body = response.json()
    assert len(body) == 3
    assert [c["id"] for c in body] == sorted(ids, reverse=True)


def test_complaints_by_email_rejects_malformed_email(client):
    response = client.get("/api/v1/complaints/by-email", params={"customer_email": "nope"})

    assert response.status_code == 422


def test_list_complaints_with_filters(client):
    first = _post(client, title="Burnt capacitor")
    second = _post(client, title="Loose connector", customer_email="bea@parts.com")
    client.patch(f"/api/v1/complaints/{second['id']}/status", json={"status": "in_progress"})

    everything = client.get("/api/v1/complaints").json()
    by_search = client.get("/api/v1/complaints", params={"search": "CAPACITOR"}).json()
    by_status = client.get("/api/v1/complaints", params={"status": "in_progress"}).json()

    assert [c["id"] for c in everything] == [second["id"], first["id"]]
    assert [c["id"] for c in by_search] == [first["id"]]
    assert [c["id"] for c in by_status] == [second["id"]]


def test_complaint_stats_endpoint(client):
    created = _post(client)
    _post(client)
    client.patch(f"/api/v1/complaints/{created['id']}/status", json={"status": "rejected"})

    response = client.get("/api/v1/complaints/stats")

    assert response.status_code == 200
    assert response.json() == {
        "total": 2,
        "new": 1,
        "in_progress": 0,
        "pending_user_info": 0,
        "resolved": 0,
        "rejected": 1,
    }


def test_storage_failure_returns_503(client, monkeypatch):
    def broken_get_all():
        raise StorageError("connection refused")

    monkeypatch.setattr(v1_router_module, "get_all_complaints", broken_get_all)

    response = client.get("/api/v1/complaints")

    assert response.status_code == 503
    assert response.json() == {"detail": "complaint store unavailable"}
