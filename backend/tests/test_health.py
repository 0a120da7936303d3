def test_health_endpoints(client):
    live = client.get("/api/health/live")
    assert live.status_code == 200
    assert live.json()["status"] == "ok"

    ready = client.get("/api/health/ready")
    assert ready.status_code in {200, 503}
    payload = ready.json()
    assert "database" in payload
    assert "missing_tables" in payload["database"]


def test_security_headers_are_set(client):
    response = client.get("/api/health")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


def test_report_responses_are_not_cached(client):
    response = client.get("/api/reports/schedule", params={"termId": "t1", "departmentId": "d1"})
    assert response.status_code == 200
    assert response.headers["Cache-Control"] == "no-store"

    assert "Cache-Control" not in client.get("/api/health").headers


def test_oversized_write_body_is_rejected(client):
    response = client.post(
        "/api/versions/v1/status",
        json={"status": "x" * 70_000},
        headers={"X-User-Id": "admin"},
    )
    assert response.status_code == 413
    assert response.json()["details"]["max_bytes"] == 64_000
