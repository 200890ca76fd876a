import pytest


def test_scan_returns_stored_result(client):
    response = client.post("/api/scan", json={"url": "https://example.com", "scanType": "quick"})
    assert response.status_code == 200

    data = response.json()
    assert isinstance(data["id"], int) and data["id"] > 0
    assert data["url"] == "https://example.com"
    assert data["scanType"] == "quick"
    assert 60 <= data["score"] <= 100
    assert len(data["issues"]) == 2
    assert data["issues"][0]["wcagReference"] == "1.1.1"
    assert len(data["recommendations"]) == 2
    assert data["ipAddress"]
    assert "createdAt" in data


@pytest.mark.parametrize(
    "score,level",
    [(95, "AA Compliant"), (75, "AA Partial"), (65, "A Partial")],
)
def test_scan_level_matches_pinned_score(client, fixed_score, score, level):
    fixed_score(score)

    response = client.post("/api/scan", json={"url": "https://example.com", "scanType": "full"})

    assert response.status_code == 200
    assert response.json()["score"] == score
    assert response.json()["wcagLevel"] == level


def test_get_scan_result_matches_creation(client):
    created = client.post("/api/scan", json={"url": "https://example.org/page", "scanType": "quick"}).json()

    response = client.get(f"/api/scan-results/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created
    # Reads do not mutate
    assert client.get(f"/api/scan-results/{created['id']}").json() == created


def test_scan_results_in_creation_order(client):
    urls = ["https://one.example", "https://two.example", "https://three.example"]
    ids = [client.post("/api/scan", json={"url": url, "scanType": "quick"}).json()["id"] for url in urls]

    response = client.get("/api/scan-results")

    assert response.status_code == 200
    assert [scan["id"] for scan in response.json()] == ids
    assert [scan["url"] for scan in response.json()] == urls
    assert ids == sorted(ids)


def test_scan_result_not_found(client):
    response = client.get("/api/scan-results/9999")
    assert response.status_code == 404
    assert response.json() == {"message": "Scan result not found"}


@pytest.mark.parametrize(
    "body",
    [{}, {"url": "https://example.com"}, {"scanType": "quick"}, {"url": "", "scanType": "quick"}],
)
def test_scan_missing_fields(client, body):
    response = client.post("/api/scan", json=body)
    assert response.status_code == 400
    assert response.json() == {"message": "URL and scan type are required"}


def test_scan_rejects_relative_url(client):
    response = client.post("/api/scan", json={"url": "example.com", "scanType": "quick"})
    assert response.status_code == 400
    assert "valid website URL" in response.json()["message"]
    assert client.get("/api/scan-results").json() == []


def test_scan_records_forwarded_ip(client):
    response = client.post(
        "/api/scan",
        json={"url": "https://example.com", "scanType": "quick"},
        headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1"},
    )
    assert response.json()["ipAddress"] == "203.0.113.7"


def test_scan_storage_failure_is_500(client, monkeypatch):
    async def broken(*args, **kwargs):
        raise RuntimeError("storage unavailable")

    monkeypatch.setattr(client.app.state.store, "create_scan", broken)

    response = client.post("/api/scan", json={"url": "https://example.com", "scanType": "quick"})

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to perform accessibility scan"}


def test_scan_result_id_beyond_column_range(client):
    response = client.get("/api/scan-results/99999999999999999999")
    assert response.status_code == 404
    assert response.json() == {"message": "Scan result not found"}
