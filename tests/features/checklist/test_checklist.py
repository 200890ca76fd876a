def test_full_catalog(client):
    response = client.get("/api/checklist")
    assert response.status_code == 200

    items = response.json()
    assert len(items) == 7
    categories = [item["category"] for item in items]
    assert categories.count("vision") == 4
    assert categories.count("hearing") == 1
    assert categories.count("motor") == 1
    assert categories.count("cognitive") == 1
    assert all(item["isCompleted"] is False for item in items)


def test_filter_by_category(client):
    response = client.get("/api/checklist", params={"category": "vision"})

    assert response.status_code == 200
    items = response.json()
    assert len(items) == 4
    assert {item["category"] for item in items} == {"vision"}


def test_unknown_category_is_empty(client):
    response = client.get("/api/checklist", params={"category": "smell"})
    assert response.status_code == 200
    assert response.json() == []


def test_category_match_is_exact(client):
    assert client.get("/api/checklist", params={"category": "Vision"}).json() == []


def test_toggle_round_trip(client):
    original = client.get("/api/checklist").json()[0]

    done = client.patch(f"/api/checklist/{original['id']}", json={"isCompleted": True})
    assert done.status_code == 200
    assert done.json()["isCompleted"] is True
    assert done.json()["id"] == original["id"]
    assert done.json()["category"] == original["category"]

    undone = client.patch(f"/api/checklist/{original['id']}", json={"isCompleted": False})
    assert undone.status_code == 200
    assert undone.json() == original

    # Other items untouched
    assert client.get("/api/checklist").json()[0] == original


def test_toggle_persists(client):
    item_id = client.get("/api/checklist", params={"category": "motor"}).json()[0]["id"]
    client.patch(f"/api/checklist/{item_id}", json={"isCompleted": True})

    item = client.get("/api/checklist", params={"category": "motor"}).json()[0]
    assert item["isCompleted"] is True


def test_toggle_requires_boolean(client):
    item_id = client.get("/api/checklist").json()[0]["id"]

    for body in ({"isCompleted": "true"}, {"isCompleted": 1}, {}, {"isCompleted": None}):
        response = client.patch(f"/api/checklist/{item_id}", json=body)
        assert response.status_code == 400, body
        assert "message" in response.json()

    assert client.get("/api/checklist").json()[0]["isCompleted"] is False


def test_toggle_unknown_item(client):
    response = client.patch("/api/checklist/999", json={"isCompleted": True})
    assert response.status_code == 404
    assert response.json() == {"message": "Checklist item not found"}


def test_toggle_id_beyond_column_range(client):
    response = client.patch("/api/checklist/99999999999999999999", json={"isCompleted": True})
    assert response.status_code == 404
    assert response.json() == {"message": "Checklist item not found"}
