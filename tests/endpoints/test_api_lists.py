"""
목록 리소스 API 테스트 (할 일, 위시 항목, 루틴, 기능 요청)
"""


def _create(client, resource, body):
    response = client.post(f"/api/{resource}", json=body)
    assert response.status_code == 201
    return response.json()


def test_health(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_create_assigns_increasing_sort_order(client):
    orders = [_create(client, "todos", {"title": t})["sort_order"] for t in ("a", "b", "c")]

    assert orders == [1, 2, 3]
    assert [t["title"] for t in client.get("/api/todos").json()] == ["a", "b", "c"]


def test_create_fills_defaults(client):
    todo = _create(client, "todos", {"title": "a"})
    request = _create(client, "feature-requests", {"title": "dark mode"})

    assert todo["done"] is False
    assert todo["due_date"] is None
    assert request["status"] == "pending"
    assert request["description"] == ""


def test_patch_omitted_vs_null(client):
    item = _create(client, "wish-items", {"title": "camera", "price": 50000, "memo": "used"})

    response = client.patch(f"/api/wish-items/{item['id']}", json={"price": None})
    assert response.status_code == 200
    body = response.json()

    assert body["price"] is None
    assert body["memo"] == "used"
    assert body["title"] == "camera"


def test_patch_missing_is_404(client):
    response = client.patch("/api/todos/999", json={"title": "x"})
    assert response.status_code == 404


def test_delete_is_idempotent(client):
    todo = _create(client, "todos", {"title": "a"})

    assert client.delete(f"/api/todos/{todo['id']}").status_code == 204
    assert client.delete(f"/api/todos/{todo['id']}").status_code == 204
    assert client.get("/api/todos").json() == []


def test_reorder(client):
    a = _create(client, "todos", {"title": "a"})
    b = _create(client, "todos", {"title": "b"})

    response = client.post("/api/todos/reorder", json={"orders": [
        {"id": a["id"], "sort_order": 2},
        {"id": b["id"], "sort_order": 1},
    ]})

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert [t["title"] for t in client.get("/api/todos").json()] == ["b", "a"]


def test_reorder_unknown_id_changes_nothing(client):
    a = _create(client, "todos", {"title": "a"})
    b = _create(client, "todos", {"title": "b"})

    response = client.post("/api/todos/reorder", json={"orders": [
        {"id": a["id"], "sort_order": 5},
        {"id": 999, "sort_order": 1},
        {"id": b["id"], "sort_order": 0},
    ]})

    assert response.status_code == 404
    assert [(t["title"], t["sort_order"]) for t in client.get("/api/todos").json()] == [("a", 1), ("b", 2)]


def test_wish_items_filter_by_type(client):
    _create(client, "wish-items", {"title": "camera"})
    bucket = _create(client, "wish-items", {"title": "aurora", "list_type": "bucket"})

    assert bucket["sort_order"] == 1
    assert [i["title"] for i in client.get("/api/wish-items").json()] == ["camera"]
    assert [i["title"] for i in client.get("/api/wish-items", params={"type": "bucket"}).json()] == ["aurora"]


def test_routines_filter_by_day(client):
    _create(client, "routines", {"name": "gym", "day_of_week": "1,3"})
    _create(client, "routines", {"name": "sauna", "day_of_week": "0"})

    names = [r["name"] for r in client.get("/api/routines", params={"day": 3}).json()]

    assert names == ["gym"]
    assert client.get("/api/routines", params={"day": 7}).status_code == 422


def test_invalid_body_is_422(client):
    response = client.post("/api/todos", json={"done": True})
    assert response.status_code == 422
