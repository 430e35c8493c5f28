"""
목표 API 테스트
"""


def _create(client, title, start, end, parent_id=None, **extra):
    body = {"title": title, "start_date": start, "end_date": end, "parent_id": parent_id, **extra}
    response = client.post("/api/goals", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_child_propagates_to_parent(client):
    epic = _create(client, "epic", "2024-01-10", "2024-01-20", issue_type="epic")
    _create(client, "story", "2024-01-05", "2024-02-05", parent_id=epic["id"], issue_type="story")

    parent = client.get(f"/api/goals/{epic['id']}").json()

    assert (parent["start_date"], parent["end_date"]) == ("2024-01-05", "2024-02-05")


def test_get_missing_goal_is_404(client):
    assert client.get("/api/goals/999").status_code == 404
    assert client.patch("/api/goals/999", json={"title": "x"}).status_code == 404


def test_missing_parent_is_404(client):
    response = client.post("/api/goals", json={
        "title": "orphan", "start_date": "2024-01-01", "end_date": "2024-01-02", "parent_id": 999,
    })
    assert response.status_code == 404


def test_cycle_is_400(client):
    epic = _create(client, "epic", "2024-01-01", "2024-01-31")
    story = _create(client, "story", "2024-01-01", "2024-01-31", parent_id=epic["id"])

    response = client.patch(f"/api/goals/{epic['id']}", json={"parent_id": story["id"]})

    assert response.status_code == 400
    assert client.get(f"/api/goals/{epic['id']}").json()["parent_id"] is None


def test_status_change_does_not_touch_progress(client):
    g = _create(client, "goal", "2024-01-01", "2024-01-02", progress=30)

    body = client.patch(f"/api/goals/{g['id']}", json={"status": "done"}).json()

    assert body["status"] == "done"
    assert body["progress"] == 30


def test_list_with_range(client):
    _create(client, "jan", "2024-01-01", "2024-01-31")
    _create(client, "feb", "2024-02-01", "2024-02-10")

    titles = [g["title"] for g in client.get("/api/goals", params={"from": "2024-01-31", "to": "2024-02-05"}).json()]
    all_titles = [g["title"] for g in client.get("/api/goals").json()]

    assert sorted(titles) == ["feb", "jan"]
    assert all_titles == ["jan", "feb"]
    assert client.get("/api/goals", params={"from": "2024-02-05", "to": "2024-02-28"}).json()[0]["title"] == "feb"


def test_tree_with_rollup(client):
    epic = _create(client, "epic", "2024-01-01", "2024-01-31", issue_type="epic")
    _create(client, "a", "2024-01-01", "2024-01-05", parent_id=epic["id"], status="done")
    _create(client, "b", "2024-01-06", "2024-01-10", parent_id=epic["id"], progress=50)

    tree = client.get("/api/goals/tree").json()

    assert len(tree) == 1
    assert tree[0]["goal"]["title"] == "epic"
    assert tree[0]["progress"] == 75
    assert [c["goal"]["title"] for c in tree[0]["children"]] == ["a", "b"]
    assert [c["depth"] for c in tree[0]["children"]] == [1, 1]


def test_delete_cascades(client):
    epic = _create(client, "epic", "2024-01-01", "2024-01-31")
    story = _create(client, "story", "2024-01-01", "2024-01-31", parent_id=epic["id"])

    assert client.delete(f"/api/goals/{epic['id']}").status_code == 204
    assert client.get(f"/api/goals/{story['id']}").status_code == 404
    assert client.delete(f"/api/goals/{epic['id']}").status_code == 204


def test_reorder_siblings(client):
    epic = _create(client, "epic", "2024-01-01", "2024-01-31")
    a = _create(client, "a", "2024-01-01", "2024-01-02", parent_id=epic["id"])
    b = _create(client, "b", "2024-01-01", "2024-01-02", parent_id=epic["id"])

    client.post("/api/goals/reorder", json={"orders": [
        {"id": a["id"], "sort_order": 2},
        {"id": b["id"], "sort_order": 1},
    ]})

    tree = client.get("/api/goals/tree").json()
    assert [c["goal"]["title"] for c in tree[0]["children"]] == ["b", "a"]
