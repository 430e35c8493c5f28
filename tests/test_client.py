"""
TechoClient 테스트 - TestClient를 세션으로 주입해 실제 라우터를 호출
"""

import pytest

from client import TechoAPIError, TechoClient


@pytest.fixture
def techo(client):
    return TechoClient(base_url="http://testserver", session=client)


def test_health(techo):
    assert techo.health()["status"] == "ok"


def test_list_item_roundtrip(techo):
    a = techo.create_item("todos", {"title": "a"})
    b = techo.create_item("todos", {"title": "b"})

    techo.reorder("todos", [(a["id"], 2), (b["id"], 1)])
    updated = techo.update_item("todos", a["id"], {"due_date": None, "done": True})
    techo.delete_item("todos", b["id"])

    items = techo.list_items("todos")
    assert [i["title"] for i in items] == ["a"]
    assert updated["done"] is True


def test_error_raises(techo):
    with pytest.raises(TechoAPIError) as exc_info:
        techo.update_item("todos", 999, {"title": "x"})

    assert exc_info.value.status_code == 404


def test_goal_and_week_layout(techo):
    epic = techo.create_goal({"title": "epic", "start_date": "2024-02-12", "end_date": "2024-02-14"})
    techo.create_goal({"title": "task", "start_date": "2024-02-13", "end_date": "2024-02-16", "parent_id": epic["id"]})

    assert techo.get_goal(epic["id"])["end_date"] == "2024-02-16"

    layout = techo.get_week_layout("2024-02-14")
    assert [b["title"] for b in layout["bands"]] == ["epic", "task"]


def test_habit_toggle(techo):
    habit = techo.create_item("habits", {"name": "run"})

    assert techo.toggle_habit_log(habit["id"], "2024-03-01")["deleted"] is False
    assert techo.toggle_habit_log(habit["id"], "2024-03-01")["deleted"] is True
    assert techo.list_habit_logs() == []


def test_diary(techo):
    assert techo.get_diary("2024-05-01")["content"] == ""
    techo.put_diary("2024-05-01", "hello")
    assert techo.get_diary("2024-05-01")["content"] == "hello"
