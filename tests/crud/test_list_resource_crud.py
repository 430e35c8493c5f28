"""
ListResource 공통 계약 테스트 (할 일, 위시 항목, 습관)
"""

import pytest

from database.crud import list_items
from database.crud.errors import NotFoundError


def _titles(items):
    return [item.title for item in items]


def test_create_appends_to_end(db):
    """빈 목록이면 1부터, 이후에는 max + 1"""
    first = list_items.todos.create(db, {"title": "a"})
    second = list_items.todos.create(db, {"title": "b"})
    third = list_items.todos.create(db, {"title": "c"})

    assert [first.sort_order, second.sort_order, third.sort_order] == [1, 2, 3]
    assert _titles(list_items.todos.list(db)) == ["a", "b", "c"]


def test_create_ignores_given_sort_order_and_none_fields(db):
    todo = list_items.todos.create(db, {"title": "a", "sort_order": 99, "done": None})

    assert todo.sort_order == 1
    assert todo.done is False


def test_create_after_delete_uses_current_max(db):
    a = list_items.todos.create(db, {"title": "a"})
    b = list_items.todos.create(db, {"title": "b"})
    list_items.todos.delete(db, b.id)

    c = list_items.todos.create(db, {"title": "c"})
    assert c.sort_order == a.sort_order + 1


def test_sort_order_is_partitioned_by_list_type(db):
    wish = list_items.wish_items.create(db, {"list_type": "wish", "title": "camera"})
    list_items.wish_items.create(db, {"list_type": "wish", "title": "bike"})
    bucket = list_items.wish_items.create(db, {"list_type": "bucket", "title": "aurora"})

    assert wish.sort_order == 1
    assert bucket.sort_order == 1
    assert _titles(list_items.get_wish_items(db, "wish")) == ["camera", "bike"]
    assert _titles(list_items.get_wish_items(db, "bucket")) == ["aurora"]


def test_habit_sort_order_is_partitioned_by_group(db):
    group = list_items.habits.create(db, {"name": "morning"})
    child_a = list_items.habits.create(db, {"name": "stretch", "parent_id": group.id})
    child_b = list_items.habits.create(db, {"name": "water", "parent_id": group.id})
    other_root = list_items.habits.create(db, {"name": "evening"})

    assert (group.sort_order, other_root.sort_order) == (1, 2)
    assert (child_a.sort_order, child_b.sort_order) == (1, 2)
    assert child_a.duration == 30


def test_update_merges_only_given_fields(db):
    todo = list_items.todos.create(db, {"title": "a"})

    updated = list_items.todos.update(db, todo.id, {"done": True})

    assert updated.done is True
    assert updated.title == "a"


def test_update_explicit_null(db):
    """nullable 컬럼은 null로 지우고, NOT NULL 컬럼의 null은 무시"""
    item = list_items.wish_items.create(db, {"title": "camera", "price": 1000, "memo": "used"})

    updated = list_items.wish_items.update(db, item.id, {"price": None, "title": None})

    assert updated.price is None
    assert updated.title == "camera"
    assert updated.memo == "used"


def test_update_missing_returns_none(db):
    assert list_items.todos.update(db, 999, {"title": "x"}) is None


def test_delete_is_idempotent(db):
    todo = list_items.todos.create(db, {"title": "a"})

    assert list_items.todos.delete(db, todo.id) is True
    assert list_items.todos.delete(db, todo.id) is False
    assert list_items.todos.list(db) == []


def test_reorder_applies_all_pairs(db):
    a = list_items.todos.create(db, {"title": "a"})
    b = list_items.todos.create(db, {"title": "b"})
    c = list_items.todos.create(db, {"title": "c"})

    count = list_items.todos.reorder(db, [(a.id, 3), (b.id, 1), (c.id, 2)])

    assert count == 3
    assert _titles(list_items.todos.list(db)) == ["b", "c", "a"]


def test_reorder_is_atomic(db):
    """없는 id가 섞이면 아무것도 바뀌지 않음"""
    a = list_items.todos.create(db, {"title": "a"})
    b = list_items.todos.create(db, {"title": "b"})

    with pytest.raises(NotFoundError):
        list_items.todos.reorder(db, [(a.id, 2), (b.id, 1), (999, 3)])

    assert _titles(list_items.todos.list(db)) == ["a", "b"]
    assert [t.sort_order for t in list_items.todos.list(db)] == [1, 2]


def test_routines_filter_by_day(db):
    list_items.routines.create(db, {"name": "gym", "day_of_week": "1,3,5"})
    list_items.routines.create(db, {"name": "laundry", "day_of_week": "0"})
    list_items.routines.create(db, {"name": "free"})

    assert [r.name for r in list_items.get_routines(db, 3)] == ["gym"]
    assert [r.name for r in list_items.get_routines(db, 0)] == ["laundry"]
    assert len(list_items.get_routines(db)) == 3
