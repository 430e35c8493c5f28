"""
목록 리소스 인스턴스

각 리소스는 ListResource 하나로 표현되며, 라우터와 테스트가 그대로 사용합니다.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from database.models import Todo, WishItem, Routine, FeatureRequest, Habit
from database.crud.list_resource import ListResource

todos = ListResource(Todo, updatable=("title", "done", "due_date", "sort_order"))

wish_items = ListResource(
    WishItem,
    partition_column="list_type",
    updatable=("title", "price", "url", "deadline", "memo", "done", "sort_order"),
)

routines = ListResource(Routine, updatable=("name", "start_time", "end_time", "day_of_week", "sort_order"))

feature_requests = ListResource(
    FeatureRequest,
    updatable=("title", "description", "status", "commit_message", "sort_order"),
)

# 습관은 그룹(parent_id)마다 sort_order를 따로 매김
habits = ListResource(Habit, partition_column="parent_id", updatable=("name", "duration", "day_of_week", "sort_order"))


def get_wish_items(db: Session, list_type: str = "wish") -> List[WishItem]:
    """list_type(wish/bucket) 하나의 항목만 조회"""
    return wish_items.list(db, partition_value=list_type, all_partitions=False)


def get_routines(db: Session, day: Optional[int] = None) -> List[Routine]:
    """루틴 조회 - day(0=일요일)가 주어지면 해당 요일 루틴만"""
    items = routines.list(db)
    if day is None:
        return items
    return [item for item in items if str(day) in item.weekdays]
