"""
계층형 목표 CRUD

부모 목표의 start_date/end_date는 항상 직속 자식들의 (min(start), max(end))와 같아야 합니다.
생성/수정/삭제 후 같은 트랜잭션 안에서 sync_parent_dates로 조상 방향으로 전파합니다.
"""

from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from database.models import Goal
from database.crud.errors import NotFoundError, InvalidHierarchyError
from database.crud.list_resource import ListResource
from database.crud.patch import apply_patch
from utils.logger import get_logger

logger = get_logger(__name__)

GOAL_FIELDS = (
    "parent_id", "title", "issue_type", "status", "priority", "category",
    "start_date", "end_date", "progress", "color", "memo", "note", "sort_order",
    "scheduled_time", "scheduled_duration",
)

# 형제(같은 parent_id) 단위로 sort_order를 매김
_goal_list = ListResource(Goal, partition_column="parent_id", updatable=GOAL_FIELDS)


def sync_parent_dates(db: Session, parent_id: Optional[int]) -> None:
    """
    parent_id부터 루트 방향으로 날짜 범위 전파

    - 자식이 하나도 없으면 멈춤 (부모의 기존 범위는 그대로 둠)
    - 재귀 대신 반복으로 올라가며, 이미 방문한 id를 만나면 멈춤
    """
    visited = set()
    while parent_id is not None and parent_id not in visited:
        visited.add(parent_id)
        db.flush()

        min_start, max_end = (
            db.query(func.min(Goal.start_date), func.max(Goal.end_date))
            .filter(Goal.parent_id == parent_id)
            .one()
        )
        if min_start is None or max_end is None:
            break

        parent = db.get(Goal, parent_id)
        if parent is None:
            break

        if parent.start_date != min_start or parent.end_date != max_end:
            logger.debug(
                "goal %s span %s~%s -> %s~%s",
                parent_id, parent.start_date, parent.end_date, min_start, max_end,
            )
        parent.start_date = min_start
        parent.end_date = max_end
        parent_id = parent.parent_id


def get_ancestor_ids(db: Session, goal_id: Optional[int]) -> List[int]:
    """goal_id 자신부터 루트까지의 id 목록 (순환이 있으면 한 바퀴에서 멈춤)"""
    chain = []
    current = goal_id
    while current is not None and current not in chain:
        chain.append(current)
        current = db.query(Goal.parent_id).filter(Goal.id == current).scalar()
    return chain


def _validate_parent(db: Session, goal_id: Optional[int], parent_id: Optional[int]) -> None:
    """부모 존재 여부와 순환 여부 검사"""
    if parent_id is None:
        return
    if db.get(Goal, parent_id) is None:
        raise NotFoundError("Goal", parent_id)
    if goal_id is not None and goal_id in get_ancestor_ids(db, parent_id):
        raise InvalidHierarchyError(f"Goal {goal_id} cannot be placed under {parent_id}")


def get_goal(db: Session, goal_id: int) -> Optional[Goal]:
    """ID로 목표를 조회합니다."""
    return db.query(Goal).filter(Goal.id == goal_id).first()


def get_goals(db: Session, date_from: Optional[date] = None, date_to: Optional[date] = None) -> List[Goal]:
    """
    목표 목록 조회 (평면 리스트, 트리는 호출 측에서 구성)

    date_from/date_to가 모두 있으면 기간과 조금이라도 겹치는 목표만 반환합니다.
    """
    query = db.query(Goal)
    if date_from is not None and date_to is not None:
        query = query.filter(Goal.start_date <= date_to, Goal.end_date >= date_from)
    return query.order_by(Goal.sort_order.asc(), Goal.created_at.asc(), Goal.id.asc()).all()


def create_goal(db: Session, fields: Dict[str, Any]) -> Goal:
    """새로운 목표를 생성하고 조상 범위를 갱신합니다."""
    values = {key: value for key, value in fields.items() if key in GOAL_FIELDS and value is not None}
    values.pop("sort_order", None)
    parent_id = values.get("parent_id") or None
    values["parent_id"] = parent_id

    try:
        _validate_parent(db, None, parent_id)

        db_goal = Goal(**values)
        db_goal.sort_order = _goal_list.next_sort_order(db, parent_id)
        db.add(db_goal)
        db.flush()

        sync_parent_dates(db, parent_id)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(db_goal)
    return db_goal


def update_goal(db: Session, goal_id: int, fields: Dict[str, Any]) -> Optional[Goal]:
    """
    목표 부분 수정

    parent_id가 바뀌면 이전 부모와 새 부모 양쪽 계보를 모두 갱신하고,
    sort_order를 따로 보내지 않았다면 새 형제들의 맨 끝으로 보냅니다.
    자식이 있는 목표의 날짜는 자식 범위로 다시 맞춰집니다.
    progress는 status와 연동하지 않으며 명시적으로 보낸 경우에만 바뀝니다.
    """
    db_goal = get_goal(db, goal_id)
    if db_goal is None:
        return None

    old_parent_id = db_goal.parent_id
    if "parent_id" in fields:
        fields = dict(fields, parent_id=fields["parent_id"] or None)
    reparented = "parent_id" in fields and fields["parent_id"] != old_parent_id

    try:
        if reparented:
            _validate_parent(db, goal_id, fields["parent_id"])
            if fields.get("sort_order") is None:
                fields = dict(fields, sort_order=_goal_list.next_sort_order(db, fields["parent_id"]))

        apply_patch(db_goal, fields, allowed=GOAL_FIELDS)
        db.flush()

        if reparented:
            sync_parent_dates(db, old_parent_id)
        # 자식이 없으면 바로 멈추므로 부모 쪽 전파는 따로 호출
        sync_parent_dates(db, db_goal.id)
        sync_parent_dates(db, db_goal.parent_id)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(db_goal)
    return db_goal


def delete_goal(db: Session, goal_id: int) -> bool:
    """목표 삭제 (하위 목표는 cascade) - 삭제 전 부모를 읽어 두었다가 범위 갱신"""
    db_goal = get_goal(db, goal_id)
    if db_goal is None:
        return False

    parent_id = db_goal.parent_id
    try:
        db.delete(db_goal)
        db.flush()
        sync_parent_dates(db, parent_id)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return True


def reorder_goals(db: Session, orders) -> int:
    """형제 간 정렬 순서 일괄 변경 (원자적)"""
    return _goal_list.reorder(db, orders)
