"""
계층형 목표(WBS) 라우터
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from database.core.connection import get_db
from database.crud import goal as goal_crud
from layout.tree import GoalTreeNode, build_goal_tree, rollup_progress
from api.models import (
    GoalCreate, GoalUpdate, GoalRead, GoalTreeRead,
    ReorderRequest, OkResponse,
)

router = APIRouter()


def _tree_read(node: GoalTreeNode) -> GoalTreeRead:
    return GoalTreeRead(
        goal=GoalRead.model_validate(node.goal),
        depth=node.depth,
        progress=rollup_progress(node),
        children=[_tree_read(child) for child in node.children],
    )


@router.get("", response_model=List[GoalRead])
def list_goals(
    date_from: Optional[date] = Query(None, alias="from"),
    date_to: Optional[date] = Query(None, alias="to"),
    db: Session = Depends(get_db),
):
    """
    목표 목록 (평면)

    from/to가 모두 있으면 기간과 겹치는 목표만 반환합니다.
    """
    return goal_crud.get_goals(db, date_from, date_to)


@router.get("/tree", response_model=List[GoalTreeRead])
def get_goal_tree(
    date_from: Optional[date] = Query(None, alias="from"),
    date_to: Optional[date] = Query(None, alias="to"),
    db: Session = Depends(get_db),
):
    """트리 + 집계 진행률 (간트/WBS 화면용)"""
    roots = build_goal_tree(goal_crud.get_goals(db, date_from, date_to))
    return [_tree_read(root) for root in roots]


@router.post("", response_model=GoalRead, status_code=201)
def create_goal(payload: GoalCreate, db: Session = Depends(get_db)):
    return goal_crud.create_goal(db, payload.model_dump())


@router.post("/reorder", response_model=OkResponse)
def reorder_goals(payload: ReorderRequest, db: Session = Depends(get_db)):
    goal_crud.reorder_goals(db, payload.pairs())
    return OkResponse()


@router.get("/{goal_id}", response_model=GoalRead)
def get_goal(goal_id: int, db: Session = Depends(get_db)):
    db_goal = goal_crud.get_goal(db, goal_id)
    if db_goal is None:
        raise HTTPException(status_code=404, detail="Not found")
    return db_goal


@router.patch("/{goal_id}", response_model=GoalRead)
def update_goal(goal_id: int, payload: GoalUpdate, db: Session = Depends(get_db)):
    """
    부분 수정

    보낸 필드만 바뀝니다. status를 바꿔도 progress는 자동으로 바뀌지 않으므로
    필요하면 progress를 함께 보내야 합니다.
    """
    db_goal = goal_crud.update_goal(db, goal_id, payload.model_dump(exclude_unset=True))
    if db_goal is None:
        raise HTTPException(status_code=404, detail="Not found")
    return db_goal


@router.delete("/{goal_id}", status_code=204)
def delete_goal(goal_id: int, db: Session = Depends(get_db)):
    """삭제 (하위 목표 포함)"""
    goal_crud.delete_goal(db, goal_id)
    return Response(status_code=204)
