"""
습관 라우터 - 목록 계약 + 날짜별 기록 토글
"""

from datetime import date
from typing import List, Optional

from fastapi import Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from database.core.connection import get_db
from database.crud import habit as habit_crud, list_items
from api.models import (
    HabitCreate, HabitUpdate, HabitRead,
    HabitLogRequest, HabitLogRead, HabitLogToggleResponse,
)
from api.routers.list_resource import create_list_router

router = create_list_router(list_items.habits, HabitCreate, HabitUpdate, HabitRead)


@router.get("/logs", response_model=List[HabitLogRead])
def list_logs(
    date_from: Optional[date] = Query(None, alias="from"),
    date_to: Optional[date] = Query(None, alias="to"),
    db: Session = Depends(get_db),
):
    return habit_crud.get_logs(db, date_from, date_to)


@router.post("/{habit_id}/logs", response_model=HabitLogToggleResponse)
def toggle_log(habit_id: int, payload: HabitLogRequest, db: Session = Depends(get_db)):
    """
    기록 토글

    새로 기록하면 201, 이미 있던 기록을 지우면 200 + deleted=true
    """
    created, db_log = habit_crud.toggle_log(db, habit_id, payload.date)
    body = HabitLogToggleResponse(habit_id=habit_id, date=db_log.date, deleted=not created)
    return JSONResponse(
        status_code=201 if created else 200,
        content=body.model_dump(mode="json"),
    )
