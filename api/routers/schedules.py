"""
일정 라우터
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from database.core.connection import get_db
from database.crud import journal
from api.models import ScheduleWrite, ScheduleRead

router = APIRouter()


@router.get("", response_model=List[ScheduleRead])
def list_schedules(
    on_date: Optional[date] = Query(None, alias="date"),
    date_from: Optional[date] = Query(None, alias="from"),
    date_to: Optional[date] = Query(None, alias="to"),
    db: Session = Depends(get_db),
):
    """date가 있으면 그 날짜만, from/to가 있으면 기간, 둘 다 없으면 전체"""
    return journal.get_schedules(db, on_date, date_from, date_to)


@router.post("", response_model=ScheduleRead, status_code=201)
def create_schedule(payload: ScheduleWrite, db: Session = Depends(get_db)):
    return journal.create_schedule(db, payload.model_dump())


@router.put("/{schedule_id}", response_model=ScheduleRead)
def replace_schedule(schedule_id: int, payload: ScheduleWrite, db: Session = Depends(get_db)):
    """전체 교체"""
    db_schedule = journal.replace_schedule(db, schedule_id, payload.model_dump(exclude_unset=True))
    if db_schedule is None:
        raise HTTPException(status_code=404, detail="Not found")
    return db_schedule


@router.delete("/{schedule_id}", status_code=204)
def delete_schedule(schedule_id: int, db: Session = Depends(get_db)):
    journal.delete_schedule(db, schedule_id)
    return Response(status_code=204)
