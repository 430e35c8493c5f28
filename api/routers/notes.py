"""
일기 / 월간 목표 / 주간 목표 라우터

키(날짜, YYYY-MM, YYYY-Www)당 레코드 하나를 upsert 합니다.
없는 키를 조회하면 404 대신 빈 기본값을 돌려줍니다.
"""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from database.core.connection import get_db
from database.crud import journal
from api.models import (
    DiaryWrite, DiaryRead,
    MonthlyGoalWrite, MonthlyGoalRead,
    WeeklyGoalWrite, WeeklyGoalRead,
)

YEAR_MONTH_PATTERN = r"^\d{4}-\d{2}$"
YEAR_WEEK_PATTERN = r"^\d{4}-W\d{2}$"

diary_router = APIRouter()
monthly_goals_router = APIRouter()
weekly_goals_router = APIRouter()


# ============================================================================
# Diary
# ============================================================================

@diary_router.get("", response_model=List[DiaryRead])
def list_diary_entries(db: Session = Depends(get_db)):
    """최근 30개 (날짜 내림차순)"""
    return journal.get_recent_diary_entries(db, limit=30)


@diary_router.get("/{entry_date}", response_model=DiaryRead)
def get_diary_entry(entry_date: date, db: Session = Depends(get_db)):
    db_entry = journal.get_diary_entry(db, entry_date)
    if db_entry is None:
        return DiaryRead(date=entry_date, content="")
    return db_entry


@diary_router.put("/{entry_date}", response_model=DiaryRead)
def put_diary_entry(entry_date: date, payload: DiaryWrite, db: Session = Depends(get_db)):
    return journal.upsert_diary_entry(db, entry_date, payload.content)


# ============================================================================
# Monthly goals
# ============================================================================

@monthly_goals_router.get("/{year_month}", response_model=MonthlyGoalRead)
def get_monthly_goal(
    year_month: str = Path(..., pattern=YEAR_MONTH_PATTERN),
    db: Session = Depends(get_db),
):
    db_note = journal.get_monthly_goal(db, year_month)
    if db_note is None:
        return MonthlyGoalRead(year_month=year_month, content="")
    return db_note


@monthly_goals_router.put("/{year_month}", response_model=MonthlyGoalRead)
def put_monthly_goal(
    payload: MonthlyGoalWrite,
    year_month: str = Path(..., pattern=YEAR_MONTH_PATTERN),
    db: Session = Depends(get_db),
):
    return journal.upsert_monthly_goal(db, year_month, payload.content)


# ============================================================================
# Weekly goals
# ============================================================================

@weekly_goals_router.get("/{year_week}", response_model=WeeklyGoalRead)
def get_weekly_goal(
    year_week: str = Path(..., pattern=YEAR_WEEK_PATTERN),
    db: Session = Depends(get_db),
):
    db_note = journal.get_weekly_goal(db, year_week)
    if db_note is None:
        return WeeklyGoalRead(year_week=year_week, content="", memo=None)
    return db_note


@weekly_goals_router.put("/{year_week}", response_model=WeeklyGoalRead)
def put_weekly_goal(
    payload: WeeklyGoalWrite,
    year_week: str = Path(..., pattern=YEAR_WEEK_PATTERN),
    db: Session = Depends(get_db),
):
    return journal.upsert_weekly_goal(db, year_week, payload.content, payload.memo)
