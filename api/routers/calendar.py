"""
캘린더 라우터

일정 + 목표 이벤트 병합, 주간/월간 중첩 밴드 레이아웃을 제공합니다.
레이아웃 계산은 layout 패키지의 순수 함수가 하고, 여기서는 조회와 변환만 합니다.
"""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.core.connection import get_db
from database.crud import goal as goal_crud, journal
from layout.bands import BandSegment, calc_week_bands_height, layout_week_bands
from layout.dates import get_month_grid, get_week_days
from layout.events import merge_events
from layout.tree import build_goal_tree
from api.models import (
    CalendarEventRead, BandSegmentRead, GoalRead,
    WeekLayoutResponse, MonthLayoutResponse,
)

router = APIRouter()


def _band_read(segment: BandSegment) -> BandSegmentRead:
    return BandSegmentRead(
        id=segment.id,
        left=segment.left,
        width=segment.width,
        top=segment.top,
        height=segment.height,
        depth=segment.depth,
        issue_type=segment.issue_type,
        title=segment.title,
        has_children=segment.has_children,
        epic_title=segment.epic_title,
        story_title=segment.story_title,
        goal=GoalRead.model_validate(segment.goal),
    )


def _week_layout(db: Session, days: List[date]) -> WeekLayoutResponse:
    week_start, week_end = days[0], days[-1]
    roots = build_goal_tree(goal_crud.get_goals(db, week_start, week_end))
    return WeekLayoutResponse(
        week_start=week_start,
        week_end=week_end,
        days=days,
        height=calc_week_bands_height(roots, week_start, week_end),
        bands=[_band_read(s) for s in layout_week_bands(roots, week_start, week_end)],
    )


@router.get("/events", response_model=List[CalendarEventRead])
def list_events(
    date_from: date = Query(..., alias="from"),
    date_to: date = Query(..., alias="to"),
    db: Session = Depends(get_db),
):
    """기간 안의 일정과, 기간과 겹치는 목표"""
    schedules = journal.get_schedules(db, date_from=date_from, date_to=date_to)
    goals = goal_crud.get_goals(db, date_from, date_to)
    return merge_events(schedules, goals)


@router.get("/week", response_model=WeekLayoutResponse)
def get_week_layout(
    target_date: date = Query(..., alias="date"),
    db: Session = Depends(get_db),
):
    """target_date가 속한 주(월~일)의 밴드 레이아웃"""
    return _week_layout(db, get_week_days(target_date))


@router.get("/month", response_model=MonthLayoutResponse)
def get_month_layout(
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=1, le=12),
    db: Session = Depends(get_db),
):
    """
    6주 그리드의 주별 밴드 레이아웃

    여러 주에 걸친 목표는 주마다 따로 잘려서 배치되므로
    주마다 레인 번호가 다를 수 있습니다.
    """
    weeks = [_week_layout(db, days) for days in get_month_grid(year, month)]
    return MonthLayoutResponse(year=year, month=month, weeks=weeks)
