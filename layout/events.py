"""
일정 + 목표를 하나의 캘린더 이벤트 목록으로 병합
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, List, Optional

SCHEDULE_COLOR = "amber"


@dataclass
class CalendarEvent:
    type: str   # "schedule" | "goal"
    id: int
    title: str
    date: date
    color: str
    end_date: Optional[date] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    status: Optional[str] = None
    issue_type: Optional[str] = None


def merge_events(
    schedules: Optional[Iterable[Any]],
    goals: Optional[Iterable[Any]],
) -> List[CalendarEvent]:
    """일정을 먼저, 목표를 나중에 (각각 입력 순서 유지)"""
    events: List[CalendarEvent] = []

    for s in schedules or []:
        events.append(CalendarEvent(
            type="schedule",
            id=s.id,
            title=s.title,
            date=s.date,
            color=SCHEDULE_COLOR,
            start_time=s.start_time,
            end_time=s.end_time,
        ))

    for g in goals or []:
        events.append(CalendarEvent(
            type="goal",
            id=g.id,
            title=g.title,
            date=g.start_date,
            end_date=g.end_date,
            color=g.color,
            status=g.status,
            issue_type=g.issue_type,
        ))

    return events
