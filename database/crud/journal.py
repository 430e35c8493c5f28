"""
날짜/기간 키 기반 기록 CRUD

일기, 월간/주간 목표 노트, 가계부는 키당 하나의 레코드를 upsert 합니다.
일정은 평범한 CRUD이며 수정은 전체 교체(PUT)입니다.
"""

from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from database.models import DiaryEntry, MonthlyGoal, WeeklyGoal, BudgetEntry, Schedule

BUDGET_FIELDS = ("au_pay", "mufg_billing", "jcb_billing", "minsin_balance", "mufg_balance", "jcb_skip")
SCHEDULE_FIELDS = ("title", "date", "start_time", "end_time", "memo", "source")
SCHEDULE_REQUIRED_FIELDS = ("title", "date")


# Diary
def get_diary_entry(db: Session, entry_date: date) -> Optional[DiaryEntry]:
    return db.query(DiaryEntry).filter(DiaryEntry.date == entry_date).first()


def get_recent_diary_entries(db: Session, limit: int = 30) -> List[DiaryEntry]:
    """최근 일기 (날짜 내림차순)"""
    return db.query(DiaryEntry).order_by(DiaryEntry.date.desc()).limit(limit).all()


def upsert_diary_entry(db: Session, entry_date: date, content: str) -> DiaryEntry:
    db_entry = get_diary_entry(db, entry_date)
    if db_entry is None:
        db_entry = DiaryEntry(date=entry_date, content=content)
        db.add(db_entry)
    else:
        db_entry.content = content
    db.commit()
    db.refresh(db_entry)
    return db_entry


# Monthly / weekly goal notes
def get_monthly_goal(db: Session, year_month: str) -> Optional[MonthlyGoal]:
    return db.query(MonthlyGoal).filter(MonthlyGoal.year_month == year_month).first()


def upsert_monthly_goal(db: Session, year_month: str, content: Optional[str]) -> MonthlyGoal:
    db_note = get_monthly_goal(db, year_month)
    if db_note is None:
        db_note = MonthlyGoal(year_month=year_month)
        db.add(db_note)
    db_note.content = content or ""
    db.commit()
    db.refresh(db_note)
    return db_note


def get_weekly_goal(db: Session, year_week: str) -> Optional[WeeklyGoal]:
    return db.query(WeeklyGoal).filter(WeeklyGoal.year_week == year_week).first()


def upsert_weekly_goal(db: Session, year_week: str, content: Optional[str], memo: Optional[str]) -> WeeklyGoal:
    db_note = get_weekly_goal(db, year_week)
    if db_note is None:
        db_note = WeeklyGoal(year_week=year_week)
        db.add(db_note)
    db_note.content = content or ""
    db_note.memo = memo or None
    db.commit()
    db.refresh(db_note)
    return db_note


# Budget
def get_budget_entry(db: Session, year_month: str) -> Optional[BudgetEntry]:
    return db.query(BudgetEntry).filter(BudgetEntry.year_month == year_month).first()


def get_recent_budget_entries(db: Session, limit: int = 24) -> List[BudgetEntry]:
    return db.query(BudgetEntry).order_by(BudgetEntry.year_month.desc()).limit(limit).all()


def upsert_budget_entry(db: Session, year_month: str, fields: Dict[str, Any]) -> BudgetEntry:
    """전체 교체 - 보내지 않은 금액은 NULL, jcb_skip은 0"""
    db_entry = get_budget_entry(db, year_month)
    if db_entry is None:
        db_entry = BudgetEntry(year_month=year_month)
        db.add(db_entry)
    for key in BUDGET_FIELDS:
        value = fields.get(key)
        if key == "jcb_skip" and value is None:
            value = 0
        setattr(db_entry, key, value)
    db.commit()
    db.refresh(db_entry)
    return db_entry


# Schedules
def get_schedules(
    db: Session,
    on_date: Optional[date] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
) -> List[Schedule]:
    """일정 조회 - 특정 날짜, 기간(양 끝 포함), 또는 전체"""
    query = db.query(Schedule)
    if on_date is not None:
        return query.filter(Schedule.date == on_date).order_by(Schedule.start_time.asc(), Schedule.id.asc()).all()
    if date_from is not None and date_to is not None:
        query = query.filter(Schedule.date >= date_from, Schedule.date <= date_to)
    return query.order_by(Schedule.date.asc(), Schedule.start_time.asc(), Schedule.id.asc()).all()


def _schedule_value(fields: Dict[str, Any], key: str) -> Any:
    """선택 필드의 빈 문자열은 NULL로, 제목/날짜는 보낸 그대로"""
    if key in SCHEDULE_REQUIRED_FIELDS:
        return fields.get(key)
    return fields.get(key) or None


def get_schedule(db: Session, schedule_id: int) -> Optional[Schedule]:
    return db.query(Schedule).filter(Schedule.id == schedule_id).first()


def create_schedule(db: Session, fields: Dict[str, Any]) -> Schedule:
    db_schedule = Schedule(**{key: _schedule_value(fields, key) for key in SCHEDULE_FIELDS})
    db.add(db_schedule)
    db.commit()
    db.refresh(db_schedule)
    return db_schedule


def replace_schedule(db: Session, schedule_id: int, fields: Dict[str, Any]) -> Optional[Schedule]:
    """전체 교체 - 보내지 않은 선택 필드는 NULL (source는 보낸 경우에만 교체)"""
    db_schedule = get_schedule(db, schedule_id)
    if db_schedule is None:
        return None
    for key in SCHEDULE_FIELDS:
        if key == "source" and key not in fields:
            continue
        setattr(db_schedule, key, _schedule_value(fields, key))
    db.commit()
    db.refresh(db_schedule)
    return db_schedule


def delete_schedule(db: Session, schedule_id: int) -> bool:
    db_schedule = get_schedule(db, schedule_id)
    if db_schedule is None:
        return False
    db.delete(db_schedule)
    db.commit()
    return True
