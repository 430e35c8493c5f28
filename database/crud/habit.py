"""
습관 기록 CRUD

(habit_id, date) 유일 제약 위반을 "토글 해제" 신호로 사용합니다.
같은 날 두 번 기록하면 두 번째 호출이 기존 기록을 지웁니다.
"""

from datetime import date
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from database.models import Habit, HabitLog
from database.crud.errors import NotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)


def get_logs(db: Session, date_from: Optional[date] = None, date_to: Optional[date] = None) -> List[HabitLog]:
    """기간(양 끝 포함) 안의 습관 기록 조회"""
    query = db.query(HabitLog)
    if date_from is not None:
        query = query.filter(HabitLog.date >= date_from)
    if date_to is not None:
        query = query.filter(HabitLog.date <= date_to)
    return query.order_by(HabitLog.date.asc(), HabitLog.habit_id.asc()).all()


def toggle_log(db: Session, habit_id: int, log_date: date) -> Tuple[bool, HabitLog]:
    """
    습관 기록 토글

    Returns:
        (created, log) - created가 False면 기존 기록을 삭제한 것
    """
    if db.get(Habit, habit_id) is None:
        raise NotFoundError("Habit", habit_id)

    db_log = HabitLog(habit_id=habit_id, date=log_date)
    db.add(db_log)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        db.query(HabitLog).filter(
            HabitLog.habit_id == habit_id,
            HabitLog.date == log_date,
        ).delete(synchronize_session=False)
        db.commit()
        logger.debug("habit %s log %s toggled off", habit_id, log_date)
        return False, HabitLog(habit_id=habit_id, date=log_date)

    db.refresh(db_log)
    logger.debug("habit %s log %s toggled on", habit_id, log_date)
    return True, db_log
