"""
Techo - 습관 / 습관 기록 모델 정의
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from database.models.base import Base


class Habit(Base):
    """습관 테이블 - parent_id로 묶음(그룹)을 표현"""

    __tablename__ = "habits"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, comment="습관 이름")
    parent_id = Column(
        Integer,
        ForeignKey("habits.id", ondelete="CASCADE"),
        nullable=True,
        comment="상위 습관 그룹 FK",
    )
    duration = Column(Integer, nullable=False, default=30, comment="소요 시간(분)")
    day_of_week = Column(String(20), nullable=False, default="", comment="요일 목록 (쉼표 구분)")
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=datetime.now)

    # HabitLog와의 관계 설정 (1:N)
    logs = relationship("HabitLog", back_populates="habit", cascade="all, delete-orphan", passive_deletes=True)

    def __repr__(self):
        return f"<Habit(id={self.id}, name='{self.name}')>"


class HabitLog(Base):
    """습관 수행 기록 - (habit_id, date) 당 하나"""

    __tablename__ = "habit_logs"
    __table_args__ = (UniqueConstraint("habit_id", "date", name="uq_habit_logs_habit_date"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    habit_id = Column(Integer, ForeignKey("habits.id", ondelete="CASCADE"), nullable=False)
    date = Column(Date, nullable=False)

    # Habit과의 관계 설정 (N:1)
    habit = relationship("Habit", back_populates="logs")

    def __repr__(self):
        return f"<HabitLog(habit_id={self.habit_id}, date={self.date})>"
