"""
Techo - 날짜/기간 키 기반 기록 모델 정의

일기(날짜당 하나), 월간/주간 목표 노트, 가계부, 일정.
일기와 노트의 content는 에디터가 만든 블록 트리를 JSON 문자열로 그대로 저장합니다.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, Date, DateTime
from database.models.base import Base


class DiaryEntry(Base):
    """일기 테이블"""

    __tablename__ = "diary"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Date, nullable=False, unique=True)
    content = Column(Text, nullable=False, default="")
    updated_at = Column(DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)

    def __repr__(self):
        return f"<DiaryEntry(date={self.date})>"


class MonthlyGoal(Base):
    """월간 목표 노트 (year_month: YYYY-MM)"""

    __tablename__ = "monthly_goals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    year_month = Column(String(7), nullable=False, unique=True)
    content = Column(Text, nullable=False, default="")
    updated_at = Column(DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)


class WeeklyGoal(Base):
    """주간 목표 노트 (year_week: YYYY-Www)"""

    __tablename__ = "weekly_goals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    year_week = Column(String(8), nullable=False, unique=True)
    content = Column(Text, nullable=False, default="")
    memo = Column(Text, nullable=True)
    updated_at = Column(DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)


class BudgetEntry(Base):
    """월별 가계부 (카드 청구액 / 계좌 잔액)"""

    __tablename__ = "budget_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    year_month = Column(String(7), nullable=False, unique=True)
    au_pay = Column(Integer, nullable=True)
    mufg_billing = Column(Integer, nullable=True)
    jcb_billing = Column(Integer, nullable=True)
    minsin_balance = Column(Integer, nullable=True)
    mufg_balance = Column(Integer, nullable=True)
    jcb_skip = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=datetime.now)
    updated_at = Column(DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)


class Schedule(Base):
    """일정 테이블 (계층 없음)"""

    __tablename__ = "schedules"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    date = Column(Date, nullable=False, index=True)
    start_time = Column(String(5), nullable=True, comment="HH:MM")
    end_time = Column(String(5), nullable=True, comment="HH:MM")
    memo = Column(Text, nullable=True)
    source = Column(String(50), nullable=True, comment="생성 출처 태그")

    def __repr__(self):
        return f"<Schedule(id={self.id}, date={self.date}, title='{self.title}')>"
