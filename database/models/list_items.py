"""
Techo - 수동 정렬 목록 모델 정의

할 일, 위시/버킷 리스트, 루틴, 기능 요청은 모두 sort_order로
사용자가 직접 순서를 정하는 평면 목록입니다.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Boolean, CheckConstraint
from database.models.base import Base


class Todo(Base):
    """할 일 테이블"""

    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    done = Column(Boolean, nullable=False, default=False)
    due_date = Column(Date, nullable=True)
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=datetime.now)

    def __repr__(self):
        return f"<Todo(id={self.id}, title='{self.title}', done={self.done})>"


class WishItem(Base):
    """위시 리스트 / 버킷 리스트 항목 (list_type으로 구분)"""

    __tablename__ = "wish_items"
    __table_args__ = (
        CheckConstraint("list_type IN ('wish', 'bucket')", name="ck_wish_items_list_type"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    list_type = Column(String(10), nullable=False, default="wish")
    title = Column(String(255), nullable=False)
    price = Column(Integer, nullable=True)
    url = Column(Text, nullable=True)
    deadline = Column(Date, nullable=True)
    memo = Column(Text, nullable=True)
    done = Column(Boolean, nullable=False, default=False)
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=datetime.now)

    def __repr__(self):
        return f"<WishItem(id={self.id}, list_type='{self.list_type}', title='{self.title}')>"


class Routine(Base):
    """반복 루틴 (요일별 시간대)"""

    __tablename__ = "routines"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    start_time = Column(String(5), nullable=True, comment="HH:MM")
    end_time = Column(String(5), nullable=True, comment="HH:MM")
    day_of_week = Column(String(20), nullable=False, default="", comment="요일 번호 목록 (0=일요일, 쉼표 구분)")
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=datetime.now)

    @property
    def weekdays(self):
        return [d.strip() for d in (self.day_of_week or "").split(",") if d.strip()]

    def __repr__(self):
        return f"<Routine(id={self.id}, name='{self.name}', days='{self.day_of_week}')>"


class FeatureRequest(Base):
    """내부 기능 요청 백로그"""

    __tablename__ = "feature_requests"
    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'in_progress', 'done', 'rejected')",
            name="ck_feature_requests_status",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    status = Column(String(20), nullable=False, default="pending")
    commit_message = Column(Text, nullable=False, default="")
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=datetime.now)

    def __repr__(self):
        return f"<FeatureRequest(id={self.id}, title='{self.title}', status='{self.status}')>"
