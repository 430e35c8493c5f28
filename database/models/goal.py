"""
Techo - 계층형 목표(WBS) 모델 정의
SQLAlchemy ORM을 사용한 Goals 테이블 정의
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from database.models.base import Base


class Goal(Base):
    """목표 테이블 - epic ⊇ story ⊇ task ⊇ subtask 계층을 parent_id로 표현"""

    __tablename__ = "goals"

    id = Column(Integer, primary_key=True, autoincrement=True, comment="목표 고유 식별 번호")
    parent_id = Column(
        Integer,
        ForeignKey("goals.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
        comment="상위 목표 FK (루트는 NULL)",
    )
    title = Column(String(255), nullable=False, comment="목표 제목")
    issue_type = Column(String(20), nullable=False, default="task", comment="epic/story/task/subtask")
    status = Column(String(20), nullable=False, default="todo", comment="todo/in_progress/done")
    priority = Column(String(20), nullable=False, default="medium", comment="high/medium/low")
    category = Column(String(100), nullable=False, default="", comment="분류")
    start_date = Column(Date, nullable=False, comment="시작일 (포함)")
    end_date = Column(Date, nullable=False, comment="종료일 (포함)")
    progress = Column(Integer, nullable=False, default=0, comment="진행률 0-100")
    color = Column(String(20), nullable=False, default="amber", comment="팔레트 색상 태그")
    memo = Column(Text, nullable=True, comment="메모")
    note = Column(Text, nullable=True, comment="리치 텍스트 블록 트리 (JSON 문자열)")
    sort_order = Column(Integer, nullable=False, default=0, comment="형제 간 표시 순서")
    scheduled_time = Column(String(5), nullable=True, comment="예정 시각 HH:MM")
    scheduled_duration = Column(Integer, nullable=True, comment="예정 소요 시간(분)")
    created_at = Column(DateTime, nullable=False, default=datetime.now, comment="생성 시각")

    # 자기 참조 (1:N), 삭제 시 하위 목표도 함께 삭제
    children = relationship(
        "Goal",
        back_populates="parent",
        cascade="all, delete",
        passive_deletes=True,
    )
    parent = relationship("Goal", back_populates="children", remote_side=[id])

    def __repr__(self):
        return (
            f"<Goal(id={self.id}, parent_id={self.parent_id}, title='{self.title}', "
            f"{self.start_date}~{self.end_date})>"
        )
