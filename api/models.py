"""
Pydantic models for FastAPI endpoints

핵심 원칙:
1. Create 모델: 선택 필드를 빼먹으면 기본값(None/빈 값)으로 관대하게 처리
2. Update 모델: 모든 필드가 선택이며, 라우터는 model_dump(exclude_unset=True)만 넘김
   → "보내지 않음"과 "null을 보냄"을 구분
3. Read 모델: ORM 객체에서 바로 변환 (from_attributes)
"""

from datetime import date, datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

IssueType = Literal["epic", "story", "task", "subtask"]
GoalStatus = Literal["todo", "in_progress", "done"]
Priority = Literal["high", "medium", "low"]
WishListType = Literal["wish", "bucket"]
FeatureRequestStatus = Literal["pending", "in_progress", "done", "rejected"]


class ORMModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# ============================================================================
# Common
# ============================================================================

class OrderItem(BaseModel):
    id: int
    sort_order: int


class ReorderRequest(BaseModel):
    """정렬 순서 일괄 변경 요청"""
    orders: List[OrderItem] = Field(default_factory=list, description="(id, sort_order) 목록")

    def pairs(self):
        return [(item.id, item.sort_order) for item in self.orders]


class OkResponse(BaseModel):
    ok: bool = True


# ============================================================================
# Goals
# ============================================================================

class GoalCreate(BaseModel):
    parent_id: Optional[int] = Field(default=None, description="상위 목표 ID")
    title: str = Field(..., description="목표 제목")
    issue_type: Optional[IssueType] = None
    status: Optional[GoalStatus] = None
    priority: Optional[Priority] = None
    category: Optional[str] = None
    start_date: date
    end_date: date
    progress: Optional[int] = Field(default=None, ge=0, le=100)
    color: Optional[str] = None
    memo: Optional[str] = None
    note: Optional[str] = Field(default=None, description="에디터 블록 트리 JSON 문자열")
    scheduled_time: Optional[str] = None
    scheduled_duration: Optional[int] = None


class GoalUpdate(BaseModel):
    parent_id: Optional[int] = None
    title: Optional[str] = None
    issue_type: Optional[IssueType] = None
    status: Optional[GoalStatus] = None
    priority: Optional[Priority] = None
    category: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    progress: Optional[int] = Field(default=None, ge=0, le=100)
    color: Optional[str] = None
    memo: Optional[str] = None
    note: Optional[str] = None
    sort_order: Optional[int] = None
    scheduled_time: Optional[str] = None
    scheduled_duration: Optional[int] = None


class GoalRead(ORMModel):
    id: int
    parent_id: Optional[int] = None
    title: str
    issue_type: str
    status: str
    priority: str
    category: str
    start_date: date
    end_date: date
    progress: int
    color: str
    memo: Optional[str] = None
    note: Optional[str] = None
    sort_order: int
    scheduled_time: Optional[str] = None
    scheduled_duration: Optional[int] = None
    created_at: datetime


class GoalTreeRead(BaseModel):
    goal: GoalRead
    depth: int
    progress: int = Field(..., description="자식 기준으로 집계한 진행률")
    children: List["GoalTreeRead"] = Field(default_factory=list)


# ============================================================================
# Flat list resources
# ============================================================================

class TodoCreate(BaseModel):
    title: str
    done: Optional[bool] = None
    due_date: Optional[date] = None


class TodoUpdate(BaseModel):
    title: Optional[str] = None
    done: Optional[bool] = None
    due_date: Optional[date] = None
    sort_order: Optional[int] = None


class TodoRead(ORMModel):
    id: int
    title: str
    done: bool
    due_date: Optional[date] = None
    sort_order: int
    created_at: datetime


class WishItemCreate(BaseModel):
    list_type: WishListType = "wish"
    title: str
    price: Optional[int] = None
    url: Optional[str] = None
    deadline: Optional[date] = None
    memo: Optional[str] = None


class WishItemUpdate(BaseModel):
    title: Optional[str] = None
    price: Optional[int] = None
    url: Optional[str] = None
    deadline: Optional[date] = None
    memo: Optional[str] = None
    done: Optional[bool] = None
    sort_order: Optional[int] = None


class WishItemRead(ORMModel):
    id: int
    list_type: str
    title: str
    price: Optional[int] = None
    url: Optional[str] = None
    deadline: Optional[date] = None
    memo: Optional[str] = None
    done: bool
    sort_order: int
    created_at: datetime


class RoutineCreate(BaseModel):
    name: str
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    day_of_week: Optional[str] = Field(default=None, description="요일 번호 목록 (0=일요일), 예: '1,3,5'")


class RoutineUpdate(BaseModel):
    name: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    day_of_week: Optional[str] = None
    sort_order: Optional[int] = None


class RoutineRead(ORMModel):
    id: int
    name: str
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    day_of_week: str
    sort_order: int
    created_at: datetime


class FeatureRequestCreate(BaseModel):
    title: str
    description: Optional[str] = None


class FeatureRequestUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[FeatureRequestStatus] = None
    commit_message: Optional[str] = None
    sort_order: Optional[int] = None


class FeatureRequestRead(ORMModel):
    id: int
    title: str
    description: str
    status: str
    commit_message: str
    sort_order: int
    created_at: datetime


class HabitCreate(BaseModel):
    name: str
    parent_id: Optional[int] = None
    duration: Optional[int] = None
    day_of_week: Optional[str] = None


class HabitUpdate(BaseModel):
    name: Optional[str] = None
    duration: Optional[int] = None
    day_of_week: Optional[str] = None
    sort_order: Optional[int] = None


class HabitRead(ORMModel):
    id: int
    name: str
    parent_id: Optional[int] = None
    duration: int
    day_of_week: str
    sort_order: int
    created_at: datetime


class HabitLogRequest(BaseModel):
    date: date


class HabitLogRead(ORMModel):
    habit_id: int
    date: date


class HabitLogToggleResponse(BaseModel):
    habit_id: int
    date: date
    deleted: bool = False


# ============================================================================
# Schedules
# ============================================================================

class ScheduleWrite(BaseModel):
    """생성과 전체 교체(PUT)에 같이 사용"""
    title: str
    date: date
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    memo: Optional[str] = None
    source: Optional[str] = None


class ScheduleRead(ORMModel):
    id: int
    title: str
    date: date
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    memo: Optional[str] = None
    source: Optional[str] = None


# ============================================================================
# Diary / notes / budget
# ============================================================================

class DiaryWrite(BaseModel):
    content: str = Field(default="", description="에디터 블록 트리 JSON 문자열")


class DiaryRead(ORMModel):
    date: date
    content: str
    updated_at: Optional[datetime] = None


class MonthlyGoalWrite(BaseModel):
    content: Optional[str] = None


class MonthlyGoalRead(ORMModel):
    year_month: str
    content: str
    updated_at: Optional[datetime] = None


class WeeklyGoalWrite(BaseModel):
    content: Optional[str] = None
    memo: Optional[str] = None


class WeeklyGoalRead(ORMModel):
    year_week: str
    content: str
    memo: Optional[str] = None
    updated_at: Optional[datetime] = None


class BudgetWrite(BaseModel):
    au_pay: Optional[int] = None
    mufg_billing: Optional[int] = None
    jcb_billing: Optional[int] = None
    minsin_balance: Optional[int] = None
    mufg_balance: Optional[int] = None
    jcb_skip: Optional[int] = None


class BudgetRead(ORMModel):
    year_month: str
    au_pay: Optional[int] = None
    mufg_billing: Optional[int] = None
    jcb_billing: Optional[int] = None
    minsin_balance: Optional[int] = None
    mufg_balance: Optional[int] = None
    jcb_skip: int = 0
    updated_at: Optional[datetime] = None


# ============================================================================
# Calendar
# ============================================================================

class CalendarEventRead(ORMModel):
    type: Literal["schedule", "goal"]
    id: int
    title: str
    date: date
    color: str
    end_date: Optional[date] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    status: Optional[str] = None
    issue_type: Optional[str] = None


class BandSegmentRead(ORMModel):
    id: int
    left: float
    width: float
    top: int
    height: int
    depth: int
    issue_type: str
    title: str
    has_children: bool
    epic_title: Optional[str] = None
    story_title: Optional[str] = None
    goal: GoalRead


class WeekLayoutResponse(BaseModel):
    week_start: date
    week_end: date
    days: List[date]
    height: int = Field(..., description="밴드 오버레이 전체 높이(px)")
    bands: List[BandSegmentRead] = Field(default_factory=list)


class MonthLayoutResponse(BaseModel):
    year: int
    month: int
    weeks: List[WeekLayoutResponse]
