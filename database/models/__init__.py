from database.models.base import Base
from database.models.goal import Goal
from database.models.habit import Habit, HabitLog
from database.models.list_items import Todo, WishItem, Routine, FeatureRequest
from database.models.journal import DiaryEntry, MonthlyGoal, WeeklyGoal, BudgetEntry, Schedule

__all__ = [
    "Base",
    "Goal",
    "Habit",
    "HabitLog",
    "Todo",
    "WishItem",
    "Routine",
    "FeatureRequest",
    "DiaryEntry",
    "MonthlyGoal",
    "WeeklyGoal",
    "BudgetEntry",
    "Schedule",
]
