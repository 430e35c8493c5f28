"""
Database 패키지 초기화
"""

from database.models import Base, Goal, Habit, HabitLog
from database.core.connection import engine, SessionLocal, get_db, create_db_engine
from database import crud

__all__ = [
    "Base",
    "Goal",
    "Habit",
    "HabitLog",
    "engine",
    "SessionLocal",
    "get_db",
    "create_db_engine",
    "crud",
]
