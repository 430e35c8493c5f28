"""
가계부 라우터 (월 단위)
"""

from typing import List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from database.core.connection import get_db
from database.crud import journal
from api.models import BudgetWrite, BudgetRead
from api.routers.notes import YEAR_MONTH_PATTERN

router = APIRouter()


@router.get("", response_model=List[BudgetRead])
def list_budget_entries(db: Session = Depends(get_db)):
    """최근 24개월 (월 내림차순)"""
    return journal.get_recent_budget_entries(db, limit=24)


@router.get("/{year_month}", response_model=BudgetRead)
def get_budget_entry(
    year_month: str = Path(..., pattern=YEAR_MONTH_PATTERN),
    db: Session = Depends(get_db),
):
    db_entry = journal.get_budget_entry(db, year_month)
    if db_entry is None:
        return BudgetRead(year_month=year_month)
    return db_entry


@router.put("/{year_month}", response_model=BudgetRead)
def put_budget_entry(
    payload: BudgetWrite,
    year_month: str = Path(..., pattern=YEAR_MONTH_PATTERN),
    db: Session = Depends(get_db),
):
    """전체 교체 - 보내지 않은 금액은 null"""
    return journal.upsert_budget_entry(db, year_month, payload.model_dump())
