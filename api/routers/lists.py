"""
할 일 / 위시 항목 / 루틴 / 기능 요청 라우터
"""

from typing import List, Optional

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from database.core.connection import get_db
from database.crud import list_items
from api.models import (
    TodoCreate, TodoUpdate, TodoRead,
    WishItemCreate, WishItemUpdate, WishItemRead, WishListType,
    RoutineCreate, RoutineUpdate, RoutineRead,
    FeatureRequestCreate, FeatureRequestUpdate, FeatureRequestRead,
)
from api.routers.list_resource import create_list_router

todos_router = create_list_router(list_items.todos, TodoCreate, TodoUpdate, TodoRead)

feature_requests_router = create_list_router(
    list_items.feature_requests, FeatureRequestCreate, FeatureRequestUpdate, FeatureRequestRead
)

wish_items_router = create_list_router(
    list_items.wish_items, WishItemCreate, WishItemUpdate, WishItemRead, include_list=False
)

routines_router = create_list_router(
    list_items.routines, RoutineCreate, RoutineUpdate, RoutineRead, include_list=False
)


@wish_items_router.get("", response_model=List[WishItemRead])
def list_wish_items(
    list_type: WishListType = Query("wish", alias="type"),
    db: Session = Depends(get_db),
):
    """list_type(wish/bucket)별 항목"""
    return list_items.get_wish_items(db, list_type)


@routines_router.get("", response_model=List[RoutineRead])
def list_routines(
    day: Optional[int] = Query(None, ge=0, le=6, description="요일 번호 (0=일요일)"),
    db: Session = Depends(get_db),
):
    return list_items.get_routines(db, day)
