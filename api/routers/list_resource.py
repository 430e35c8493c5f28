"""
평면 목록 리소스 라우터 팩토리

하나의 ListResource에 대해 다섯 가지 엔드포인트를 만듭니다.
    GET    ""            목록
    POST   ""            생성 (201)
    PATCH  "/{item_id}"  부분 수정 (없으면 404)
    DELETE "/{item_id}"  삭제 (204, 멱등)
    POST   "/reorder"    정렬 순서 일괄 변경
"""

from typing import List, Type

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel
from sqlalchemy.orm import Session

from database.core.connection import get_db
from database.crud.list_resource import ListResource
from api.models import ReorderRequest, OkResponse


def create_list_router(
    resource: ListResource,
    create_model: Type[BaseModel],
    update_model: Type[BaseModel],
    read_model: Type[BaseModel],
    include_list: bool = True,
) -> APIRouter:
    """
    Args:
        resource: CRUD 대상 ListResource
        create_model / update_model / read_model: 요청/응답 스키마
        include_list: False면 목록 엔드포인트를 만들지 않음 (필터가 필요한 리소스용)
    """
    router = APIRouter()

    if include_list:
        @router.get("", response_model=List[read_model])
        def list_items(db: Session = Depends(get_db)):
            return resource.list(db)

    @router.post("", response_model=read_model, status_code=201)
    def create_item(payload: create_model, db: Session = Depends(get_db)):
        return resource.create(db, payload.model_dump())

    @router.post("/reorder", response_model=OkResponse)
    def reorder_items(payload: ReorderRequest, db: Session = Depends(get_db)):
        resource.reorder(db, payload.pairs())
        return OkResponse()

    @router.patch("/{item_id}", response_model=read_model)
    def update_item(item_id: int, payload: update_model, db: Session = Depends(get_db)):
        db_item = resource.update(db, item_id, payload.model_dump(exclude_unset=True))
        if db_item is None:
            raise HTTPException(status_code=404, detail="Not found")
        return db_item

    @router.delete("/{item_id}", status_code=204)
    def delete_item(item_id: int, db: Session = Depends(get_db)):
        resource.delete(db, item_id)
        return Response(status_code=204)

    return router
