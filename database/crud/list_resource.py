"""
평면 목록 리소스의 공통 CRUD + 수동 정렬

할 일, 위시 항목, 루틴, 기능 요청, 습관은 모두 같은 계약을 따릅니다.
- list: sort_order ASC, created_at ASC
- create: sort_order = 같은 파티션의 max(sort_order) + 1 (비어 있으면 1)
- update: 생략한 필드는 유지 (patch.apply_patch)
- delete: 멱등
- reorder: (id, sort_order) 쌍을 하나의 트랜잭션으로 적용
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from database.crud.errors import NotFoundError
from database.crud.patch import apply_patch
from utils.logger import get_logger

logger = get_logger(__name__)


class ListResource:
    """
    sort_order 컬럼을 가진 모델에 대한 목록 CRUD

    Args:
        model: SQLAlchemy 모델 클래스 (id, sort_order, created_at 필요)
        partition_column: sort_order를 나눠 매기는 컬럼 이름 (예: list_type, parent_id)
        updatable: patch로 바꿀 수 있는 필드 목록 (None이면 전체 컬럼)
    """

    def __init__(
        self,
        model,
        partition_column: Optional[str] = None,
        updatable: Optional[Sequence[str]] = None,
    ):
        self.model = model
        self.partition_column = partition_column
        self.updatable = tuple(updatable) if updatable is not None else None

    @property
    def name(self) -> str:
        return self.model.__name__

    def _ordered(self, query):
        return query.order_by(
            self.model.sort_order.asc(),
            self.model.created_at.asc(),
            self.model.id.asc(),
        )

    def _partition_filter(self, query, partition_value):
        if self.partition_column is None:
            return query
        column = getattr(self.model, self.partition_column)
        if partition_value is None:
            return query.filter(column.is_(None))
        return query.filter(column == partition_value)

    def list(self, db: Session, partition_value: Any = None, all_partitions: bool = True) -> List:
        """전체 항목 조회 (all_partitions=False면 해당 파티션만)"""
        query = db.query(self.model)
        if not all_partitions:
            query = self._partition_filter(query, partition_value)
        return self._ordered(query).all()

    def get(self, db: Session, item_id: int):
        return db.query(self.model).filter(self.model.id == item_id).first()

    def next_sort_order(self, db: Session, partition_value: Any = None) -> int:
        query = db.query(func.coalesce(func.max(self.model.sort_order), 0))
        query = self._partition_filter(query, partition_value)
        return query.scalar() + 1

    def create(self, db: Session, fields: Dict[str, Any]):
        """항목 생성 - sort_order는 항상 파티션 끝에 붙임, None인 필드는 컬럼 기본값 사용"""
        values = {
            key: value for key, value in fields.items()
            if key != "sort_order" and value is not None
        }
        partition_value = values.get(self.partition_column) if self.partition_column else None

        db_item = self.model(**values)
        db_item.sort_order = self.next_sort_order(db, partition_value)
        db.add(db_item)
        db.commit()
        db.refresh(db_item)
        return db_item

    def update(self, db: Session, item_id: int, fields: Dict[str, Any]):
        """부분 수정 - 없는 id면 None"""
        db_item = self.get(db, item_id)
        if db_item is None:
            logger.warning("%s %s not found for update", self.name, item_id)
            return None
        apply_patch(db_item, fields, allowed=self.updatable)
        db.commit()
        db.refresh(db_item)
        return db_item

    def delete(self, db: Session, item_id: int) -> bool:
        """삭제 - 이미 없으면 False (에러 아님)"""
        db_item = self.get(db, item_id)
        if db_item is None:
            return False
        db.delete(db_item)
        db.commit()
        return True

    def reorder(self, db: Session, orders: Iterable[Tuple[int, int]]) -> int:
        """
        정렬 순서 일괄 변경

        하나라도 없는 id가 있으면 NotFoundError를 올리고 전부 롤백합니다.
        전달된 id 집합이 전체 목록과 일치하는지는 검사하지 않습니다.

        Returns:
            변경한 항목 수
        """
        count = 0
        try:
            for item_id, sort_order in orders:
                updated = (
                    db.query(self.model)
                    .filter(self.model.id == item_id)
                    .update({"sort_order": sort_order}, synchronize_session=False)
                )
                if updated == 0:
                    raise NotFoundError(self.name, item_id)
                count += 1
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.expire_all()
        logger.debug("%s reordered %d items", self.name, count)
        return count
