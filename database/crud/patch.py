"""
부분 수정(patch) 병합

요청 DTO에서 `model_dump(exclude_unset=True)`로 꺼낸 dict만 넘겨받습니다.
- 키가 없으면: 기존 값 유지
- 키가 있으면(None 포함): 덮어쓰기
단, NOT NULL 컬럼에 None이 오면 기존 값을 유지합니다.
"""

from typing import Any, Dict, Iterable, Optional

from sqlalchemy import inspect


def nullable_columns(model) -> set:
    return {column.key for column in inspect(model).columns if column.nullable}


def apply_patch(record, fields: Dict[str, Any], allowed: Optional[Iterable[str]] = None):
    """record에 fields를 병합하고 record를 반환"""
    allowed_keys = set(allowed) if allowed is not None else None
    nullable = nullable_columns(type(record))

    for key, value in fields.items():
        if allowed_keys is not None and key not in allowed_keys:
            continue
        if value is None and key not in nullable:
            continue
        setattr(record, key, value)
    return record
