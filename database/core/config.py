"""
데이터베이스 설정 관리

Pydantic BaseSettings 기반 설정(config.db_config)을 그대로 노출합니다.

    기존: DATABASE_URL
    권장: db_config.database_url
"""

from config import db_config

# 하위 호환성을 위한 변수
DATABASE_URL = db_config.database_url
DATABASE_ECHO = db_config.database_echo

__all__ = [
    "db_config",  # ✅ 권장
    "DATABASE_URL",
    "DATABASE_ECHO",
]
