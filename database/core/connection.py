"""
데이터베이스 연결 및 세션 관리
"""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.core.config import DATABASE_URL, DATABASE_ECHO


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite는 연결마다 외래키 검사를 켜야 ON DELETE CASCADE가 동작함
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """
    엔진 생성

    SQLite인 경우 외래키를 활성화하고, 메모리 DB는 모든 세션이
    같은 연결을 공유하도록 StaticPool을 사용합니다.
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool
        db_engine = create_engine(url, echo=echo, **kwargs)
        event.listen(db_engine, "connect", _enable_sqlite_foreign_keys)
        return db_engine

    return create_engine(
        url,
        echo=echo,
        pool_pre_ping=True,  # 연결 유효성 검사
    )


# 엔진 생성
engine = create_db_engine(DATABASE_URL, echo=DATABASE_ECHO)

# 세션 팩토리 생성
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """데이터베이스 세션 생성 (의존성 주입용)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
