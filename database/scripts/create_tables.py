from database.core.config import db_config
from database.core.connection import engine
from database.models import Base


def create_db_tables(bind=None):
    """모든 테이블 생성 (SQLite면 DB 파일 디렉토리도 생성)"""
    sqlite_path = db_config.sqlite_path
    if bind is None and sqlite_path is not None:
        sqlite_path.parent.mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind=bind or engine)


if __name__ == "__main__":
    create_db_tables()
    print("Database tables created successfully.")
