"""
Pytest configuration and fixtures

모든 테스트는 테스트마다 새로 만든 SQLite 메모리 DB를 사용합니다.
"""

import sys
from pathlib import Path

import pytest
from sqlalchemy.orm import sessionmaker

# 프로젝트 루트 경로 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from database.core.connection import create_db_engine, get_db
from database.models import Base


@pytest.fixture
def engine():
    """테스트 전용 메모리 DB 엔진 (외래키 활성화)"""
    db_engine = create_db_engine("sqlite://")
    Base.metadata.create_all(bind=db_engine)
    yield db_engine
    Base.metadata.drop_all(bind=db_engine)
    db_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    """CRUD 계층 테스트용 세션"""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    """
    FastAPI TestClient

    lifespan(로깅/파일 DB 생성)을 거치지 않도록 with 블록 없이 생성하고,
    get_db 의존성만 테스트 DB로 교체합니다.
    """
    from fastapi.testclient import TestClient
    from api.main import app

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
