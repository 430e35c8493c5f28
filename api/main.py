"""
FastAPI Backend for Techo

리소스별 라우터를 /api/<resource> 아래에 묶고,
저장소 계층 예외를 HTTP 상태 코드로 변환합니다.

- NotFoundError → 404
- InvalidHierarchyError → 400
- 요청 본문 타입 오류 → 422 (pydantic)
"""

import sys
from pathlib import Path
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Project root setup
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

# Load .env
load_dotenv(project_root / ".env")

from config import server_config, logging_config, settings, __version__
from database.crud.errors import NotFoundError, InvalidHierarchyError
from database.scripts.create_tables import create_db_tables
from utils.logger import setup_logging, get_logger
from api.routers import goals, habits, schedules, notes, budget, calendar
from api.routers.lists import (
    todos_router,
    wish_items_router,
    routines_router,
    feature_requests_router,
)

logger = get_logger(__name__)


# ============================================================================
# Application Lifespan
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI 라이프사이클 관리

    앱 시작 시 로깅을 설정하고 테이블이 없으면 생성합니다.
    """
    setup_logging(
        logging_config.log_level,
        logs_dir=logging_config.logs_dir,
        max_bytes=logging_config.log_max_bytes,
        backup_count=logging_config.log_backup_count,
    )

    logger.info("[🔧] Creating database tables...")
    create_db_tables()
    logger.info("[✅] Database ready")

    logger.info("[🚀] Techo API started on %s:%s", server_config.api_host, server_config.api_port)

    yield

    # Shutdown
    logger.info("[👋] FastAPI server shutting down...")


app = FastAPI(
    title="Techo API",
    description="Personal organizer backend: todos, diary, schedules, habits, goals (WBS), budget",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=server_config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Exception Handlers
# ============================================================================

@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    logger.warning("[⚠️] %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(InvalidHierarchyError)
async def invalid_hierarchy_handler(request: Request, exc: InvalidHierarchyError):
    logger.warning("[⚠️] %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


# ============================================================================
# API Endpoints
# ============================================================================

@app.get("/")
async def root():
    """Health check"""
    return {
        "status": "ok",
        "service": "Techo API",
        "version": __version__,
    }


app.include_router(todos_router, prefix="/api/todos", tags=["todos"])
app.include_router(wish_items_router, prefix="/api/wish-items", tags=["wish-items"])
app.include_router(routines_router, prefix="/api/routines", tags=["routines"])
app.include_router(feature_requests_router, prefix="/api/feature-requests", tags=["feature-requests"])
app.include_router(habits.router, prefix="/api/habits", tags=["habits"])
app.include_router(goals.router, prefix="/api/goals", tags=["goals"])
app.include_router(schedules.router, prefix="/api/schedules", tags=["schedules"])
app.include_router(notes.diary_router, prefix="/api/diary", tags=["diary"])
app.include_router(notes.monthly_goals_router, prefix="/api/monthly-goals", tags=["monthly-goals"])
app.include_router(notes.weekly_goals_router, prefix="/api/weekly-goals", tags=["weekly-goals"])
app.include_router(budget.router, prefix="/api/budget", tags=["budget"])
app.include_router(calendar.router, prefix="/api/calendar", tags=["calendar"])


if __name__ == "__main__":
    import uvicorn

    settings.print_config()
    uvicorn.run(
        "api.main:app",
        host=server_config.api_host,
        port=server_config.api_port,
        reload=False,
    )
