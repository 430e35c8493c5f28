"""
Techo Config Package

Pydantic 기반 통합 설정 관리

사용 예:
    from config import settings, db_config, server_config

    # 타입 안전한 접근
    connection_url = db_config.database_url
    port = server_config.api_port  # int 타입 보장
"""

from config.settings import (
    Settings,
    DatabaseConfig,
    ServerConfig,
    LoggingConfig,
    settings,
    db_config,
    server_config,
    logging_config,
)

__all__ = [
    # 설정 클래스
    "Settings",
    "DatabaseConfig",
    "ServerConfig",
    "LoggingConfig",
    # 전역 인스턴스
    "settings",
    "db_config",
    "server_config",
    "logging_config",
]

__version__ = "0.1.0"
