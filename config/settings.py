"""
Techo 프로젝트 통합 설정 관리

Pydantic BaseSettings를 사용하여 타입 안전성과 자동 검증을 제공합니다.

사용 예:
    from config.settings import settings, db_config, server_config

    # 타입 안전한 접근
    db_url = db_config.database_url
    port = server_config.api_port  # int 타입 보장
"""

from typing import List, Literal, Optional
from pathlib import Path
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseConfig(BaseSettings):
    """데이터베이스 설정 (기본: 단일 SQLite 파일)"""

    database_url: str = Field(
        default="sqlite:///./data/techo.db",
        description="SQLAlchemy 연결 URL"
    )
    database_echo: bool = Field(default=False, description="SQL 쿼리 로깅 여부")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def sqlite_path(self) -> Optional[Path]:
        """SQLite 파일 경로 (메모리 DB 또는 다른 DB면 None)"""
        if not self.is_sqlite:
            return None
        path = self.database_url.split("///", 1)[-1]
        if not path or path == ":memory:" or path == self.database_url:
            return None
        return Path(path)


class ServerConfig(BaseSettings):
    """API 서버 설정"""

    api_host: str = Field(default="0.0.0.0", description="바인드 호스트")
    api_port: int = Field(default=3001, description="바인드 포트")
    cors_origins: List[str] = Field(
        default_factory=lambda: ["*"],
        description="CORS 허용 origin 목록"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


class LoggingConfig(BaseSettings):
    """로깅 설정"""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="루트 로거 레벨"
    )
    logs_dir: Optional[Path] = Field(
        default=None,
        description="로그 파일 디렉토리 (없으면 콘솔만 사용)"
    )
    log_max_bytes: int = Field(default=10 * 1024 * 1024, description="로그 파일 최대 크기")
    log_backup_count: int = Field(default=5, description="보관할 로그 파일 수")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """소문자 레벨 이름도 허용"""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("logs_dir", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """문자열을 Path 객체로 변환"""
        if isinstance(v, str):
            return Path(v) if v else None
        return v


class Settings:
    """
    통합 설정 클래스

    모든 설정 카테고리를 하나로 묶어 제공합니다.
    """

    def __init__(self):
        """설정 초기화 - 앱 시작 시 모든 값 검증"""
        self.database = DatabaseConfig()
        self.server = ServerConfig()
        self.logging = LoggingConfig()

    def print_config(self):
        """설정 정보 출력"""
        print("=" * 60)
        print("Techo 설정 정보")
        print("=" * 60)

        print("\n[Database]")
        print(f"  URL: {self.database.database_url}")
        print(f"  Echo: {self.database.database_echo}")

        print("\n[Server]")
        print(f"  Bind: {self.server.api_host}:{self.server.api_port}")
        print(f"  CORS: {', '.join(self.server.cors_origins)}")

        print("\n[Logging]")
        print(f"  Level: {self.logging.log_level}")
        print(f"  Logs dir: {self.logging.logs_dir or '(console only)'}")

        print("=" * 60)


# 전역 설정 인스턴스 (앱 시작 시 한 번만 생성)
settings = Settings()

# 개별 설정 접근을 위한 편의 변수
db_config = settings.database
server_config = settings.server
logging_config = settings.logging


if __name__ == "__main__":
    settings.print_config()
