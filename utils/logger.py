"""
Logger - 로깅 설정 중앙화

콘솔 출력은 항상, 파일 출력은 logs_dir이 설정된 경우에만 사용합니다.

사용 예:
    from utils.logger import setup_logging, get_logger

    setup_logging("INFO")
    logger = get_logger(__name__)
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"


def setup_logging(
    level: str = "INFO",
    logs_dir: Optional[Union[str, Path]] = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> logging.Logger:
    """
    루트 로거 설정

    여러 번 호출해도 핸들러가 중복되지 않도록 기존 핸들러를 제거합니다.

    Args:
        level: 로그 레벨 이름 (DEBUG, INFO, ...)
        logs_dir: 로그 파일 디렉토리 (None이면 파일 출력 안 함)
        max_bytes: 로그 파일 로테이션 크기
        backup_count: 보관할 로그 파일 수

    Returns:
        설정된 루트 로거
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root_logger.addHandler(console_handler)

    if logs_dir:
        logs_path = Path(logs_dir)
        logs_path.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            logs_path / "techo.log",
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        root_logger.addHandler(file_handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """이름 있는 로거 반환"""
    return logging.getLogger(name)
