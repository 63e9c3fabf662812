# -------------------------------------------------------
# logging_config.py - 루트 로거 설정
# -------------------------------------------------------

import logging
from pathlib import Path
from typing import Optional


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """
    루트 로거에 콘솔 핸들러(와 선택적으로 파일 핸들러)를 붙입니다.

    - 이미 핸들러가 있으면 아무것도 하지 않음 (테스트/재import 시 중복 방지)
    - level: "DEBUG", "INFO" 등 (대소문자 무관, 잘못된 값이면 INFO)
    - logfile: 로그 파일 경로. 없으면 콘솔만 사용
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
