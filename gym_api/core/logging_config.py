"""
logging_config.py

애플리케이션 로깅 설정.

루트 로거에 콘솔 핸들러(선택적으로 파일 핸들러)를 한 번만 붙인다.
포맷: 시각 [레벨] 로거 이름: 메시지

관련 파일:
- gym_api.main           : 앱 생성 시 setup_logging 호출
- gym_api.core.config    : LOG_LEVEL / LOG_FILE

"""

import logging
from pathlib import Path
from typing import Optional


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    logger = logging.getLogger()
    # 테스트 등에서 create_app이 반복 호출되어도 핸들러는 한 번만 등록
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
