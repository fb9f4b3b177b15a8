"""
session.py

데이터베이스 엔진 및 세션(Session) 관리 파일.

SQLAlchemy Engine과 SessionLocal을 생성하여
요청 단위 세션(get_db 의존성)의 기반을 제공한다.

설계 원칙:
- DB 연결 설정은 한 곳에서만 정의
- SQLite 사용 시 check_same_thread 비활성화 (요청 스레드와 생성 스레드가 다름)
- pool_pre_ping=True로 유휴 연결 오류 방지

관련 파일:
- gym_api.core.config     : DATABASE_URL 설정
- gym_api.core.deps       : get_db 의존성

"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from gym_api.core.config import settings


def build_engine(database_url: str):
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    return create_engine(
        database_url,
        connect_args=connect_args,
        pool_pre_ping=True,
    )


engine = build_engine(settings.DATABASE_URL)

# 요청 단위로 사용할 세션 팩토리
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)
