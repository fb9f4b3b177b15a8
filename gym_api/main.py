"""
main.py

FastAPI 애플리케이션 진입점(Entry Point).

서버 실행 시 가장 먼저 로드되며,
로깅 / CORS / 라우터 / 공통 예외 처리를 조립한다.

주요 역할:
- 로깅 초기화
- FastAPI 앱 인스턴스 생성
- CORS 미들웨어 설정
- 도메인별 라우터(auth, members, memberships, chips, payments) 등록
- 요청 검증 실패를 400, DB 오류를 500 응답으로 변환
- 헬스 체크 및 DB 연결 상태 확인용 엔드포인트 제공

실행 방법
- (.venv) ~$ uvicorn gym_api.main:app --reload

관련 파일:
- gym_api.core.config        : 환경 변수 및 설정 로드
- gym_api.core.deps          : DB 세션 의존성
- gym_api.routers.*          : 기능별 API 라우터

"""

import logging

from fastapi import FastAPI, Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gym_api.core.config import settings
from gym_api.core.deps import get_db
from gym_api.core.logging_config import setup_logging
from gym_api.routers import auth, members, memberships, chips, payments

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    if settings.uses_default_jwt_key:
        logger.warning("JWT_KEY is not set; signing tokens with the built-in development key")

    app = FastAPI(title=settings.PROJECT_NAME)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth.router)
    app.include_router(members.router)
    app.include_router(memberships.router)
    app.include_router(chips.router)
    app.include_router(payments.router)

    # 요청 바디 / 경로 / 쿼리 검증 실패는 422 대신 400
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info("Rejected request %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=400,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    # 서비스에서 rollback 후 다시 던진 DB 예외를 500 으로 변환
    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        return JSONResponse(
            status_code=500,
            content={"detail": f"Database error: {type(exc).__name__}"},
        )

    """
    서버 헬스 체크 엔드포인트

    - 애플리케이션 프로세스가 정상 동작 중인지 확인 (인증 불필요)

    """
    @app.get("/health")
    def health():
        return {"status": "ok"}

    """
    데이터베이스 연결 상태 확인 엔드포인트

    - SELECT 1 쿼리로 DB 연결 여부 확인

    """
    @app.get("/db-ping")
    def db_ping(db: Session = Depends(get_db)):
        value = db.execute(text("SELECT 1")).scalar_one()
        return {"db": "ok", "value": value}

    return app


app = create_app()
