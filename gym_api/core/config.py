"""
config.py

애플리케이션 전역 설정(Configuration) 관리 파일.

.env 및 환경 변수를 Pydantic BaseSettings로 로드하여
하나의 Settings 객체로 제공한다.

주요 설정 항목:
- 데이터베이스 연결 정보
- JWT 서명 키 / 만료 시간
- 로그인 허용 계정(LOGIN_USERNAME / LOGIN_PASSWORD)
- 로깅 레벨 / 로그 파일
- CORS 허용 도메인 목록

설계 원칙:
- 모든 환경 변수는 이 파일을 통해서만 접근
- 토큰 발급 / 로그인 검증 로직은 Settings 객체를 인자로 전달받음
- 설정 값은 런타임 중 변경되지 않는 불변 객체로 취급

관련 파일:
- gym_api.main             : CORS / 로깅 초기화
- gym_api.core.security    : JWT_KEY / 만료 설정 사용
- gym_api.services.auth    : 로그인 계정 비교
- gym_api.db.session       : DATABASE_URL 사용

"""

from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# JWT_KEY 미설정 시 사용되는 개발용 기본 키 (운영 환경에서는 반드시 교체)
DEFAULT_JWT_KEY = "8Zz5tw0Ionm3XPZZfN0NOmAHsUBT8E8Ff6a2"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    PROJECT_NAME: str = "Gym API"

    DATABASE_URL: str = "sqlite:///./gym.db"

    JWT_KEY: str = DEFAULT_JWT_KEY
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # 로그인 허용 계정 - 둘 중 하나라도 비어 있으면 로그인은 항상 실패
    LOGIN_USERNAME: str | None = None
    LOGIN_PASSWORD: str | None = None

    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None

    # CORS 허용 도메인 (프론트엔드 주소)
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    # Heroku/Render 스타일 postgres:// 주소 호환
    @field_validator("DATABASE_URL")
    @classmethod
    def _normalize_database_url(cls, value: str) -> str:
        if value.startswith("postgres://"):
            return value.replace("postgres://", "postgresql://", 1)
        return value

    @property
    def uses_default_jwt_key(self) -> bool:
        return self.JWT_KEY == DEFAULT_JWT_KEY


# 애플리케이션 전역에서 import하여 사용하는 Settings 인스턴스
# 실행 시 한 번만 생성됨
settings = Settings()
