"""
services/auth.py

로그인 자격 증명 확인 서비스.

설정(Settings)에 등록된 단일 계정(LOGIN_USERNAME / LOGIN_PASSWORD)과
요청 값을 비교하여, 일치하면 Access Token을 발급한다.

설계 원칙:
- 환경 변수를 직접 읽지 않고 생성 시 전달받은 Settings만 사용
- 계정 저장소 / 잠금 / 해싱 없음 (평문 비교, 비교 자체는 상수 시간)
- 계정이 설정되지 않았으면 모든 로그인 요청을 거부

관련 파일:
- gym_api.core.security    : 토큰 발급
- gym_api.routers.auth     : 로그인 API

"""

import logging
import secrets

from gym_api.core.config import Settings
from gym_api.core.security import create_access_token
from gym_api.schemas.auth import TokenResponse


logger = logging.getLogger(__name__)


class InvalidCredentialsError(Exception):
    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)
        self.message = message


def _matches(submitted: str, expected: str | None) -> bool:
    if expected is None:
        return False
    return secrets.compare_digest(submitted.encode("utf-8"), expected.encode("utf-8"))


class AuthService:
    def __init__(self, settings: Settings):
        self.settings = settings

    def authenticate(self, username: str, password: str) -> TokenResponse:
        # 두 값을 모두 비교한 뒤 판단 (어느 쪽이 틀렸는지 구분하지 않음)
        username_ok = _matches(username, self.settings.LOGIN_USERNAME)
        password_ok = _matches(password, self.settings.LOGIN_PASSWORD)

        if not (username_ok and password_ok):
            logger.warning("Rejected login for username=%r", username)
            raise InvalidCredentialsError()

        logger.info("Issued access token for username=%r", username)
        return TokenResponse(token=create_access_token(username, self.settings))
