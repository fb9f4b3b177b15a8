"""
security.py

JWT Access Token 생성/검증을 담당하는 보안 유틸리티 모음.

라우터나 비즈니스 로직은 포함하지 않고
토큰 발급(create_access_token)과 검증(decode_access_token)만 제공한다.

주요 기능:
- 사용자 이름(username)을 담은 JWT Access Token 생성
- Access Token 디코딩 및 검증 (서명 / 만료)

설계 원칙:
- 서명 키 / 알고리즘 / 만료 시간은 전달받은 Settings에서만 읽음
- 시간 기반(exp) 만료는 UTC 기준으로 처리
- Refresh Token / 토큰 폐기 기능은 제공하지 않음

관련 파일:
- gym_api.core.config      : JWT_KEY / ALGORITHM / 만료 설정
- gym_api.core.deps        : Bearer 토큰 검증 의존성
- gym_api.services.auth    : 로그인 성공 시 토큰 발급

"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError

from gym_api.core.config import Settings


"""
Access Token 생성 함수

- sub / name : 로그인한 사용자 이름
- iat        : 발급 시각 (UTC timestamp)
- exp        : 만료 시각 (기본 발급 후 ACCESS_TOKEN_EXPIRE_MINUTES)

"""

def create_access_token(username: str, settings: Settings, expires_delta: Optional[timedelta] = None) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    payload = {
        "sub": username,
        "name": username,
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(payload, settings.JWT_KEY, algorithm=settings.ALGORITHM)


"""
Access Token 디코딩 및 검증 함수

- 서명 / 만료(exp) 검증은 jose에서 수행
- sub(username)가 없으면 JWTError 발생
- 검증에 성공하면 username 반환

"""

def decode_access_token(token: str, settings: Settings) -> str:
    payload = jwt.decode(token, settings.JWT_KEY, algorithms=[settings.ALGORITHM])
    username = payload.get("sub")
    if not username:
        raise JWTError("Token has no subject")
    return username
