"""
auth.py

인증(Authentication) API.

설정에 등록된 계정과 일치하면 JWT Access Token을 발급한다.
발급된 토큰은 Authorization: Bearer 헤더로 다른 API 호출 시 사용한다.

- 로그인 성공: 200 {"token": "..."}
- 로그인 실패: 401 "Invalid credentials"
- 토큰 만료: 발급 후 1시간 (재발급 / 로그아웃 없음)

관련 파일:
- gym_api.services.auth     : 자격 증명 비교 및 토큰 발급
- gym_api.core.deps         : Bearer 토큰 검증 의존성

"""

from fastapi import APIRouter, Depends, HTTPException, status

from gym_api.core.deps import get_auth_service
from gym_api.schemas.auth import LoginRequest, TokenResponse
from gym_api.services.auth import AuthService, InvalidCredentialsError

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
def login(data: LoginRequest, service: AuthService = Depends(get_auth_service)):
    try:
        return service.authenticate(data.username, data.password)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
