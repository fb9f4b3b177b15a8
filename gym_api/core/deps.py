import logging
from typing import Generator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from sqlalchemy.orm import Session

from gym_api.core.config import Settings, settings as app_settings
from gym_api.core.security import decode_access_token
from gym_api.db.session import SessionLocal
from gym_api.services.auth import AuthService
from gym_api.services.chip import ChipService
from gym_api.services.member import MemberService
from gym_api.services.membership import MembershipService
from gym_api.services.payment import PaymentService

logger = logging.getLogger(__name__)

# Swagger Authorize에서 "Bearer 토큰" 입력받는 스키마
bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# 테스트에서 dependency_overrides 로 교체할 수 있도록 의존성으로 노출
def get_settings() -> Settings:
    return app_settings


def get_current_username(
    cred: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> str:
    if cred is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return decode_access_token(cred.credentials, settings)
    except JWTError as e:
        logger.warning("Rejected bearer token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )


def get_member_service(db: Session = Depends(get_db)) -> MemberService:
    return MemberService(db)


def get_membership_service(db: Session = Depends(get_db)) -> MembershipService:
    return MembershipService(db)


def get_chip_service(db: Session = Depends(get_db)) -> ChipService:
    return ChipService(db)


def get_payment_service(db: Session = Depends(get_db)) -> PaymentService:
    return PaymentService(db)


def get_auth_service(settings: Settings = Depends(get_settings)) -> AuthService:
    return AuthService(settings)
