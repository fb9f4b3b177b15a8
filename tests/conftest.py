import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from gym_api.main import app as fastapi_app
from gym_api.core.deps import get_db, get_settings
from gym_api.core.security import create_access_token
from gym_api.db.base import Base
from gym_api.db.seed import seed_demo_data
from tests.helpers import TEST_USERNAME, test_settings

# ✅ 모델 import (Base.metadata에 테이블 등록)
import gym_api.models.member  # noqa: F401
import gym_api.models.membership  # noqa: F401
import gym_api.models.chip  # noqa: F401
import gym_api.models.payment  # noqa: F401

# 인메모리 SQLite - 모든 세션이 같은 커넥션을 공유해야 테이블이 보임
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def reset_tables():
    """각 테스트마다 스키마를 새로 생성"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture()
def db_session():
    """테스트에서 직접 DB 조작할 때 쓰는 세션"""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def seeded(db_session):
    """회원 101/102, 회원권 201/202, 칩 301/302"""
    seed_demo_data(db_session)
    return db_session


@pytest.fixture()
def client():
    fastapi_app.dependency_overrides[get_db] = override_get_db
    fastapi_app.dependency_overrides[get_settings] = lambda: test_settings
    with TestClient(fastapi_app) as c:
        yield c
    fastapi_app.dependency_overrides.clear()


@pytest.fixture()
def token():
    return create_access_token(TEST_USERNAME, test_settings)
