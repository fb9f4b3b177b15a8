"""
base.py

SQLAlchemy ORM Base 정의 파일.

모든 모델(Member, Membership, Chip, Payment)은
이 Base를 상속받으며, Alembic 마이그레이션 또한
이 Base의 메타데이터를 기준으로 동작한다.

관련 파일:
- gym_api.models.*        : 모든 ORM 모델
- alembic/env.py          : 마이그레이션 메타데이터 로드

"""

from sqlalchemy.orm import declarative_base

# 모든 ORM 모델이 상속받는 Base 클래스
Base = declarative_base()
