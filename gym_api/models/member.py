"""
member.py

회원(Member) 모델 정의 파일.

헬스장 회원의 기본 인적 사항을 관리하며,
회원권(Membership) / 출입 칩(Chip) / 결제(Payment)가
member_id로 이 테이블을 참조한다.

- member_id 는 DB가 부여하는 정수 키 (요청에 포함되면 그 값을 사용)
- 삭제는 Hard Delete이며, 참조하는 회원권/칩/결제는 정리하지 않음

"""

import datetime

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from gym_api.db.base import Base


class Member(Base):
    __tablename__ = "members"

    member_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    date_of_birth: Mapped[datetime.date | None] = mapped_column(Date, nullable=True)

    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(30), nullable=True)
