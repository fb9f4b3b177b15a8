"""
membership.py

회원권(Membership) 모델 정의 파일.

- member_id  : 회원 참조 (FK 제약 없음, 존재하지 않는 회원을 가리킬 수 있음)
- is_active  : 호출자가 직접 설정하는 플래그 (start_date / end_date 로 계산하지 않음)
- payment_type : "Monthly" / "Annual" 등 자유 텍스트

"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from gym_api.db.base import Base


class Membership(Base):
    __tablename__ = "memberships"

    membership_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    member_id: Mapped[int] = mapped_column(Integer, index=True, nullable=False)

    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    payment_type: Mapped[str] = mapped_column(String(50), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
