from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from gym_api.db.base import Base


class Payment(Base):
    """회원 결제 레코드.

    - amount: 소수점 둘째 자리까지 저장
    - payment_method: CASH / CARD / TRANSFER 등 자유 텍스트
    """

    __tablename__ = "payments"

    payment_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    member_id: Mapped[int] = mapped_column(Integer, index=True, nullable=False)

    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    payment_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    payment_method: Mapped[str] = mapped_column(String(30), nullable=False)
