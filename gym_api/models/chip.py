from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from gym_api.db.base import Base


class Chip(Base):
    """출입 칩 레코드.

    member_id: 칩 소유 회원 (reassign_member 로만 부분 변경)
    chip_info: 칩에 대한 자유 텍스트 (예: 'VIP Access')
    """

    __tablename__ = "chips"

    chip_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    member_id: Mapped[int] = mapped_column(Integer, index=True, nullable=False)
    chip_info: Mapped[str | None] = mapped_column(String(255), nullable=True)

    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
