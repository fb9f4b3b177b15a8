"""
services/chip.py

출입 칩(Chip) 서비스.

주요 기능:
- 공통 CRUD
- 활성 / 비활성 칩 목록 (소유 회원 이름 포함)
- 회원 키로 칩 정보(chip_info) 조회
- 칩 소유 회원 변경 (member_id 만 변경)

설계 원칙:
- 한 회원에게 칩이 여러 개면 chip_id 가 가장 작은 칩을 기준으로 함
- 소유 회원 변경 대상 칩이 없으면 NotFoundError 발생

관련 파일:
- gym_api.models.chip      : Chip 모델
- gym_api.schemas.chip     : projection 스키마
- gym_api.routers.chips    : 칩 API

"""

import logging

from sqlalchemy import select

from gym_api.models.chip import Chip
from gym_api.models.member import Member
from gym_api.schemas.chip import ActiveChipResponse, InactiveChipResponse
from gym_api.services.base import CrudService, NotFoundError


logger = logging.getLogger(__name__)


class ChipService(CrudService[Chip]):
    model = Chip

    def _by_activity(self, is_active: bool):
        return self.db.execute(
            select(
                Chip.chip_id,
                (Member.first_name + " " + Member.last_name).label("owner_full_name"),
                Chip.chip_info,
            )
            .join(Member, Member.member_id == Chip.member_id)
            .where(Chip.is_active.is_(is_active))
            .order_by(Chip.chip_id)
        ).all()

    def get_active(self) -> list[ActiveChipResponse]:
        return [ActiveChipResponse.model_validate(row) for row in self._by_activity(True)]

    def get_inactive(self) -> list[InactiveChipResponse]:
        return [InactiveChipResponse.model_validate(row) for row in self._by_activity(False)]

    def get_chip_info_by_member_id(self, member_id: int) -> str | None:
        chip = self.db.scalar(
            select(Chip)
            .where(Chip.member_id == member_id)
            .order_by(Chip.chip_id)
            .limit(1)
        )
        return chip.chip_info if chip else None

    def reassign_member(self, chip_id: int, new_member_id: int) -> Chip:
        chip = self.get_by_id(chip_id)
        if chip is None:
            raise NotFoundError(f"Chip {chip_id} not found")

        chip.member_id = new_member_id
        self._commit()
        self.db.refresh(chip)

        logger.info("Chip %s reassigned to member %s", chip_id, new_member_id)
        return chip
