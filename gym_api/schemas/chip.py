from pydantic import BaseModel, ConfigDict, Field

from gym_api.schemas.base import WireModel


class ChipBase(WireModel):
    member_id: int
    chip_info: str | None = Field(default=None, examples=["VIP Access"])
    is_active: bool = False


class ChipRequest(ChipBase):
    chip_id: int | None = None


class ChipResponse(ChipBase):
    chip_id: int

    model_config = ConfigDict(from_attributes=True)


# PUT /api/chips/{id} 전용 - 칩 소유 회원만 변경
class ChipUpdateRequest(WireModel):
    chip_id: int
    new_member_id: int


class ActiveChipResponse(BaseModel):
    chip_id: int
    owner_full_name: str
    chip_info: str | None

    model_config = ConfigDict(from_attributes=True)


class InactiveChipResponse(ActiveChipResponse):
    pass
