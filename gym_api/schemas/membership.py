from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from gym_api.schemas.base import WireModel


class MembershipBase(WireModel):
    member_id: int
    start_date: datetime
    end_date: datetime
    payment_type: str = Field(..., examples=["Monthly"])
    is_active: bool = False


class MembershipRequest(MembershipBase):
    membership_id: int | None = None


class MembershipResponse(MembershipBase):
    membership_id: int

    model_config = ConfigDict(from_attributes=True)


# 활성 회원권 + 회원 이름 (members 테이블 inner join)
class ActiveMembershipResponse(BaseModel):
    membership_id: int
    member_name: str
    start_date: datetime
    end_date: datetime
    payment_type: str

    model_config = ConfigDict(from_attributes=True)


class InactiveMembershipResponse(ActiveMembershipResponse):
    pass


# 특정 회원의 회원권 목록 (회원 이름 없이)
class UserMembershipResponse(BaseModel):
    membership_id: int
    start_date: datetime
    end_date: datetime
    payment_type: str

    model_config = ConfigDict(from_attributes=True)
