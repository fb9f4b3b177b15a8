import datetime

from pydantic import ConfigDict, Field

from gym_api.schemas.base import WireModel


class MemberBase(WireModel):
    first_name: str = Field(..., min_length=1, examples=["Alice"])
    last_name: str = Field(..., min_length=1, examples=["Smith"])
    date_of_birth: datetime.date | None = None
    email: str | None = Field(default=None, examples=["alice@gym.com"])
    phone_number: str | None = None


# POST / PUT 공용 요청 바디
# - POST: member_id 생략 시 DB가 부여
# - PUT : member_id 가 경로의 id와 다르면 400
class MemberRequest(MemberBase):
    member_id: int | None = None


class MemberResponse(MemberBase):
    member_id: int

    model_config = ConfigDict(from_attributes=True)
