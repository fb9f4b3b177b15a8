"""
schemas/base.py

요청 바디 공통 베이스 모델.

기존 클라이언트는 PascalCase 키({"MemberID": 101, "Username": ...})로
요청을 보내므로, snake_case 필드 이름과 PascalCase 키를 모두 받는다.
응답은 항상 snake_case 필드 이름으로 직렬화된다.

- member_id      ← "member_id" / "MemberID" / "MemberId"
- new_member_id  ← "new_member_id" / "NewMemberID" / "NewMemberId"
- username       ← "username" / "Username"

"""

from pydantic import AliasChoices, AliasGenerator, BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal


def to_wire_alias(field_name: str) -> str | AliasChoices:
    pascal = to_pascal(field_name)
    if pascal.endswith("Id"):
        return AliasChoices(pascal[:-2] + "ID", pascal)
    return pascal


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=AliasGenerator(validation_alias=to_wire_alias),
        populate_by_name=True,
    )
