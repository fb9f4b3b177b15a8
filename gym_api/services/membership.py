"""
services/membership.py

회원권(Membership) 서비스.

공통 CRUD 외에 회원 테이블과 join 하여
응답용 형태(projection)로 만드는 조회 기능을 담당한다.

주요 기능:
- 활성 / 비활성 회원권 목록 (회원 이름 포함)
- 특정 회원의 회원권 목록

설계 원칙:
- is_active 는 저장된 값만 사용 (날짜로 계산하지 않음)
- 회원이 존재하지 않는 회원권은 inner join 으로 제외

관련 파일:
- gym_api.models.membership    : Membership 모델
- gym_api.schemas.membership   : projection 스키마
- gym_api.routers.memberships  : 회원권 API

"""

from sqlalchemy import select

from gym_api.models.member import Member
from gym_api.models.membership import Membership
from gym_api.schemas.membership import (
    ActiveMembershipResponse,
    InactiveMembershipResponse,
    UserMembershipResponse,
)
from gym_api.services.base import CrudService


class MembershipService(CrudService[Membership]):
    model = Membership

    def _by_activity(self, is_active: bool):
        return self.db.execute(
            select(
                Membership.membership_id,
                (Member.first_name + " " + Member.last_name).label("member_name"),
                Membership.start_date,
                Membership.end_date,
                Membership.payment_type,
            )
            .join(Member, Member.member_id == Membership.member_id)
            .where(Membership.is_active.is_(is_active))
            .order_by(Membership.membership_id)
        ).all()

    def get_active(self) -> list[ActiveMembershipResponse]:
        return [ActiveMembershipResponse.model_validate(row) for row in self._by_activity(True)]

    def get_inactive(self) -> list[InactiveMembershipResponse]:
        return [InactiveMembershipResponse.model_validate(row) for row in self._by_activity(False)]

    def get_user_memberships(self, member_id: int) -> list[UserMembershipResponse]:
        memberships = self.db.scalars(
            select(Membership)
            .where(Membership.member_id == member_id)
            .order_by(Membership.membership_id)
        ).all()
        return [UserMembershipResponse.model_validate(m) for m in memberships]
