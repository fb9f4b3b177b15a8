"""
services/member.py

회원(Member) 서비스.

공통 CRUD(CrudService)에 더해
"이름 성" 형태의 전체 이름으로 회원 키를 찾는 기능을 제공한다.

관련 파일:
- gym_api.models.member     : Member 모델
- gym_api.routers.members   : 회원 API

"""

from sqlalchemy import select

from gym_api.models.member import Member
from gym_api.services.base import CrudService


class MemberService(CrudService[Member]):
    model = Member

    """
    전체 이름으로 회원 키 조회

    - 공백 한 칸으로 나눴을 때 정확히 두 토큰(이름, 성)이어야 함
      (중간 이름 / 연속 공백이 있으면 찾지 않음)
    - 이름 / 성이 모두 정확히 일치해야 함
    - 동명이인이면 키가 가장 작은 회원

    """

    def get_id_by_full_name(self, full_name: str) -> int | None:
        parts = full_name.split(" ")
        if len(parts) != 2:
            return None

        first_name, last_name = parts
        return self.db.scalar(
            select(Member.member_id)
            .where(Member.first_name == first_name, Member.last_name == last_name)
            .order_by(Member.member_id)
            .limit(1)
        )
