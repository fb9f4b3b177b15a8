"""
seed.py

데모 / 테스트용 초기 데이터.

- 회원       : #101 Alice Smith, #102 Bob Johnson
- 회원권     : #201 (Alice, 활성, Monthly), #202 (Bob, 비활성, Annual)
- 출입 칩    : #301 (Alice, 활성, VIP Access), #302 (Bob, 비활성, Basic Access)

이미 회원이 한 명이라도 있으면 아무것도 하지 않는다.

관련 파일:
- scripts/seed_demo_data.py    : 개발 DB 초기화 스크립트
- tests/conftest.py            : seeded fixture

"""

from datetime import date, datetime

from sqlalchemy import select
from sqlalchemy.orm import Session

from gym_api.models.chip import Chip
from gym_api.models.member import Member
from gym_api.models.membership import Membership


def seed_demo_data(db: Session) -> bool:
    if db.scalar(select(Member.member_id).limit(1)) is not None:
        return False

    db.add_all([
        Member(member_id=101, first_name="Alice", last_name="Smith",
               date_of_birth=date(1990, 1, 1), email="alice@gym.com"),
        Member(member_id=102, first_name="Bob", last_name="Johnson",
               date_of_birth=date(1985, 2, 2), email="bob@gym.com"),
    ])
    db.add_all([
        Membership(membership_id=201, member_id=101,
                   start_date=datetime(2024, 1, 1), end_date=datetime(2024, 12, 31),
                   payment_type="Monthly", is_active=True),
        Membership(membership_id=202, member_id=102,
                   start_date=datetime(2023, 1, 1), end_date=datetime(2023, 12, 31),
                   payment_type="Annual", is_active=False),
    ])
    db.add_all([
        Chip(chip_id=301, member_id=101, chip_info="VIP Access", is_active=True),
        Chip(chip_id=302, member_id=102, chip_info="Basic Access", is_active=False),
    ])
    db.commit()
    return True
