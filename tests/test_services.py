"""

서비스 계층 단위 테스트 (HTTP 없이 세션 직접 사용).
- 활성 / 비활성 projection 분할
- 없는 키에 대한 update / delete no-op
- 칩 정보 / 이름 조회의 동률 처리
- 로그인 자격 증명 확인

"""

from datetime import date

import pytest
from jose import jwt
from sqlalchemy.exc import IntegrityError

from gym_api.core.config import Settings
from gym_api.models.chip import Chip
from gym_api.models.member import Member
from gym_api.services.auth import AuthService, InvalidCredentialsError
from gym_api.services.chip import ChipService
from gym_api.services.member import MemberService
from gym_api.services.membership import MembershipService
from gym_api.services.base import NotFoundError
from tests.helpers import TEST_PASSWORD, TEST_USERNAME, test_settings


def test_membership_projections_partition_all(seeded):
    service = MembershipService(seeded)

    all_ids = {m.membership_id for m in service.get_all()}
    active_ids = {m.membership_id for m in service.get_active()}
    inactive_ids = {m.membership_id for m in service.get_inactive()}

    assert active_ids == {201}
    assert inactive_ids == {202}
    assert active_ids | inactive_ids == all_ids
    assert not active_ids & inactive_ids


def test_user_memberships_empty_for_unknown_member(seeded):
    assert MembershipService(seeded).get_user_memberships(999) == []


def test_chip_projections_carry_owner_name(seeded):
    service = ChipService(seeded)

    active = service.get_active()
    assert [(c.chip_id, c.owner_full_name) for c in active] == [(301, "Alice Smith")]

    inactive = service.get_inactive()
    assert [(c.chip_id, c.owner_full_name) for c in inactive] == [(302, "Bob Johnson")]


def test_add_assigns_key(db_session):
    member = MemberService(db_session).add({"member_id": None, "first_name": "Dana", "last_name": "Lee"})
    assert member.member_id is not None
    assert db_session.get(Member, member.member_id).first_name == "Dana"


def test_update_replaces_all_non_key_fields(seeded):
    service = MemberService(seeded)

    updated = service.update(101, {"first_name": "Alicia", "last_name": "Smith"})

    assert updated.member_id == 101
    assert updated.first_name == "Alicia"
    assert updated.email is None
    assert updated.date_of_birth is None


def test_update_missing_row_inserts_nothing(seeded):
    service = MemberService(seeded)

    assert service.update(555, {"first_name": "Ghost", "last_name": "Member"}) is None
    assert service.get_by_id(555) is None
    assert len(service.get_all()) == 2


def test_delete_missing_row_is_noop(seeded):
    service = ChipService(seeded)

    assert service.delete(9999) is False
    assert {c.chip_id for c in service.get_all()} == {301, 302}


def test_chip_info_picks_lowest_chip_id(db_session):
    db_session.add_all(
        [
            Chip(chip_id=12, member_id=7, chip_info="second", is_active=True),
            Chip(chip_id=11, member_id=7, chip_info="first", is_active=False),
        ]
    )
    db_session.commit()

    service = ChipService(db_session)
    assert service.get_chip_info_by_member_id(7) == "first"
    assert service.get_chip_info_by_member_id(8) is None


def test_reassign_member_keeps_other_fields(seeded):
    chip = ChipService(seeded).reassign_member(302, 101)

    assert chip.member_id == 101
    assert chip.chip_info == "Basic Access"
    assert chip.is_active is False


def test_reassign_missing_chip_raises(seeded):
    with pytest.raises(NotFoundError):
        ChipService(seeded).reassign_member(9999, 101)


def test_name_lookup_picks_lowest_id_among_duplicates(db_session):
    db_session.add_all(
        [
            Member(member_id=40, first_name="Sam", last_name="Kim", date_of_birth=date(2000, 1, 1)),
            Member(member_id=30, first_name="Sam", last_name="Kim"),
        ]
    )
    db_session.commit()

    service = MemberService(db_session)
    assert service.get_id_by_full_name("Sam Kim") == 30
    assert service.get_id_by_full_name("Sam") is None
    assert service.get_id_by_full_name("Sam  Kim") is None


def test_failed_commit_rolls_back(seeded):
    seeded.expunge_all()
    service = ChipService(seeded)

    with pytest.raises(IntegrityError):
        service.add({"chip_id": 301, "member_id": 102, "chip_info": "Duplicate", "is_active": False})

    # rollback 후 세션은 계속 사용 가능
    assert service.get_by_id(301).chip_info == "VIP Access"


def test_authenticate_success():
    token = AuthService(test_settings).authenticate(TEST_USERNAME, TEST_PASSWORD).token

    claims = jwt.decode(token, test_settings.JWT_KEY, algorithms=[test_settings.ALGORITHM])
    assert claims["sub"] == TEST_USERNAME


def test_authenticate_wrong_password():
    with pytest.raises(InvalidCredentialsError) as exc_info:
        AuthService(test_settings).authenticate(TEST_USERNAME, "nope")
    assert exc_info.value.message == "Invalid credentials"


def test_authenticate_without_configured_account():
    settings = Settings(_env_file=None, LOGIN_USERNAME=None, LOGIN_PASSWORD=None)

    with pytest.raises(InvalidCredentialsError):
        AuthService(settings).authenticate("", "")


def test_reassign_member_updates_loaded_chip_in_place(seeded):
    service = ChipService(seeded)
    loaded = service.get_by_id(301)

    chip = service.reassign_member(301, 102)

    assert chip is loaded
    assert seeded.get(Chip, 301).member_id == 102
