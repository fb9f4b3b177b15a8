"""

회원 API 통합 테스트.
- 단건 / 전체 조회, 추가(201 + Location), 전체 교체(204), 삭제(204)
- 경로 id / 바디 id 불일치 400
- 전체 이름으로 회원 키 조회

"""

from tests.helpers import auth_header


def test_get_member_found_and_missing(client, seeded, token):
    res = client.get("/api/members/101", headers=auth_header(token))
    assert res.status_code == 200, res.text
    body = res.json()
    assert body["member_id"] == 101
    assert body["first_name"] == "Alice"
    assert body["last_name"] == "Smith"
    assert body["date_of_birth"] == "1990-01-01"
    assert body["email"] == "alice@gym.com"

    missing = client.get("/api/members/9999", headers=auth_header(token))
    assert missing.status_code == 404


def test_list_members_ordered_by_key(client, seeded, token):
    res = client.get("/api/members", headers=auth_header(token))
    assert res.status_code == 200
    assert [m["member_id"] for m in res.json()] == [101, 102]


def test_list_members_empty(client, token):
    res = client.get("/api/members", headers=auth_header(token))
    assert res.status_code == 200
    assert res.json() == []


def test_add_member_assigns_key_and_location(client, seeded, token):
    res = client.post(
        "/api/members",
        headers=auth_header(token),
        json={"first_name": "Carol", "last_name": "White", "phone_number": "+36 30 123 4567"},
    )
    assert res.status_code == 201, res.text
    created = res.json()
    assert created["member_id"] > 102
    assert res.headers["location"].endswith(f"/api/members/{created['member_id']}")

    fetched = client.get(f"/api/members/{created['member_id']}", headers=auth_header(token))
    assert fetched.status_code == 200
    assert fetched.json() == created


def test_add_member_with_explicit_key(client, token):
    res = client.post(
        "/api/members",
        headers=auth_header(token),
        json={"member_id": 999, "first_name": "Test", "last_name": "Member", "email": "test@gym.com"},
    )
    assert res.status_code == 201, res.text
    assert res.json()["member_id"] == 999
    assert client.get("/api/members/999", headers=auth_header(token)).status_code == 200


def test_update_member_replaces_all_fields(client, seeded, token):
    res = client.put(
        "/api/members/101",
        headers=auth_header(token),
        json={"member_id": 101, "first_name": "Alicia", "last_name": "Smith", "phone_number": "555-0101"},
    )
    assert res.status_code == 204
    assert res.content == b""

    body = client.get("/api/members/101", headers=auth_header(token)).json()
    assert body["first_name"] == "Alicia"
    assert body["phone_number"] == "555-0101"
    # 바디에 없던 선택 필드는 기본값(None)으로 덮어씀
    assert body["email"] is None
    assert body["date_of_birth"] is None


def test_update_member_id_mismatch_returns_400(client, seeded, token):
    res = client.put(
        "/api/members/101",
        headers=auth_header(token),
        json={"member_id": 999, "first_name": "Alice", "last_name": "Smith"},
    )
    assert res.status_code == 400

    no_id = client.put(
        "/api/members/101",
        headers=auth_header(token),
        json={"first_name": "Alice", "last_name": "Smith"},
    )
    assert no_id.status_code == 400

    # 원본은 변경되지 않음
    assert client.get("/api/members/101", headers=auth_header(token)).json()["email"] == "alice@gym.com"


def test_update_missing_member_is_noop(client, token):
    res = client.put(
        "/api/members/555",
        headers=auth_header(token),
        json={"member_id": 555, "first_name": "Ghost", "last_name": "Member"},
    )
    assert res.status_code == 204
    assert client.get("/api/members/555", headers=auth_header(token)).status_code == 404


def test_delete_member(client, seeded, token):
    res = client.delete("/api/members/102", headers=auth_header(token))
    assert res.status_code == 204

    assert client.get("/api/members/102", headers=auth_header(token)).status_code == 404
    assert client.delete("/api/members/102", headers=auth_header(token)).status_code == 404


def test_delete_member_leaves_memberships_in_place(client, seeded, token):
    assert client.delete("/api/members/102", headers=auth_header(token)).status_code == 204

    # 회원권은 남아 있지만 회원 이름 join 결과에서는 빠짐
    assert client.get("/api/memberships/202", headers=auth_header(token)).status_code == 200
    assert client.get("/api/memberships/inactive", headers=auth_header(token)).json() == []


def test_get_member_id_by_name(client, seeded, token):
    res = client.get(
        "/api/members/getMemberIdByName",
        params={"fullName": "Alice Smith"},
        headers=auth_header(token),
    )
    assert res.status_code == 200, res.text
    assert res.json() == 101


def test_get_member_id_by_name_not_found(client, seeded, token):
    for full_name in ("JustOneName", "Unknown Person", "Alice  Smith", "Anna Maria Smith", "alice smith"):
        res = client.get(
            "/api/members/getMemberIdByName",
            params={"fullName": full_name},
            headers=auth_header(token),
        )
        assert res.status_code == 404, full_name


def test_update_member_id_mismatch_with_partial_body_returns_400(client, seeded, token):
    res = client.put("/api/members/101", headers=auth_header(token), json={"member_id": 999})
    assert res.status_code == 400

    # 원본은 변경되지 않음
    assert client.get("/api/members/101", headers=auth_header(token)).json()["first_name"] == "Alice"


def test_update_member_accepts_pascal_case_body(client, seeded, token):
    res = client.put(
        "/api/members/101",
        headers=auth_header(token),
        json={"MemberID": 101, "FirstName": "Alicia", "LastName": "Smith", "Email": "alicia@gym.com"},
    )
    assert res.status_code == 204, res.text

    body = client.get("/api/members/101", headers=auth_header(token)).json()
    assert body["first_name"] == "Alicia"
    assert body["email"] == "alicia@gym.com"
    assert "FirstName" not in body


def test_update_member_pascal_case_id_mismatch_returns_400(client, seeded, token):
    res = client.put(
        "/api/members/101",
        headers=auth_header(token),
        json={"MemberID": 999, "FirstName": "Alice", "LastName": "Smith"},
    )
    assert res.status_code == 400
    assert res.json()["detail"] == "Member ID does not match the route ID."
