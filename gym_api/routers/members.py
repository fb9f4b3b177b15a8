"""
members.py

회원(Member) 관리 API 모음.

주요 기능:
- 회원 단건 / 전체 조회
- 회원 추가 (201 + Location)
- 회원 전체 정보 교체 (204)
- 회원 삭제 (204)
- 전체 이름("이름 성")으로 회원 키 조회

설계 원칙:
- 로그인 토큰(Bearer)이 있어야만 접근 가능
- 비즈니스 로직은 MemberService에 위임하고
  이 라우터는 결과를 상태 코드로 변환하는 역할만 수행

관련 파일:
- gym_api.services.member   : 회원 서비스
- gym_api.schemas.member    : 요청 / 응답 스키마

"""

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from gym_api.core.deps import get_current_username, get_member_service
from gym_api.schemas.member import MemberRequest, MemberResponse
from gym_api.services.member import MemberService

router = APIRouter(
    prefix="/api/members",
    tags=["members"],
    dependencies=[Depends(get_current_username)],
)

"""
전체 이름으로 회원 키 조회 API

- fullName 은 "이름 성" 형태 (공백 한 칸)
- 형식이 맞지 않거나 일치하는 회원이 없으면 404

"""
@router.get("/getMemberIdByName", response_model=int)
def get_member_id_by_name(
    full_name: str = Query(..., alias="fullName", examples=["Alice Smith"]),
    service: MemberService = Depends(get_member_service),
):
    member_id = service.get_id_by_full_name(full_name)
    if member_id is None:
        raise HTTPException(status_code=404, detail=f"No member found with name {full_name!r}")
    return member_id


@router.get("/{member_id}", response_model=MemberResponse)
def get_member(member_id: int, service: MemberService = Depends(get_member_service)):
    member = service.get_by_id(member_id)
    if not member:
        raise HTTPException(status_code=404, detail="Member not found")
    return member


@router.get("", response_model=list[MemberResponse])
def list_members(service: MemberService = Depends(get_member_service)):
    return service.get_all()


@router.post("", response_model=MemberResponse, status_code=status.HTTP_201_CREATED)
def add_member(
    body: MemberRequest,
    request: Request,
    response: Response,
    service: MemberService = Depends(get_member_service),
):
    member = service.add(body.model_dump())
    response.headers["Location"] = str(request.url_for("get_member", member_id=member.member_id))
    return member

"""
회원 정보 교체 API

- 경로의 id와 바디의 member_id 가 다르면 400
- 바디에 없는 값(선택 필드)도 기본값으로 덮어씀 (전체 교체)

"""
@router.put("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_member(
    member_id: int,
    body: MemberRequest,
    service: MemberService = Depends(get_member_service),
):
    if body.member_id != member_id:
        raise HTTPException(status_code=400, detail="Member ID does not match the route ID.")

    service.update(member_id, body.model_dump())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_member(member_id: int, service: MemberService = Depends(get_member_service)):
    if not service.get_by_id(member_id):
        raise HTTPException(status_code=404, detail="Member not found")

    service.delete(member_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
