"""
memberships.py

회원권(Membership) 관리 API 모음.

주요 기능:
- 회원권 CRUD
- 활성 / 비활성 회원권 목록 (회원 이름 포함)
- 특정 회원의 회원권 목록

설계 원칙:
- 로그인 토큰(Bearer)이 있어야만 접근 가능
- 고정 경로(/active, /inactive, /user/...)를 /{membership_id} 보다 먼저 등록

관련 파일:
- gym_api.services.membership   : 회원권 서비스 / projection 조회
- gym_api.schemas.membership    : 요청 / 응답 스키마

"""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from gym_api.core.deps import get_current_username, get_membership_service
from gym_api.schemas.membership import (
    ActiveMembershipResponse,
    InactiveMembershipResponse,
    MembershipRequest,
    MembershipResponse,
    UserMembershipResponse,
)
from gym_api.services.membership import MembershipService

router = APIRouter(
    prefix="/api/memberships",
    tags=["memberships"],
    dependencies=[Depends(get_current_username)],
)


@router.get("/active", response_model=list[ActiveMembershipResponse])
def get_active_memberships(service: MembershipService = Depends(get_membership_service)):
    return service.get_active()


@router.get("/inactive", response_model=list[InactiveMembershipResponse])
def get_inactive_memberships(service: MembershipService = Depends(get_membership_service)):
    return service.get_inactive()

"""
특정 회원의 회원권 목록 조회 API

- 회원권이 하나도 없으면 404

"""
@router.get("/user/{member_id}/memberships", response_model=list[UserMembershipResponse])
def get_user_memberships(member_id: int, service: MembershipService = Depends(get_membership_service)):
    memberships = service.get_user_memberships(member_id)
    if not memberships:
        raise HTTPException(status_code=404, detail=f"No memberships found for member with ID {member_id}.")
    return memberships


@router.get("/{membership_id}", response_model=MembershipResponse)
def get_membership(membership_id: int, service: MembershipService = Depends(get_membership_service)):
    membership = service.get_by_id(membership_id)
    if not membership:
        raise HTTPException(status_code=404, detail="Membership not found")
    return membership


@router.get("", response_model=list[MembershipResponse])
def list_memberships(service: MembershipService = Depends(get_membership_service)):
    return service.get_all()


@router.post("", response_model=MembershipResponse, status_code=status.HTTP_201_CREATED)
def add_membership(
    body: MembershipRequest,
    request: Request,
    response: Response,
    service: MembershipService = Depends(get_membership_service),
):
    membership = service.add(body.model_dump())
    response.headers["Location"] = str(
        request.url_for("get_membership", membership_id=membership.membership_id)
    )
    return membership


@router.put("/{membership_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_membership(
    membership_id: int,
    body: MembershipRequest,
    service: MembershipService = Depends(get_membership_service),
):
    if body.membership_id != membership_id:
        raise HTTPException(status_code=400, detail="Membership ID does not match the route ID.")

    service.update(membership_id, body.model_dump())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{membership_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_membership(membership_id: int, service: MembershipService = Depends(get_membership_service)):
    if not service.get_by_id(membership_id):
        raise HTTPException(status_code=404, detail="Membership not found")

    service.delete(membership_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
