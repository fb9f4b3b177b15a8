"""
chips.py

출입 칩(Chip) 관리 API 모음.

주요 기능:
- 칩 단건 / 전체 조회, 추가, 삭제
- 칩 소유 회원 변경 (PUT, 200 + 변경된 칩 반환)
- 활성 / 비활성 칩 목록 (소유 회원 이름 포함)
- 회원 키로 칩 정보 조회

NOTE:
- 칩 PUT 은 200 + 변경된 칩을 반환 (다른 엔티티 PUT 은 204)

관련 파일:
- gym_api.services.chip    : 칩 서비스
- gym_api.schemas.chip     : 요청 / 응답 스키마

"""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from gym_api.core.deps import get_chip_service, get_current_username
from gym_api.schemas.chip import (
    ActiveChipResponse,
    ChipRequest,
    ChipResponse,
    ChipUpdateRequest,
    InactiveChipResponse,
)
from gym_api.services.base import NotFoundError
from gym_api.services.chip import ChipService

router = APIRouter(
    prefix="/api/chips",
    tags=["chips"],
    dependencies=[Depends(get_current_username)],
)


@router.get("/active", response_model=list[ActiveChipResponse])
def get_active_chips(service: ChipService = Depends(get_chip_service)):
    return service.get_active()


@router.get("/inactive", response_model=list[InactiveChipResponse])
def get_inactive_chips(service: ChipService = Depends(get_chip_service)):
    return service.get_inactive()


@router.get("/infoByMember/{member_id}", response_model=str)
def get_chip_info_by_member_id(member_id: int, service: ChipService = Depends(get_chip_service)):
    chip_info = service.get_chip_info_by_member_id(member_id)
    if chip_info is None:
        raise HTTPException(status_code=404, detail=f"No chip found for member with ID {member_id}.")
    return chip_info


@router.get("/{chip_id}", response_model=ChipResponse)
def get_chip(chip_id: int, service: ChipService = Depends(get_chip_service)):
    chip = service.get_by_id(chip_id)
    if not chip:
        raise HTTPException(status_code=404, detail="Chip not found")
    return chip


@router.get("", response_model=list[ChipResponse])
def list_chips(service: ChipService = Depends(get_chip_service)):
    return service.get_all()


@router.post("", response_model=ChipResponse, status_code=status.HTTP_201_CREATED)
def add_chip(
    body: ChipRequest,
    request: Request,
    response: Response,
    service: ChipService = Depends(get_chip_service),
):
    chip = service.add(body.model_dump())
    response.headers["Location"] = str(request.url_for("get_chip", chip_id=chip.chip_id))
    return chip

"""
칩 소유 회원 변경 API

- 경로의 id와 바디의 chip_id 가 다르면 400
- 칩이 없으면 404
- member_id 만 변경하고 나머지 필드는 유지

"""
@router.put("/{chip_id}", response_model=ChipResponse)
def update_chip(
    chip_id: int,
    body: ChipUpdateRequest,
    service: ChipService = Depends(get_chip_service),
):
    if body.chip_id != chip_id:
        raise HTTPException(status_code=400, detail="Chip ID does not match the route ID.")

    try:
        return service.reassign_member(chip_id, body.new_member_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Chip not found")


@router.delete("/{chip_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_chip(chip_id: int, service: ChipService = Depends(get_chip_service)):
    if not service.get_by_id(chip_id):
        raise HTTPException(status_code=404, detail="Chip not found")

    service.delete(chip_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
