"""
payments.py

결제(Payment) 기록 관리 API 모음.

- 결제 단건 / 전체 조회, 추가, 전체 교체, 삭제
- 로그인 토큰(Bearer)이 있어야만 접근 가능

"""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from gym_api.core.deps import get_current_username, get_payment_service
from gym_api.schemas.payment import PaymentRequest, PaymentResponse
from gym_api.services.payment import PaymentService

router = APIRouter(
    prefix="/api/payments",
    tags=["payments"],
    dependencies=[Depends(get_current_username)],
)


@router.get("/{payment_id}", response_model=PaymentResponse)
def get_payment(payment_id: int, service: PaymentService = Depends(get_payment_service)):
    payment = service.get_by_id(payment_id)
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")
    return payment


@router.get("", response_model=list[PaymentResponse])
def list_payments(service: PaymentService = Depends(get_payment_service)):
    return service.get_all()


@router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
def add_payment(
    body: PaymentRequest,
    request: Request,
    response: Response,
    service: PaymentService = Depends(get_payment_service),
):
    payment = service.add(body.model_dump())
    response.headers["Location"] = str(request.url_for("get_payment", payment_id=payment.payment_id))
    return payment


@router.put("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_payment(
    payment_id: int,
    body: PaymentRequest,
    service: PaymentService = Depends(get_payment_service),
):
    if body.payment_id != payment_id:
        raise HTTPException(status_code=400, detail="Payment ID does not match the route ID.")

    service.update(payment_id, body.model_dump())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_payment(payment_id: int, service: PaymentService = Depends(get_payment_service)):
    if not service.get_by_id(payment_id):
        raise HTTPException(status_code=404, detail="Payment not found")

    service.delete(payment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
