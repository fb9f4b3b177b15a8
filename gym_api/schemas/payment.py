from datetime import datetime
from decimal import Decimal

from pydantic import ConfigDict, Field

from gym_api.schemas.base import WireModel


class PaymentBase(WireModel):
    member_id: int
    amount: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, examples=["49.90"])
    payment_date: datetime
    payment_method: str = Field(..., examples=["CARD"])


class PaymentRequest(PaymentBase):
    payment_id: int | None = None


class PaymentResponse(PaymentBase):
    payment_id: int

    model_config = ConfigDict(from_attributes=True)
