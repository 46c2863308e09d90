"""Payment router - mock payment flow for an order"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...database import get_db
from ...models import User
from .service import PaymentService

router = APIRouter(prefix="/orders", tags=["Payments"])


class PaymentIntentResponse(BaseModel):
    order_id: str
    client_secret: str
    amount: float
    currency: str


class PaymentStatusResponse(BaseModel):
    order_id: str
    status: str


class PaymentFailure(BaseModel):
    reason: Optional[str] = None


def get_payment_service(db: Session = Depends(get_db)) -> PaymentService:
    return PaymentService(db)


@router.post("/{order_id}/payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    order_id: str,
    current_user: User = Depends(get_current_user),
    service: PaymentService = Depends(get_payment_service),
):
    return await service.create_payment_intent(current_user, order_id)


@router.post("/{order_id}/payment/confirm", response_model=PaymentStatusResponse)
async def confirm_payment(
    order_id: str,
    current_user: User = Depends(get_current_user),
    service: PaymentService = Depends(get_payment_service),
):
    return service.confirm_payment(current_user, order_id)


@router.post("/{order_id}/payment/fail", response_model=PaymentStatusResponse)
async def fail_payment(
    order_id: str,
    data: Optional[PaymentFailure] = None,
    current_user: User = Depends(get_current_user),
    service: PaymentService = Depends(get_payment_service),
):
    return service.fail_payment(current_user, order_id, data.reason if data else None)
