"""
Payment service - simulated card payments

There is no processor behind this yet. A payment intent moves the order to
awaiting_payment after a short delay; the client then reports the result.
"""

import asyncio
import logging
from decimal import Decimal
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ... import config
from ...models import Order, User
from ..orders.repository import OrderRepository
from ..orders.schemas import OrderStatus

logger = logging.getLogger(__name__)


class PaymentService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = OrderRepository()

    def _get_order(self, user: User, order_id: str) -> Order:
        order = self.repo.get_order(self.db, order_id, user.id)
        if not order:
            raise HTTPException(status_code=404, detail="Order not found")
        return order

    def _set_status(self, order: Order, new_status: OrderStatus) -> Order:
        try:
            return self.repo.update_order(self.db, order, status=new_status.value)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to update payment status for order {order.id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to update payment: {e}") from e

    async def create_payment_intent(self, user: User, order_id: str) -> dict:
        order = self._get_order(user, order_id)
        if order.status == OrderStatus.CONFIRMED.value:
            raise HTTPException(status_code=409, detail="Order has already been paid")

        # Claim the order before the delay so a second request sees it in progress
        blocked = [OrderStatus.AWAITING_PAYMENT.value, OrderStatus.CONFIRMED.value]
        try:
            claimed = self.repo.transition_status(self.db, order, OrderStatus.AWAITING_PAYMENT.value, blocked)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to start payment for order {order_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to update payment: {e}") from e
        if not claimed:
            raise HTTPException(status_code=409, detail="Payment is already being processed")

        logger.info(f"💳 Creating payment intent for order {order_id}")
        await asyncio.sleep(config.PAYMENT_SIMULATION_DELAY_SECONDS)

        return {
            "order_id": order.id,
            "client_secret": config.MOCK_PAYMENT_CLIENT_SECRET,
            "amount": float(Decimal(order.price)),
            "currency": config.PAYMENT_CURRENCY,
        }

    def _require_pending_payment(self, order: Order) -> None:
        if order.status != OrderStatus.AWAITING_PAYMENT.value:
            raise HTTPException(status_code=409, detail="No payment in progress for this order")

    def confirm_payment(self, user: User, order_id: str) -> dict:
        order = self._get_order(user, order_id)
        self._require_pending_payment(order)
        self._set_status(order, OrderStatus.CONFIRMED)
        logger.info(f"✅ Payment confirmed for order {order_id}")
        return {"order_id": order.id, "status": order.status}

    def fail_payment(self, user: User, order_id: str, reason: Optional[str] = None) -> dict:
        order = self._get_order(user, order_id)
        self._require_pending_payment(order)
        self._set_status(order, OrderStatus.PAYMENT_FAILED)
        logger.warning(f"⚠️ Payment failed for order {order_id}: {reason or 'no reason given'}")
        return {"order_id": order.id, "status": order.status}
