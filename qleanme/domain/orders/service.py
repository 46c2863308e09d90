"""Order service - booking, listing, cancelling, rating and reviewing orders"""

import logging
from decimal import Decimal
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...config import DEFAULT_ORDER_DURATION_MINUTES
from ...models import Order, User
from ...shared.formatting import (
    format_currency,
    format_duration,
    format_long_date,
    format_order_date,
    format_price,
)
from ..geocoding.service import geocode_address
from ..pricing.calculators import (
    calculate_base_cleaning,
    calculate_car_detailing,
    calculate_home_cleaning,
    calculate_laundry,
)
from ..pricing.catalog import CLEANING_SUPPLIES_LABELS, LaundryServiceType, RecurringServiceOption
from ..pricing.schemas import PriceBreakdown
from ..users.repository import UserRepository
from ..workers.service import public_worker
from .repository import OrderRepository
from .schemas import (
    BaseCleaningOrderCreate,
    BookingDetails,
    CarDetailingOrderCreate,
    HomeCleaningOrderCreate,
    LaundryOrderCreate,
    OrderStatus,
)

logger = logging.getLogger(__name__)

BASE_CLEANING_ORDER_TYPE = "Base Cleaning"
BRING_PRODUCTS_ADDON = "Bring cleaning products"


def order_to_response(order: Order, breakdown: Optional[PriceBreakdown] = None) -> dict:
    price = Decimal(order.price)
    return {
        "id": order.id,
        "type": order.type,
        "status": order.status,
        "date_time": order.date_time,
        "address": order.address,
        "price": float(price),
        "is_completed": order.is_completed,
        "rating": order.rating,
        "receipt_url": order.receipt_url,
        "duration": order.duration,
        "special_instructions": order.special_instructions,
        "addons": [a.addon for a in order.addons],
        "worker": public_worker(order.worker) if order.worker else None,
        "formatted_date": format_order_date(order.date_time),
        "formatted_duration": format_duration(order.duration),
        "formatted_price": format_price(price),
        "price_breakdown": breakdown,
    }


def join_details(*parts: Optional[str]) -> Optional[str]:
    text = "\n".join(p for p in parts if p)
    return text or None


class OrderService:
    """Service layer for order business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = OrderRepository()
        self.users = UserRepository()

    def resolve_address(self, user: User, address: Optional[str], missing_message: str) -> str:
        if address:
            return address
        default = self.users.get_default_address(self.db, user.id)
        if not default:
            raise HTTPException(status_code=400, detail=missing_message)
        return default.full_address

    def _submit(
        self,
        user: User,
        details: BookingDetails,
        order_type: str,
        breakdown: PriceBreakdown,
        addon_names: list[str],
        address: str,
        special_instructions: Optional[str],
    ) -> dict:
        logger.info(f"📥 Creating {order_type} order for user_id: {user.id}")
        try:
            order = self.repo.create_order(
                self.db,
                addon_names,
                user_id=user.id,
                type=order_type,
                status=OrderStatus.PENDING.value,
                date_time=details.date_time,
                address=address,
                price=breakdown.total,
                is_completed=False,
                duration=DEFAULT_ORDER_DURATION_MINUTES,
                special_instructions=special_instructions,
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to submit order for user {user.id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to submit order: {e}") from e

        logger.info(f"✅ Order {order.id} created: {order_type} ${breakdown.total}")
        return order_to_response(order, breakdown)

    def create_home_cleaning(self, user: User, data: HomeCleaningOrderCreate) -> dict:
        breakdown = calculate_home_cleaning(data)
        address = self.resolve_address(user, data.address, "Please select an address")
        notes = join_details(
            f"Pets: {data.pet_details.strip()}" if data.has_pets else "Pets: none",
            f"Supplies: {CLEANING_SUPPLIES_LABELS[data.supplies]}",
            f"Vacuum on site: {'yes' if data.has_vacuum else 'no'}",
            data.special_instructions,
        )
        return self._submit(
            user, data, data.cleaning_type.value, breakdown, breakdown.addons, address, notes
        )

    def create_base_cleaning(self, user: User, data: BaseCleaningOrderCreate) -> dict:
        breakdown = calculate_base_cleaning(data)
        address = self.resolve_address(user, data.address, "Please select an address")
        addon_names = list(breakdown.addons)
        if data.bring_cleaning_products:
            addon_names.append(BRING_PRODUCTS_ADDON)
        recurring = (
            f"Recurring: {data.recurring_option.value}"
            if data.recurring_option != RecurringServiceOption.NONE
            else None
        )
        notes = join_details(
            f"Bedrooms: {data.bedrooms}, bathrooms: {data.bathrooms}, area: {data.area_size.value}",
            recurring,
            data.special_instructions,
        )
        return self._submit(
            user, data, BASE_CLEANING_ORDER_TYPE, breakdown, addon_names, address, notes
        )

    def create_laundry(self, user: User, data: LaundryOrderCreate) -> dict:
        breakdown = calculate_laundry(data)
        address = self.resolve_address(user, data.address, "Please select a pickup address")
        if data.service == LaundryServiceType.DRY_CLEANING:
            amount = f"Items: {data.clothes_amount}"
        else:
            amount = f"Load size: {data.load_size.value}"
        notes = join_details(amount, data.special_instructions)
        return self._submit(
            user, data, f"Laundry - {data.service.value}", breakdown, breakdown.addons, address, notes
        )

    def create_car_detailing(self, user: User, data: CarDetailingOrderCreate) -> dict:
        breakdown = calculate_car_detailing(data)
        address = self.resolve_address(user, data.address, "Please select an address")
        notes = join_details(
            f"Scope: {data.scope.value}, depth: {data.depth.value}", data.special_instructions
        )
        return self._submit(
            user, data, f"{data.car_type.value} Detailing", breakdown, breakdown.addons, address, notes
        )

    def list_orders(self, user: User, completed: Optional[bool] = None) -> list[dict]:
        try:
            orders = self.repo.get_orders(self.db, user.id, completed)
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to fetch orders for user {user.id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to fetch orders: {e}") from e
        return [order_to_response(o) for o in orders]

    def get_order(self, user: User, order_id: str) -> Order:
        order = self.repo.get_order(self.db, order_id, user.id)
        if not order:
            raise HTTPException(status_code=404, detail="Order not found")
        return order

    def get_order_addons(self, user: User, order_id: str) -> list[str]:
        order = self.get_order(user, order_id)
        try:
            return [a.addon for a in order.addons]
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to fetch addons for order {order_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to fetch order addons: {e}") from e

    def cancel_order(self, user: User, order_id: str) -> dict:
        order = self.get_order(user, order_id)
        if order.is_completed:
            raise HTTPException(status_code=400, detail="Completed orders cannot be cancelled")

        try:
            self.repo.delete_order(self.db, order)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to cancel order {order_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to cancel order: {e}") from e

        logger.info(f"🗑️ Order {order_id} cancelled by user {user.id}")
        return {"message": "Order cancelled"}

    def rate_order(self, user: User, order_id: str, rating: int) -> dict:
        order = self.get_order(user, order_id)
        if not order.is_completed:
            raise HTTPException(status_code=400, detail="Only completed orders can be rated")
        if order.rating is not None:
            raise HTTPException(status_code=409, detail="Order has already been rated")

        try:
            order.rating = rating
            if order.worker:
                # rating is total_rating / amount_of_orders, keep both in step
                order.worker.total_rating = Decimal(order.worker.total_rating or 0) + rating
                order.worker.amount_of_orders = (order.worker.amount_of_orders or 0) + 1
            self.db.commit()
            self.db.refresh(order)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to rate order {order_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to rate order: {e}") from e

        logger.info(f"⭐ Order {order_id} rated {rating}")
        return order_to_response(order)

    async def review_order(self, user: User, order_id: str) -> dict:
        order = self.get_order(user, order_id)
        coordinates = await geocode_address(order.address)
        price = Decimal(order.price)
        return {
            "order_id": order.id,
            "type": order.type,
            "items": [order.type] + [a.addon for a in order.addons],
            "formatted_date": format_long_date(order.date_time),
            "address": order.address,
            "latitude": coordinates["latitude"],
            "longitude": coordinates["longitude"],
            "duration": format_duration(order.duration),
            "special_instructions": order.special_instructions,
            "total": float(price),
            "formatted_total": format_currency(price),
        }
