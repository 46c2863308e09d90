"""Order router - FastAPI endpoints for booking and managing orders"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...database import get_db
from ...models import User
from .schemas import (
    BaseCleaningOrderCreate,
    CarDetailingOrderCreate,
    HomeCleaningOrderCreate,
    LaundryOrderCreate,
    OrderResponse,
    OrderReview,
    RatingRequest,
)
from .service import OrderService, order_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["Orders"])


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    """Dependency injection for OrderService"""
    return OrderService(db)


# ============================================================================
# BOOKING
# ============================================================================


@router.post("/home-cleaning", response_model=OrderResponse, status_code=201)
async def create_home_cleaning_order(
    data: HomeCleaningOrderCreate,
    current_user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service),
):
    return service.create_home_cleaning(current_user, data)


@router.post("/base-cleaning", response_model=OrderResponse, status_code=201)
async def create_base_cleaning_order(
    data: BaseCleaningOrderCreate,
    current_user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service),
):
    return service.create_base_cleaning(current_user, data)


@router.post("/laundry", response_model=OrderResponse, status_code=201)
async def create_laundry_order(
    data: LaundryOrderCreate,
    current_user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service),
):
    return service.create_laundry(current_user, data)


@router.post("/car-detailing", response_model=OrderResponse, status_code=201)
async def create_car_detailing_order(
    data: CarDetailingOrderCreate,
    current_user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service),
):
    return service.create_car_detailing(current_user, data)


# ============================================================================
# ORDER HISTORY
# ============================================================================


@router.get("", response_model=list[OrderResponse])
async def list_orders(
    completed: Optional[bool] = Query(None),
    current_user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service),
):
    """The current user's orders, latest appointment first"""
    return service.list_orders(current_user, completed)


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: str,
    current_user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service),
):
    return order_to_response(service.get_order(current_user, order_id))


@router.get("/{order_id}/addons", response_model=list[str])
async def get_order_addons(
    order_id: str,
    current_user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service),
):
    return service.get_order_addons(current_user, order_id)


@router.delete("/{order_id}")
async def cancel_order(
    order_id: str,
    current_user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service),
):
    return service.cancel_order(current_user, order_id)


@router.post("/{order_id}/rating", response_model=OrderResponse)
async def rate_order(
    order_id: str,
    data: RatingRequest,
    current_user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service),
):
    return service.rate_order(current_user, order_id, data.rating)


@router.get("/{order_id}/review", response_model=OrderReview)
async def review_order(
    order_id: str,
    current_user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service),
):
    return await service.review_order(current_user, order_id)
