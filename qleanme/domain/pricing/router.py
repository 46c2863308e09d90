"""Pricing router - rate tables and price quotes, no persistence"""

import logging
from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Query

from .calculators import (
    calculate_base_cleaning,
    calculate_car_detailing,
    calculate_home_cleaning,
    calculate_laundry,
)
from .catalog import LaundryServiceType, build_catalog
from .scheduling import default_service_time, laundry_booking_window
from .schemas import (
    BaseCleaningOptions,
    CarDetailingOptions,
    HomeCleaningOptions,
    LaundryOptions,
    PriceBreakdown,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pricing", tags=["Pricing"])


@router.get("/catalog")
async def get_catalog():
    """All services, options and their prices"""
    return build_catalog()


@router.get("/schedule")
async def get_schedule_defaults(laundry_service: Optional[LaundryServiceType] = Query(None)):
    """Date/time picker defaults; pass laundry_service for the pickup window"""
    result = {"default_time": default_service_time(datetime.now()).isoformat()}
    if laundry_service:
        earliest, latest = laundry_booking_window(laundry_service, date.today())
        result["earliest_date"] = earliest.isoformat()
        result["latest_date"] = latest.isoformat()
    return result


@router.post("/home-cleaning/quote", response_model=PriceBreakdown)
async def quote_home_cleaning(options: HomeCleaningOptions):
    return calculate_home_cleaning(options)


@router.post("/base-cleaning/quote", response_model=PriceBreakdown)
async def quote_base_cleaning(options: BaseCleaningOptions):
    return calculate_base_cleaning(options)


@router.post("/laundry/quote", response_model=PriceBreakdown)
async def quote_laundry(options: LaundryOptions):
    return calculate_laundry(options)


@router.post("/car-detailing/quote", response_model=PriceBreakdown)
async def quote_car_detailing(options: CarDetailingOptions):
    return calculate_car_detailing(options)
