"""Order domain schemas - booking requests and order views"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..pricing.catalog import CleaningSupplies
from ..pricing.scheduling import ensure_laundry_date, ensure_not_in_past, ensure_service_hours
from ..pricing.schemas import (
    BaseCleaningOptions,
    CarDetailingOptions,
    HomeCleaningOptions,
    LaundryOptions,
    PriceBreakdown,
)
from ..workers.schemas import PublicWorker


class OrderStatus(str, Enum):
    PENDING = "pending"
    AWAITING_PAYMENT = "awaiting_payment"
    CONFIRMED = "confirmed"
    PAYMENT_FAILED = "payment_failed"


class BookingDetails(BaseModel):
    """Fields every booking screen collects besides the priced options"""

    date_time: datetime
    address: Optional[str] = None  # falls back to the default saved address
    special_instructions: Optional[str] = None

    @field_validator("date_time")
    @classmethod
    def check_booking_time(cls, v):
        return ensure_service_hours(ensure_not_in_past(v))

    @field_validator("address", "special_instructions")
    @classmethod
    def blank_to_none(cls, v):
        if v is not None and not v.strip():
            return None
        return v.strip() if v else v


class HomeCleaningOrderCreate(HomeCleaningOptions, BookingDetails):
    has_pets: bool = False
    pet_details: Optional[str] = None
    supplies: CleaningSupplies = CleaningSupplies.OWN
    has_vacuum: bool = True

    @model_validator(mode="after")
    def pets_need_details(self):
        if self.has_pets and not (self.pet_details or "").strip():
            raise ValueError("Please tell us about your pets")
        return self


class BaseCleaningOrderCreate(BaseCleaningOptions, BookingDetails):
    pass


class LaundryOrderCreate(LaundryOptions, BookingDetails):
    @model_validator(mode="after")
    def check_pickup_date(self):
        ensure_laundry_date(self.service, self.date_time)
        return self


class CarDetailingOrderCreate(CarDetailingOptions, BookingDetails):
    pass


class OrderResponse(BaseModel):
    id: str
    type: str
    status: str
    date_time: datetime
    address: str
    price: float
    is_completed: bool
    rating: Optional[int] = None
    receipt_url: Optional[str] = None
    duration: int
    special_instructions: Optional[str] = None
    addons: list[str] = Field(default_factory=list)
    worker: Optional[PublicWorker] = None
    formatted_date: str
    formatted_duration: str
    formatted_price: str
    price_breakdown: Optional[PriceBreakdown] = None


class RatingRequest(BaseModel):
    rating: int = Field(..., ge=1, le=5)


class OrderReview(BaseModel):
    order_id: str
    type: str
    items: list[str]
    formatted_date: str
    address: str
    latitude: float
    longitude: float
    duration: str
    special_instructions: Optional[str] = None
    total: float
    formatted_total: str
