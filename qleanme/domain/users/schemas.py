"""User domain schemas - Pydantic models for validation"""

from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ...shared.validators import require_text, validate_email, validate_full_name


class UserRegister(BaseModel):
    """Registration form; the phone number comes from the verified token"""

    full_name: str
    email: str
    notifications_enabled: bool = False

    @field_validator("full_name")
    @classmethod
    def check_full_name(cls, v):
        return validate_full_name(v)

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        return validate_email(v)


class UserUpdate(BaseModel):
    full_name: Optional[str] = None
    email: Optional[str] = None

    @field_validator("full_name")
    @classmethod
    def check_full_name(cls, v):
        if v is not None:
            return validate_full_name(v)
        return v

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        if v is not None:
            return validate_email(v)
        return v


class UserProfile(BaseModel):
    id: int
    full_name: str
    email: str
    phone_number: str
    formatted_phone: str
    notifications_enabled: bool
    signup_date: date
    loyalty_points: int
    photo_url: Optional[str] = None
    completed_orders: int = 0
    average_rating: float = 0.0


class UserSettings(BaseModel):
    notifications_enabled: bool
    auto_tipping_enabled: bool
    auto_tip_percentage: float


class UserSettingsUpdate(BaseModel):
    notifications_enabled: Optional[bool] = None
    auto_tipping_enabled: Optional[bool] = None
    auto_tip_percentage: Optional[float] = Field(None, ge=0, le=100)


class Offer(BaseModel):
    title: str
    description: str
    discount: str


class DashboardResponse(BaseModel):
    greeting: str
    first_name: str
    loyalty_points: int
    upcoming_orders: int
    offers: list[Offer]


class AddressCreate(BaseModel):
    title: str
    full_address: str
    address_type: Literal["home", "work", "other"] = "other"
    is_default: bool = False

    @field_validator("title")
    @classmethod
    def check_title(cls, v):
        return require_text(v, "Address title is required")

    @field_validator("full_address")
    @classmethod
    def check_full_address(cls, v):
        return require_text(v, "Address is required")


class AddressResponse(BaseModel):
    id: int
    title: str
    full_address: str
    address_type: str
    is_default: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
