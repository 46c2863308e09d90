"""User service - registration, profile, settings, dashboard and saved addresses"""

import logging
from datetime import date

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ...config import (
    DEFAULT_AUTO_TIP_PERCENTAGE,
    DEFAULT_PHOTO_URL,
    MAX_SAVED_ADDRESSES,
    SIGNUP_LOYALTY_POINTS,
)
from ...models import Address, User
from ...shared.formatting import format_phone_display
from .repository import UserRepository
from .schemas import AddressCreate, UserRegister, UserSettingsUpdate, UserUpdate

logger = logging.getLogger(__name__)

# Shown on the home screen until offers are managed server side
DASHBOARD_OFFERS = [
    {
        "title": "First Deep Clean",
        "description": "Save on your first deep cleaning booking",
        "discount": "20% OFF",
    },
    {
        "title": "Weekly Plan",
        "description": "Book a weekly base cleaning and save every visit",
        "discount": "15% OFF",
    },
    {
        "title": "Refer a Friend",
        "description": "Earn loyalty points when a friend books",
        "discount": "+50 pts",
    },
]


def effective_tip_percentage(user: User) -> float:
    """An unset or zero percentage reads as the default"""
    return user.auto_tip_percentage or DEFAULT_AUTO_TIP_PERCENTAGE


class UserService:
    """Service layer for customer accounts"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = UserRepository()

    def register(self, phone_number: str, data: UserRegister) -> User:
        if self.repo.get_by_phone(self.db, phone_number):
            logger.warning("⚠️ Registration rejected, phone already registered")
            raise HTTPException(status_code=409, detail="Phone number is already registered")

        try:
            user = self.repo.create_user(
                self.db,
                id=self.repo.next_user_id(self.db),
                full_name=data.full_name,
                email=data.email,
                phone_number=phone_number,
                notifications_enabled=data.notifications_enabled,
                signup_date=date.today(),
                loyalty_points=SIGNUP_LOYALTY_POINTS,
                photo_url=DEFAULT_PHOTO_URL,
            )
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"❌ Registration conflict: {e}")
            raise HTTPException(status_code=409, detail="Phone number is already registered") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to register user: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to register user: {e}") from e

        logger.info(f"✅ Registered user {user.id}")
        return user

    def get_profile(self, user: User) -> dict:
        completed, average = self.repo.order_stats(self.db, user.id)
        return {
            "id": user.id,
            "full_name": user.full_name,
            "email": user.email,
            "phone_number": user.phone_number,
            "formatted_phone": format_phone_display(user.phone_number),
            "notifications_enabled": user.notifications_enabled,
            "signup_date": user.signup_date,
            "loyalty_points": user.loyalty_points,
            "photo_url": user.photo_url,
            "completed_orders": completed,
            "average_rating": round(average, 2),
        }

    def update_profile(self, user: User, data: UserUpdate) -> dict:
        try:
            self.repo.update_user(self.db, user, full_name=data.full_name, email=data.email)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to update user {user.id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to update user: {e}") from e
        return self.get_profile(user)

    def get_settings(self, user: User) -> dict:
        return {
            "notifications_enabled": user.notifications_enabled,
            "auto_tipping_enabled": user.auto_tipping_enabled,
            "auto_tip_percentage": effective_tip_percentage(user),
        }

    def update_settings(self, user: User, data: UserSettingsUpdate) -> dict:
        updates = data.model_dump(exclude_none=True)
        try:
            self.repo.update_user(self.db, user, **updates)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to update settings for user {user.id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to update settings: {e}") from e
        return self.get_settings(user)

    def get_dashboard(self, user: User) -> dict:
        first_name = user.full_name.split()[0] if user.full_name.strip() else user.full_name
        return {
            "greeting": f"Hi, {first_name}!",
            "first_name": first_name,
            "loyalty_points": user.loyalty_points,
            "upcoming_orders": self.repo.count_upcoming_orders(self.db, user.id),
            "offers": DASHBOARD_OFFERS,
        }

    def list_addresses(self, user: User) -> list[Address]:
        return self.repo.get_addresses(self.db, user.id)

    def add_address(self, user: User, data: AddressCreate) -> Address:
        existing = self.repo.get_addresses(self.db, user.id)
        if len(existing) >= MAX_SAVED_ADDRESSES:
            raise HTTPException(
                status_code=400, detail=f"Maximum of {MAX_SAVED_ADDRESSES} addresses allowed"
            )

        try:
            return self.repo.create_address(
                self.db,
                user.id,
                make_default=data.is_default or not existing,
                title=data.title,
                full_address=data.full_address,
                address_type=data.address_type,
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to save address for user {user.id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to save address: {e}") from e

    def delete_address(self, user: User, address_id: int) -> dict:
        address = self.repo.get_address(self.db, address_id, user.id)
        if not address:
            raise HTTPException(status_code=404, detail="Address not found")

        try:
            self.repo.delete_address(self.db, address)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to delete address {address_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to delete address: {e}") from e
        return {"message": "Address deleted"}
