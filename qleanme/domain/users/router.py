"""User router - customer account endpoints"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import get_current_phone, get_current_user
from ...database import get_db
from ...models import User
from .schemas import (
    AddressCreate,
    AddressResponse,
    DashboardResponse,
    UserProfile,
    UserRegister,
    UserSettings,
    UserSettingsUpdate,
    UserUpdate,
)
from .service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Dependency injection for UserService"""
    return UserService(db)


@router.post("/register", response_model=UserProfile, status_code=201)
async def register(
    data: UserRegister,
    phone_number: str = Depends(get_current_phone),
    service: UserService = Depends(get_user_service),
):
    """Create the customer account for a freshly verified phone number"""
    user = service.register(phone_number, data)
    return service.get_profile(user)


@router.get("/me", response_model=UserProfile)
async def get_me(
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return service.get_profile(current_user)


@router.patch("/me", response_model=UserProfile)
async def update_me(
    data: UserUpdate,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return service.update_profile(current_user, data)


@router.get("/me/settings", response_model=UserSettings)
async def get_settings(
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return service.get_settings(current_user)


@router.put("/me/settings", response_model=UserSettings)
async def update_settings(
    data: UserSettingsUpdate,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return service.update_settings(current_user, data)


@router.get("/me/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return service.get_dashboard(current_user)


@router.get("/me/addresses", response_model=list[AddressResponse])
async def list_addresses(
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return service.list_addresses(current_user)


@router.post("/me/addresses", response_model=AddressResponse, status_code=201)
async def add_address(
    data: AddressCreate,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return service.add_address(current_user, data)


@router.delete("/me/addresses/{address_id}")
async def delete_address(
    address_id: int,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return service.delete_address(current_user, address_id)
