"""Auth router - login by phone number"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import get_token_payload
from ...config import AUTH_RATE_LIMIT_WINDOW_SECONDS, LOGIN_RATE_LIMIT, VERIFY_RATE_LIMIT
from ...database import get_db
from ...rate_limiter import RateLimit
from .schemas import (
    AuthStatusResponse,
    LoginResponse,
    MessageResponse,
    PhoneRequest,
    VerifyRequest,
    VerifyResponse,
)
from .service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])

# Counted per client IP (dependency) and per phone number (in the handler)
login_limit = RateLimit("auth_login", LOGIN_RATE_LIMIT, AUTH_RATE_LIMIT_WINDOW_SECONDS)
verify_limit = RateLimit("auth_verify", VERIFY_RATE_LIMIT, AUTH_RATE_LIMIT_WINDOW_SECONDS)


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(db)


@router.post("/login", response_model=LoginResponse)
async def login(
    data: PhoneRequest,
    service: AuthService = Depends(get_auth_service),
    _: None = Depends(login_limit),
):
    """Find out who owns the number and send a verification code"""
    login_limit.check_phone(data.phone_number)
    return service.login(data.phone_number)


@router.post("/verify", response_model=VerifyResponse)
async def verify(
    data: VerifyRequest,
    service: AuthService = Depends(get_auth_service),
    _: None = Depends(verify_limit),
):
    verify_limit.check_phone(data.phone_number)
    return service.verify(data.phone_number, data.code)


@router.post("/resend", response_model=MessageResponse)
async def resend(
    data: PhoneRequest,
    service: AuthService = Depends(get_auth_service),
    _: None = Depends(login_limit),
):
    login_limit.check_phone(data.phone_number)
    return service.resend(data.phone_number)


@router.post("/logout", response_model=MessageResponse)
async def logout():
    """Sessions are stateless tokens; the client drops its copy"""
    return {"message": "Logged out successfully"}


@router.get("/status", response_model=AuthStatusResponse)
async def auth_status(payload: dict = Depends(get_token_payload)):
    return {
        "authenticated": True,
        "phone_number": payload["sub"],
        "account_type": payload.get("account_type"),
    }
