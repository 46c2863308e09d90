"""Auth domain schemas - phone login and code verification"""

from typing import Literal, Optional

from pydantic import BaseModel, field_validator

from ...shared.validators import validate_phone, validate_verification_code

AccountType = Literal["user", "worker", "new_user"]
NavigationTarget = Literal["registered_user_dashboard", "contractor_dashboard", "registration"]


class PhoneRequest(BaseModel):
    phone_number: str

    @field_validator("phone_number")
    @classmethod
    def normalize_phone(cls, v):
        return validate_phone(v)


class VerifyRequest(PhoneRequest):
    code: str

    @field_validator("code")
    @classmethod
    def check_code(cls, v):
        return validate_verification_code(v)


class LoginResponse(BaseModel):
    phone_number: str
    account_type: AccountType
    message: str
    code_sent: bool = True


class VerifyResponse(BaseModel):
    phone_number: str
    account_type: AccountType
    navigation_target: NavigationTarget
    access_token: str
    token_type: str = "bearer"


class MessageResponse(BaseModel):
    message: str


class AuthStatusResponse(BaseModel):
    authenticated: bool
    phone_number: Optional[str] = None
    account_type: Optional[AccountType] = None
