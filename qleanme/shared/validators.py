"""Shared validation utilities"""

import re
from typing import Optional

from ..config import VERIFICATION_CODE_LENGTH

EMAIL_PATTERN = re.compile(r"[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,64}")


def phone_digits(phone: Optional[str]) -> str:
    """Strip everything but digits"""
    return re.sub(r"\D", "", phone or "")


def is_valid_phone(phone: Optional[str]) -> bool:
    """A North American number typed without the country code"""
    return len(phone_digits(phone)) == 10


def validate_phone(phone: Optional[str]) -> str:
    """
    Validate and normalize a North American phone number to E.164 format.

    Args:
        phone: Phone number string in various formats, e.g. "(604) 555-1234"

    Returns:
        Normalized phone number in E.164 format (+1XXXXXXXXXX)

    Raises:
        ValueError: If phone number is invalid
    """
    digits = phone_digits(phone)

    # Handle +1 prefix
    if digits.startswith("1") and len(digits) == 11:
        digits = digits[1:]

    if len(digits) != 10:
        raise ValueError("Phone number must be 10 digits")

    return f"+1{digits}"


def validate_email(email: Optional[str]) -> str:
    """
    Validate email format.

    Returns:
        The trimmed email address

    Raises:
        ValueError: If email format is invalid
    """
    email = (email or "").strip()
    if not EMAIL_PATTERN.fullmatch(email):
        raise ValueError("Invalid email format")
    return email


def validate_full_name(full_name: Optional[str]) -> str:
    """Full name must contain something other than whitespace"""
    full_name = (full_name or "").strip()
    if not full_name:
        raise ValueError("Full name is required")
    return full_name


def validate_verification_code(code: Optional[str]) -> str:
    code = (code or "").strip()
    if len(code) != VERIFICATION_CODE_LENGTH or not code.isdigit():
        raise ValueError(f"Verification code must be {VERIFICATION_CODE_LENGTH} digits")
    return code


def require_text(value: Optional[str], message: str) -> str:
    """Trim a free-text field and reject it when blank"""
    value = (value or "").strip()
    if not value:
        raise ValueError(message)
    return value
