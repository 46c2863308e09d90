"""Display formatting shared by the API responses"""

from datetime import datetime
from decimal import Decimal
from typing import Union

from .validators import phone_digits

PHONE_INPUT_MASK = "(XXX) XXX-XXXX"
PHONE_DISPLAY_MASK = "+X (XXX) XXX-XXXX"


def apply_mask(digits: str, mask: str) -> str:
    """Fill the X slots of a mask with digits, stopping when digits run out"""
    result = []
    remaining = iter(digits)
    pending = next(remaining, None)
    for ch in mask:
        if pending is None:
            break
        if ch == "X":
            result.append(pending)
            pending = next(remaining, None)
        else:
            result.append(ch)
    return "".join(result)


def format_phone_input(phone: str) -> str:
    """Mask a number as it is typed: (604) 555-1234, max 10 digits"""
    digits = phone_digits(phone)
    if len(digits) > 10:
        return digits[:10]
    return apply_mask(digits, PHONE_INPUT_MASK)


def format_phone_display(phone: str) -> str:
    """+1 (604) 555-1234 from a stored E.164 number"""
    return apply_mask(phone_digits(phone), PHONE_DISPLAY_MASK)


def format_price(amount: Union[Decimal, float]) -> str:
    return f"{float(amount):.2f}"


def format_currency(amount: Union[Decimal, float]) -> str:
    return f"${Decimal(amount):,.2f}"


def format_duration(minutes: int) -> str:
    return f"{minutes // 60}h {minutes % 60}m"


def format_order_date(value: datetime) -> str:
    """Mar 5, 2025 14:30"""
    return f"{value.strftime('%b')} {value.day}, {value.year} {value.strftime('%H:%M')}"


def format_long_date(value: datetime) -> str:
    """March 5, 2025 at 2:30 PM"""
    hour = value.hour % 12 or 12
    return (
        f"{value.strftime('%B')} {value.day}, {value.year} at "
        f"{hour}:{value.minute:02d} {'AM' if value.hour < 12 else 'PM'}"
    )
