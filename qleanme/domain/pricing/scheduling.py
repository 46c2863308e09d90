"""Booking window rules shared by the order flows"""

import calendar
from datetime import date, datetime, timedelta
from typing import Optional

from ...config import SERVICE_HOURS_END, SERVICE_HOURS_START
from .catalog import LAUNDRY_BOOKING_WINDOW_MONTHS, LAUNDRY_MIN_LEAD_DAYS, LaundryServiceType

SERVICE_HOURS_MESSAGE = "Please select a time between 8 AM and 8 PM"
PAST_DATE_MESSAGE = "Please select a date and time in the future"


def add_months(value: date, months: int) -> date:
    """Calendar month arithmetic, clamping to the last day of a shorter month"""
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def is_within_service_hours(value: datetime) -> bool:
    return SERVICE_HOURS_START <= value.hour < SERVICE_HOURS_END


def ensure_service_hours(value: datetime) -> datetime:
    if not is_within_service_hours(value):
        raise ValueError(SERVICE_HOURS_MESSAGE)
    return value


def ensure_not_in_past(value: datetime, now: Optional[datetime] = None) -> datetime:
    now = now or datetime.now(value.tzinfo)
    if value < now:
        raise ValueError(PAST_DATE_MESSAGE)
    return value


def default_service_time(now: Optional[datetime] = None) -> datetime:
    """Current hour on the hour, pulled into the 8:00-19:00 booking range"""
    now = now or datetime.now()
    hour = max(min(now.hour, SERVICE_HOURS_END - 1), SERVICE_HOURS_START)
    return now.replace(hour=hour, minute=0, second=0, microsecond=0)


def laundry_booking_window(service: LaundryServiceType, today: Optional[date] = None) -> tuple[date, date]:
    """Earliest and latest pickup dates for a laundry service"""
    today = today or date.today()
    earliest = today + timedelta(days=LAUNDRY_MIN_LEAD_DAYS[service])
    return earliest, add_months(earliest, LAUNDRY_BOOKING_WINDOW_MONTHS)


def ensure_laundry_date(service: LaundryServiceType, value: datetime, today: Optional[date] = None) -> datetime:
    earliest, latest = laundry_booking_window(service, today)
    if value.date() < earliest:
        raise ValueError(f"Earliest available pickup for {service.value} is {earliest.isoformat()}")
    if value.date() > latest:
        raise ValueError(f"Pickups can be booked up to {latest.isoformat()}")
    return value
