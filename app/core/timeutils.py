"""
Date and time helpers shared by job deadlines and interview scheduling.

All instants are stored in UTC. Wall-clock input is read in the
organization timezone from settings.
"""
import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Tuple
from zoneinfo import ZoneInfo
from app.core.config import settings

TIME_12H_PATTERN = re.compile(r'^\s*(\d{1,2}):(\d{2})\s*([AaPp][Mm])\s*$')
TIME_24H_PATTERN = re.compile(r'^\s*(\d{1,2}):(\d{2})\s*$')


def org_timezone() -> ZoneInfo:
    return ZoneInfo(settings.ORGANIZATION_TIMEZONE)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes read back from the store."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_deadline(value) -> Optional[datetime]:
    """
    Parse a job deadline.

    A bare date means the end of that day in the organization timezone; a
    datetime is taken as given (naive values in the organization timezone).
    Returns None when the value cannot be parsed.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.max)
    else:
        text = str(value).strip()
        try:
            if len(text) == 10:
                parsed = datetime.combine(date.fromisoformat(text), time.max)
            else:
                parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=org_timezone())
    return parsed.astimezone(timezone.utc)


def parse_calendar_date(value) -> Optional[date]:
    """Parse an interview date; ISO datetimes are read in the organization timezone."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return value
    else:
        text = str(value).strip()
        try:
            if len(text) == 10:
                return date.fromisoformat(text)
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(org_timezone())
    return parsed.date()


def parse_clock_time(value: Optional[str]) -> Optional[Tuple[int, int]]:
    """
    Parse ``HH:MMAM``/``HH:MM PM`` into 24-hour (hour, minute).

    Plain ``HH:MM`` is accepted as 24-hour time. Returns None when invalid.
    """
    if not value:
        return None
    match = TIME_12H_PATTERN.match(value)
    if match:
        hours, minutes, meridiem = int(match.group(1)), int(match.group(2)), match.group(3).upper()
        if not 1 <= hours <= 12 or minutes > 59:
            return None
        if meridiem == "PM" and hours < 12:
            hours += 12
        if meridiem == "AM" and hours == 12:
            hours = 0
        return hours, minutes
    match = TIME_24H_PATTERN.match(value)
    if match:
        hours, minutes = int(match.group(1)), int(match.group(2))
        if hours > 23 or minutes > 59:
            return None
        return hours, minutes
    return None


def interview_slot(day: date, hour: int, minute: int, slot_minutes: Optional[int] = None) -> Tuple[datetime, datetime]:
    """Start and end instants of an interview slot in the organization timezone."""
    minutes = slot_minutes or settings.INTERVIEW_SLOT_MINUTES
    start = datetime.combine(day, time(hour, minute), tzinfo=org_timezone())
    return start, start + timedelta(minutes=minutes)
