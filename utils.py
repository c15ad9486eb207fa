"""
Utility helpers for date parsing and timezone handling.
"""
import re
from datetime import date, datetime, time
import pytz

IST = pytz.timezone('Asia/Kolkata')
UTC = pytz.UTC

DATE_LAYOUT = "%Y-%m-%d"
_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


class InvalidDateError(ValueError):
    pass


def parse_date(value: str) -> date:
    """Parse a strict YYYY-MM-DD string into a date"""
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise InvalidDateError(f"invalid date: {value!r}")
    try:
        return datetime.strptime(value, DATE_LAYOUT).date()
    except ValueError as e:
        raise InvalidDateError(f"invalid date: {value!r}") from e


def to_utc_midnight(day: date) -> datetime:
    """Midnight UTC on the given calendar day"""
    return UTC.localize(datetime.combine(day, time.min))


def format_date(day: date) -> str:
    # Wire format for class dates, e.g. 2020-12-12T00:00:00Z
    return to_utc_midnight(day).strftime("%Y-%m-%dT%H:%M:%SZ")


def today_ist() -> date:
    return datetime.now(IST).date()
