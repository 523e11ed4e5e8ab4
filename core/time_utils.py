from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from core.config import settings

LOCAL_TZ = ZoneInfo(settings.TIMEZONE)

DATE_FORMAT = "%Y-%m-%d"

def get_current_time():
    """Returns the current time in the configured local timezone."""
    return datetime.now(LOCAL_TZ)

def date_key(d: date) -> str:
    """Canonical YYYY-MM-DD key used for habit logs."""
    return d.strftime(DATE_FORMAT)

def parse_date_key(key: str) -> date:
    return datetime.strptime(key, DATE_FORMAT).date()

def today_key() -> str:
    return date_key(get_current_time().date())

def shift_date_key(key: str, days: int) -> str:
    return date_key(parse_date_key(key) + timedelta(days=days))

def weekday_index(d: date) -> int:
    """Weekday index with 0 = Sunday ... 6 = Saturday."""
    return (d.weekday() + 1) % 7
