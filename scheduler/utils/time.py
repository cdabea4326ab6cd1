from datetime import datetime, timedelta, timezone as dt_tz

from django.utils import timezone

CST = dt_tz(timedelta(hours=8))


def now_ms() -> int:
    return int(timezone.now().timestamp() * 1000)


def ms_to_utc(ms):
    return datetime.fromtimestamp(ms / 1000, tz=dt_tz.utc)


def to_cst_iso(ms):
    return ms_to_utc(ms).astimezone(CST).isoformat()


def fixed_clock(ms):
    """Clock that always reports ``ms``. Handy for tests and replays."""
    return lambda: ms
