from datetime import datetime, time, timezone as dt_tz

from django.utils import timezone


def now():
    return timezone.now()


def end_of_day(moment):
    """Last instant of ``moment``'s calendar day in the project time zone."""
    local = timezone.localtime(moment)
    return datetime.combine(local.date(), time.max, tzinfo=local.tzinfo)


def to_utc_iso(dt):
    if dt is None:
        return None
    return dt.astimezone(dt_tz.utc).isoformat()
