"""Human readable formatting of durations."""

from __future__ import annotations

from datetime import timedelta

# Calendar approximations for long durations
SECONDS_PER_YEAR = 31_557_600
SECONDS_PER_MONTH = 2_630_016
SECONDS_PER_DAY = 86_400


def _plural(value: int, name: str) -> str:
    return f"{value}{name}" if value == 1 else f"{value}{name}s"


def format_duration(duration: timedelta) -> str:
    """Format a duration as space separated components.

    Components with a zero value are left out and the largest unit comes
    first, so one hour, two minutes and three seconds is ``1h 2m 3s``.
    A zero duration is ``0s``.
    """
    total_seconds = duration.days * SECONDS_PER_DAY + duration.seconds
    if total_seconds < 0:
        raise ValueError(f"Cannot format negative duration {duration}")

    years, rest = divmod(total_seconds, SECONDS_PER_YEAR)
    months, rest = divmod(rest, SECONDS_PER_MONTH)
    days, rest = divmod(rest, SECONDS_PER_DAY)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)
    millis, micros = divmod(duration.microseconds, 1000)

    parts = []
    if years:
        parts.append(_plural(years, "year"))
    if months:
        parts.append(_plural(months, "month"))
    if days:
        parts.append(_plural(days, "day"))
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if seconds:
        parts.append(f"{seconds}s")
    if millis:
        parts.append(f"{millis}ms")
    if micros:
        parts.append(f"{micros}us")

    return " ".join(parts) if parts else "0s"
