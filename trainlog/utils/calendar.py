"""Canonical week and month window helpers.

Week boundaries are Monday-Sunday (ISO week). All helpers take the
reference day explicitly; nothing here reads the clock.
"""

from datetime import date, datetime, timedelta

MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def as_day(value: date | datetime) -> date:
    """Return the calendar day of a date or datetime (time of day dropped)."""
    if isinstance(value, datetime):
        return value.date()
    return value


def week_start(d: date) -> date:
    """Return Monday of the calendar week containing d."""
    return d - timedelta(days=d.weekday())


def week_end(d: date) -> date:
    """Return Sunday of the calendar week containing d."""
    return week_start(d) + timedelta(days=6)


def week_windows(now: date | datetime, weeks_back: int) -> list[tuple[date, date]]:
    """Return consecutive Monday-Sunday windows ending with the week of now.

    Args:
        now: Reference instant
        weeks_back: Number of weeks (values below 1 are treated as 1)

    Returns:
        List of (monday, sunday) tuples, oldest first. Windows are contiguous
        and non-overlapping; the last one contains now.
    """
    current = week_start(as_day(now))
    count = max(1, weeks_back)
    windows = []
    for i in range(count - 1, -1, -1):
        start = current - timedelta(weeks=i)
        windows.append((start, start + timedelta(days=6)))
    return windows


def month_start(d: date) -> date:
    """Return the first day of the month containing d."""
    return d.replace(day=1)


def month_end(d: date) -> date:
    """Return the last day of the month containing d."""
    if d.month == 12:
        return date(d.year, 12, 31)
    return date(d.year, d.month + 1, 1) - timedelta(days=1)


def shift_months(d: date, months: int) -> date:
    """Return the first day of the month `months` away from d (negative goes back)."""
    total = d.year * 12 + (d.month - 1) + months
    return date(total // 12, total % 12 + 1, 1)


def month_windows(now: date | datetime, months_back: int) -> list[tuple[date, date]]:
    """Return calendar-month windows ending with the month of now, oldest first."""
    today = as_day(now)
    count = max(1, months_back)
    windows = []
    for i in range(count - 1, -1, -1):
        start = shift_months(today, -i)
        windows.append((start, month_end(start)))
    return windows


def short_week_label(d: date) -> str:
    """Day/month label used on weekly charts, e.g. "7/10"."""
    return f"{d.day}/{d.month}"


def day_month_label(d: date) -> str:
    """Day and abbreviated month, e.g. "7 Oct"."""
    return f"{d.day} {MONTH_ABBREVIATIONS[d.month - 1]}"


def month_label(d: date) -> str:
    """Abbreviated month name, e.g. "Oct"."""
    return MONTH_ABBREVIATIONS[d.month - 1]
