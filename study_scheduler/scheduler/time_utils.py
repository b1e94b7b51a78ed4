from datetime import datetime

MINUTES_PER_DAY = 24 * 60


def add_minutes(hours: int, minutes: int, add_mins: int) -> tuple[int, int]:
    """Add minutes to a wall-clock time, wrapping past midnight."""
    total = (hours * 60 + minutes + add_mins) % MINUTES_PER_DAY
    return total // 60, total % 60


def format_time(hours: int, minutes: int) -> str:
    """Convert a 24-hour time to the 12-hour form, e.g. ``13:05 -> '1:05 PM'``."""
    hours %= 24
    period = "PM" if hours >= 12 else "AM"
    display_hours = hours % 12 or 12
    return f"{display_hours}:{minutes:02d} {period}"


def parse_time(value: str) -> tuple[int, int]:
    """Inverse of :func:`format_time`."""
    parsed = datetime.strptime(value.strip(), "%I:%M %p")
    return parsed.hour, parsed.minute
