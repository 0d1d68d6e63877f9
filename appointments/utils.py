from datetime import datetime, time

from .exceptions import SchedulingValidationError

RANGE_SEPARATOR = " - "
TIME_FORMATS = ("%H:%M", "%H:%M:%S")


def parse_time(value):
    """Accept a ``time`` or an ``HH:MM``/``HH:MM:SS`` string."""
    if isinstance(value, time):
        return value
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(value.strip(), fmt).time()
        except ValueError:
            continue
    raise SchedulingValidationError(f"Invalid time: {value}")


def format_time_range(start_time, end_time):
    return f"{start_time:%H:%M}{RANGE_SEPARATOR}{end_time:%H:%M}"


def resolve_time_range(start_time=None, end_time=None, time_range=None):
    """
    Work out (start, end) from a discrete pair and/or an ``"HH:MM - HH:MM"``
    range. The discrete pair wins when both are complete.
    """
    if time_range and (not start_time or not end_time):
        parts = time_range.split(RANGE_SEPARATOR.strip())
        if len(parts) == 2:
            start_time = start_time or parts[0].strip() or None
            end_time = end_time or parts[1].strip() or None

    if not start_time or not end_time:
        raise SchedulingValidationError("Start time and end time are required")

    start, end = parse_time(start_time), parse_time(end_time)
    if end <= start:
        raise SchedulingValidationError("End time must be after start time")
    return start, end
