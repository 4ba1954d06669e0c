"""
Mapping between ring angles and times of day.

A full turn of the ring is one day: 0 degrees is midnight at the top of the
ring, 90 degrees is 06:00, 180 degrees noon. Displayed minutes are always
floored to a multiple of MINUTE_STEP, never rounded to the nearest step.
"""
import math
from typing import Tuple

from sleepdial_helper import MalformedTimeString, clamp, floor_to_multiple

HOURS_PER_DAY = 24
MINUTES_PER_HOUR = 60
DEGREES_PER_DAY = 360.0
MINUTE_STEP = 5

# Absorbs float noise such as 21.999999999999996 minutes
_MINUTE_EPSILON = 1e-9
_LAST_MINUTE_OF_DAY = HOURS_PER_DAY * MINUTES_PER_HOUR - 1


def hours_for_angle(angle: float) -> float:
    return angle * HOURS_PER_DAY / DEGREES_PER_DAY


def angle_for_hours(hours: float) -> float:
    return hours * DEGREES_PER_DAY / HOURS_PER_DAY


def split_hours(hours: float) -> Tuple[int, int]:
    """
    Split fractional hours into whole hours and minutes, minutes floored to
    the nearest lower multiple of MINUTE_STEP. Both clock times and durations
    stay below a full day, so the result never exceeds 23:55.
    """
    total_minutes = math.floor(hours * MINUTES_PER_HOUR + _MINUTE_EPSILON)
    total_minutes = int(clamp(total_minutes, 0, _LAST_MINUTE_OF_DAY))
    whole_hours, minutes = divmod(total_minutes, MINUTES_PER_HOUR)

    return int(whole_hours), floor_to_multiple(int(minutes), MINUTE_STEP)


def wrapped_duration(start_hours: float, end_hours: float) -> float:
    """End before start means the end is on the next day."""
    if start_hours > end_hours:
        end_hours += HOURS_PER_DAY

    return end_hours - start_hours


def format_clock_time(angle: float) -> str:
    hours, minutes = split_hours(hours_for_angle(angle))

    return f"{hours:02d}:{minutes:02d}"


def format_duration(duration_hours: float) -> str:
    hours, minutes = split_hours(duration_hours)

    return f"{hours} hr {minutes} min" if hours > 0 else f"{minutes} min"


def parse_clock_time(text: str) -> Tuple[int, int]:
    parts = text.strip().split(":")
    if len(parts) != 2:
        raise MalformedTimeString(text)

    try:
        hours = int(parts[0])
        minutes = int(parts[1])
    except ValueError as e:
        raise MalformedTimeString(text) from e

    if not 0 <= hours < HOURS_PER_DAY or not 0 <= minutes < MINUTES_PER_HOUR:
        raise MalformedTimeString(text)

    return hours, minutes


def angle_for_clock_time(text: str) -> float:
    hours, minutes = parse_clock_time(text)

    return angle_for_hours(hours + minutes / MINUTES_PER_HOUR)
