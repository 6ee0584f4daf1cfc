# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Duration parsing and formatting helpers.

Operators type durations as hour-decimal shorthand: the digit after the
point counts tens of minutes (8.2 = 8h 20m, 8.5 = 8h 50m) and .6 rolls over
to the next full hour. normalize_hours_input is the single place where that
shorthand is turned into a value safe to store and aggregate.
"""

from decimal import Decimal, InvalidOperation

from .exceptions import InvalidDurationFormat

TWO_PLACES = Decimal("0.01")
MIN_ENTRY_MINUTES = 30
MAX_DAY_MINUTES = 24 * 60


def normalize_hours_input(raw: int | float | Decimal | str) -> Decimal:
    """Canonicalize hour-decimal shorthand.

    Args:
        raw: User supplied value, e.g. 8, 8.2, "8.50".

    Returns:
        The canonical value with two decimal places.

    Raises:
        InvalidDurationFormat: If the value is negative, not a number, or
            its fractional part is not one of .0 to .6.
    """
    if isinstance(raw, bool):
        raise InvalidDurationFormat(raw)

    try:
        value = Decimal(str(raw).strip())
    except InvalidOperation as e:
        raise InvalidDurationFormat(raw) from e

    if not value.is_finite() or value < 0:
        raise InvalidDurationFormat(raw)

    hours = int(value)
    hundredths = (value - hours) * 100
    if hundredths != hundredths.to_integral_value() or int(hundredths) % 10:
        raise InvalidDurationFormat(raw)

    digit = int(hundredths) // 10
    if digit == 0:
        # .0 carries no minutes
        result = Decimal(hours)
    elif digit == 5:
        result = Decimal(f"{hours}.50")
    elif digit == 6:
        result = Decimal(hours + 1)
    elif 1 <= digit <= 4:
        result = value
    else:
        raise InvalidDurationFormat(raw)

    return result.quantize(TWO_PLACES)


def split_hours_input(value: Decimal) -> tuple[int, int]:
    """Split a canonical shorthand value into (hours, minutes).

    The tenths digit of the canonical value counts tens of minutes.
    """
    hours = int(value)
    minutes = int((value - hours) * 100)
    return hours, minutes


def convert_to_decimal_hours(hours: int, minutes: int) -> float:
    """Convert hours and minutes to decimal hours for calculations."""
    return round(hours + minutes / 60, 2)


def convert_from_decimal_hours(decimal_hours: float) -> tuple[int, int]:
    """Convert decimal hours back to (hours, minutes)."""
    rounded = round(decimal_hours, 2)
    hours = int(rounded)
    minutes = round((rounded - hours) * 60)
    if minutes == 60:
        return hours + 1, 0
    return hours, minutes


def validate_time_input(hours: int, minutes: int) -> None:
    """Check separate hour and minute fields.

    Raises:
        InvalidDurationFormat: If either field is out of range or the total
            is below 30 minutes or above 24 hours.
    """
    if hours < 0 or hours > 24:
        raise InvalidDurationFormat(hours, "Hours must be between 0 and 24")
    if minutes < 0 or minutes > 59:
        raise InvalidDurationFormat(minutes, "Minutes must be between 0 and 59")

    total_minutes = hours * 60 + minutes
    if total_minutes < MIN_ENTRY_MINUTES:
        raise InvalidDurationFormat(total_minutes, "Minimum time is 30 minutes")
    if total_minutes > MAX_DAY_MINUTES:
        raise InvalidDurationFormat(total_minutes, "Maximum time is 24 hours")


def resolve_duration(
    time_spent: int | float | Decimal | str | None,
    hours: int | None = None,
    minutes: int | None = None,
) -> tuple[int, int]:
    """Turn either shorthand or separate fields into a checked (hours, minutes).

    Args:
        time_spent: Hour-decimal shorthand, takes precedence when given.
        hours: Whole hours, used when no shorthand is given.
        minutes: Minutes, defaults to 0 when hours is given.

    Returns:
        Tuple of (hours, minutes).

    Raises:
        InvalidDurationFormat: If nothing usable was supplied or the result
            is out of range.
    """
    if time_spent is not None:
        hours, minutes = split_hours_input(normalize_hours_input(time_spent))
    elif hours is not None:
        minutes = minutes or 0
    else:
        raise InvalidDurationFormat(None, "Time spent is required")

    validate_time_input(hours, minutes)
    return hours, minutes


def format_time_spent(hours: float, minutes: int | None = None) -> str:
    """Format a duration as "2h 12m".

    When minutes is omitted, hours is read as decimal hours.
    """
    if minutes is None:
        hours, minutes = convert_from_decimal_hours(hours)

    hours = int(hours)
    if hours == 0:
        return f"{minutes}m"
    if minutes == 0:
        return f"{hours}h"
    return f"{hours}h {minutes}m"
