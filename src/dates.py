"""Formatting of partial database dates ("1957-10-04", "1957-10", "1957")."""

import re

from errors import ValidationError


UNKNOWN_DATE = "<<unknown>>"
NO_DATE = "0000-00-00"

LONG_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

SHORT_MONTH_NAMES = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

# Most specific first; each field has a fixed width
DATE_PATTERNS = (
    re.compile(r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"),
    re.compile(r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})"),
    re.compile(r"(?P<year>[0-9]{4})"),
)


def _match_date(date_string: str) -> tuple[str, int, int]:
    for pattern in DATE_PATTERNS:
        match = pattern.fullmatch(date_string)
        if match:
            groups = match.groupdict()
            month = groups.get("month")
            day = groups.get("day")
            if day == "00" and month != "00":
                # "1957-10-00" has to go through cleanup_date() first
                raise ValidationError(
                    f'invalid date "{date_string}" (unknown day must be stripped, not zeroed)'
                )
            return (
                groups["year"],
                int(month) if month else 0,
                int(day) if day else 0,
            )

    raise ValidationError(f'invalid date "{date_string}" (must be YYYY-MM-DD, YYYY-MM or YYYY)')


def format_date(date_string: str, long_month_names: bool = False, in_on: bool = True) -> str:
    """
    Render a database date as a phrase.

    Exact dates read "on 4 Oct 1957", partial ones "in Oct 1957" or "in 1957".
    With ``in_on`` false the "on "/"in " prefix is dropped. The "<<unknown>>"
    placeholder renders as "(on) unknown date".

    Raises ValidationError if the string is not YYYY-MM-DD, YYYY-MM or YYYY with
    every digit present (e.g. "1957-10-4" is rejected), names a day without
    a month, or is not a string at all.
    """
    if not isinstance(date_string, str):
        raise ValidationError(f"date is not a string (it is {type(date_string).__name__})")
    if date_string == UNKNOWN_DATE:
        return "on unknown date" if in_on else "unknown date"

    year, month, day = _match_date(date_string)

    if day != 0 and month == 0:
        raise ValidationError(f"month must be non-zero if day is non-zero (date is {date_string})")
    if month > 12:
        raise ValidationError(f"month out of range in {date_string}")
    if day > 31:
        raise ValidationError(f"day of month out of range in {date_string}")

    if month == 0:
        return f"in {year}" if in_on else year

    month_name = (LONG_MONTH_NAMES if long_month_names else SHORT_MONTH_NAMES)[month - 1]
    if day == 0:
        return f"in {month_name} {year}" if in_on else f"{month_name} {year}"

    return f"on {day} {month_name} {year}" if in_on else f"{day} {month_name} {year}"


def format_optional_date(
    date_string: str | None, long_month_names: bool = False, in_on: bool = True
) -> str | None:
    """Like format_date() but returns None for a missing or unparseable date."""
    if date_string is None:
        return None
    try:
        return format_date(date_string, long_month_names, in_on)
    except ValidationError:
        return None


def cleanup_date(value) -> str:
    """
    Collapse a stored date toward its known precision.

    Trailing "-00" segments are stripped ("1957-10-00" -> "1957-10",
    "1957-00-00" -> "1957") and a missing date becomes "<<unknown>>".
    """
    if value is None:
        return UNKNOWN_DATE
    if not isinstance(value, str):
        raise ValidationError(f"stored date is not a string (it is {type(value).__name__})")

    result = value
    while result.endswith("-00"):
        result = result[:-3]
    return result
