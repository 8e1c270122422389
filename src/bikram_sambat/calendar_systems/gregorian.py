"""Gregorian calendar to Julian Day Number conversion."""

from datetime import date

# Era identifiers accepted for proleptic Gregorian dates
GREGORIAN_ERAS = ("BC", "AD")


def gregorian_to_julian_day(era: str, year: int, month: int, day: int) -> int:
    """Convert a proleptic Gregorian date to its Julian Day Number.

    Args:
        era: "AD" or "BC"; BC year ``y`` is astronomical year ``1 - y``
        year: Year within the era
        month: Month (1-12)
        day: Day of month

    Returns:
        Julian Day Number of the date (the day starting at noon UT)
    """
    if era == "BC":
        year = 1 - year
    elif era != "AD":
        raise ValueError(f"Unknown Gregorian era: {era!r}")

    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3

    return (
        day
        + (153 * m + 2) // 5
        + 365 * y
        + y // 4
        - y // 100
        + y // 400
        - 32045
    )


def julian_day_to_gregorian(jd: int) -> date:
    """Convert a Julian Day Number to a Gregorian date (AD years only)."""
    a = jd + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10

    return date(year, month, day)


def date_to_julian_day(date_obj: date) -> int:
    """Julian Day Number of a ``datetime.date``."""
    return gregorian_to_julian_day("AD", date_obj.year, date_obj.month, date_obj.day)
