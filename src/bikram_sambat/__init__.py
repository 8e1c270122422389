"""Bikram Sambat calendar engine.

Converts between Bikram Sambat (Nepali) calendar dates and Julian Day
Numbers using the tabulated 1970-2099 BS almanac, and renders converted
dates for Nepali and transliterated locales.
"""

from .calendar_systems import (
    CalendarDate,
    CalendarSystem,
    DateTimeFormatOptions,
    DateTimeFormatPart,
    NepaliCalendar,
    NepaliDateTimeFormat,
    gregorian_to_julian_day,
    julian_day_to_gregorian,
)
from .utils.exceptions import (
    BikramSambatException,
    CalendarException,
    DateOutOfRangeError,
    InvalidDayError,
    InvalidLocaleError,
    InvalidMonthError,
    MonthTableError,
    YearOutOfRangeError,
)

__version__ = "0.1.0"

__all__ = [
    "CalendarDate",
    "CalendarSystem",
    "DateTimeFormatOptions",
    "DateTimeFormatPart",
    "NepaliCalendar",
    "NepaliDateTimeFormat",
    "gregorian_to_julian_day",
    "julian_day_to_gregorian",
    "BikramSambatException",
    "CalendarException",
    "DateOutOfRangeError",
    "InvalidDayError",
    "InvalidLocaleError",
    "InvalidMonthError",
    "MonthTableError",
    "YearOutOfRangeError",
]
