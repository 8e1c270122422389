"""Bikram Sambat calendar support.

This package provides the tabulated Bikram Sambat (Nepali) calendar: the
encoded month-length table, the derived year-start index, conversion to and
from Julian Day Numbers, and locale-aware rendering of converted dates.
"""

from .formatter import DateTimeFormatOptions, DateTimeFormatPart, NepaliDateTimeFormat
from .gregorian import gregorian_to_julian_day, julian_day_to_gregorian
from .nepali import NEPALI_EPOCH, NepaliCalendar
from .types import CalendarConfig, CalendarDate, CalendarSystem

__all__ = [
    "CalendarSystem",
    "CalendarDate",
    "CalendarConfig",
    "DateTimeFormatOptions",
    "DateTimeFormatPart",
    "NEPALI_EPOCH",
    "NepaliCalendar",
    "NepaliDateTimeFormat",
    "gregorian_to_julian_day",
    "julian_day_to_gregorian",
]
