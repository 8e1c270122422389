"""Custom exceptions for the Bikram Sambat calendar engine."""

from typing import Optional


class BikramSambatException(Exception):
    """Base exception for all Bikram Sambat exceptions."""

    def __init__(self, message: str, code: Optional[str] = None):
        """Initialize exception.

        Args:
            message: Error message
            code: Optional error code
        """
        super().__init__(message)
        self.message = message
        self.code = code


class CalendarException(BikramSambatException, ValueError):
    """Base exception for calendar input outside the supported domain."""


class InvalidMonthError(CalendarException):
    """Raised when a month number is not in 1..12."""

    def __init__(self, month: int):
        """Initialize InvalidMonthError."""
        super().__init__(f"Invalid month value: {month}", "INVALID_MONTH")
        self.month = month


class InvalidDayError(CalendarException):
    """Raised when a day does not exist in the given month."""

    def __init__(self, year: int, month: int, day: int, max_day: int):
        """Initialize InvalidDayError."""
        super().__init__(
            f"Invalid day: {day} (BS {year}/{month} has {max_day} days)",
            "INVALID_DAY",
        )
        self.year = year
        self.month = month
        self.day = day
        self.max_day = max_day


class YearOutOfRangeError(CalendarException):
    """Raised when a year has no entry in the month-length table."""

    def __init__(self, year: int, first_year: int, last_year: int):
        """Initialize YearOutOfRangeError."""
        super().__init__(
            f"Year outside supported range: {year} BS "
            f"(supported years: {first_year}-{last_year})",
            "YEAR_OUT_OF_RANGE",
        )
        self.year = year
        self.first_year = first_year
        self.last_year = last_year


class DateOutOfRangeError(CalendarException):
    """Raised when a Julian day falls outside the tabulated years."""

    def __init__(self, julian_day: int):
        """Initialize DateOutOfRangeError."""
        super().__init__(
            f"Date outside supported range: {julian_day}", "DATE_OUT_OF_RANGE"
        )
        self.julian_day = julian_day


class MonthTableError(BikramSambatException):
    """Raised when the embedded month-length table is malformed."""

    def __init__(self, message: str = "Malformed month-length table"):
        """Initialize MonthTableError."""
        super().__init__(message, "MONTH_TABLE_ERROR")


class InvalidLocaleError(BikramSambatException, ValueError):
    """Raised when a locale tag is not well formed."""

    def __init__(self, locale: str):
        """Initialize InvalidLocaleError."""
        super().__init__(f"Incorrect locale information provided: {locale!r}")
        self.code = "INVALID_LOCALE"
        self.locale = locale
