"""Nepali calendar (Bikram Sambat) conversion implementation."""

import operator
from datetime import date
from typing import Any, List

from bikram_sambat.utils.exceptions import (
    CalendarException,
    DateOutOfRangeError,
    InvalidDayError,
    InvalidMonthError,
    YearOutOfRangeError,
)

from . import month_table
from .gregorian import date_to_julian_day, julian_day_to_gregorian
from .types import CalendarDate, CalendarSystem
from .year_index import get_year_start_index

# Julian day of 1970 Baisakh 1 BS (1913-04-13 AD), the first tabulated day
NEPALI_EPOCH = 2419871
ERA = "BS"


class NepaliCalendar:
    """Bikram Sambat calendar backed by the tabulated almanac.

    Dates are converted through Julian Day Numbers. Only years
    ``FIRST_TABULATED_YEAR`` to ``LAST_TABULATED_YEAR`` (1970-2099 BS) are
    supported; anything outside them raises instead of being extrapolated.
    Only one era identifier is supported: ``"BS"``.
    """

    identifier = CalendarSystem.NEPALI

    FIRST_TABULATED_YEAR = month_table.FIRST_TABULATED_YEAR
    LAST_TABULATED_YEAR = month_table.LAST_TABULATED_YEAR

    def from_julian_day(self, jd: int) -> CalendarDate:
        """Convert a Julian Day Number to a Bikram Sambat date.

        Raises:
            TypeError: If ``jd`` is not an integer
            DateOutOfRangeError: If ``jd`` falls outside the tabulated years
        """
        jd = operator.index(jd)
        index = get_year_start_index()
        days = jd - NEPALI_EPOCH

        if days < 0 or days >= index.total_days:
            raise DateOutOfRangeError(jd)

        year_index = index.year_index_for_day(days)
        year = self.FIRST_TABULATED_YEAR + year_index

        day_in_month = days - index.starts[year_index] + 1
        month = 1
        while month < month_table.MONTHS_IN_YEAR:
            days_in_month = month_table.month_length(year, month)
            if day_in_month <= days_in_month:
                break
            day_in_month -= days_in_month
            month += 1

        return CalendarDate(self.identifier, year, month, day_in_month, era=ERA)

    def to_julian_day(self, date_obj: Any) -> int:
        """Convert a Bikram Sambat date to its Julian Day Number.

        Args:
            date_obj: Any object with ``year``, ``month`` and ``day``

        Raises:
            YearOutOfRangeError: If the year is not tabulated
            InvalidMonthError: If the month is not in 1..12
            InvalidDayError: If the day does not exist in that month
        """
        year, month, day = date_obj.year, date_obj.month, date_obj.day
        self._check_year(year)

        if month < 1 or month > month_table.MONTHS_IN_YEAR:
            raise InvalidMonthError(month)

        days_in_month = month_table.month_length(year, month)
        if day < 1 or day > days_in_month:
            raise InvalidDayError(year, month, day, days_in_month)

        index = get_year_start_index()
        jd = NEPALI_EPOCH + index.starts[year - self.FIRST_TABULATED_YEAR]
        for m in range(1, month):
            jd += month_table.month_length(year, m)

        return jd + day - 1

    def get_days_in_month(self, date_obj: Any) -> int:
        """Get number of days in the month of ``date_obj``."""
        return month_table.month_length(date_obj.year, date_obj.month)

    def get_days_in_year(self, date_obj: Any) -> int:
        """Get number of days in the year of ``date_obj``."""
        year = date_obj.year
        self._check_year(year)

        if year == self.LAST_TABULATED_YEAR:
            return sum(month_table.month_lengths(year))

        index = get_year_start_index()
        year_index = year - self.FIRST_TABULATED_YEAR
        return index.starts[year_index + 1] - index.starts[year_index]

    def get_years_in_era(self) -> int:
        """Last supported year of the BS era."""
        return self.FIRST_TABULATED_YEAR + month_table.year_count() - 1

    def get_eras(self) -> List[str]:
        """Era identifiers of the calendar."""
        return [ERA]

    def _check_year(self, year: int) -> None:
        if year < self.FIRST_TABULATED_YEAR or year > self.LAST_TABULATED_YEAR:
            raise YearOutOfRangeError(
                year, self.FIRST_TABULATED_YEAR, self.LAST_TABULATED_YEAR
            )

    # Gregorian helpers

    def is_valid_bs_date(self, year: int, month: int, day: int) -> bool:
        """Check if a Bikram Sambat date exists in the tabulated range."""
        try:
            self.to_julian_day(CalendarDate(self.identifier, year, month, day))
        except CalendarException:
            return False
        return True

    def bs_to_ad(self, year: int, month: int, day: int) -> date:
        """Convert Bikram Sambat date to Gregorian date."""
        jd = self.to_julian_day(CalendarDate(self.identifier, year, month, day))
        return julian_day_to_gregorian(jd)

    def ad_to_bs(self, date_obj: date) -> CalendarDate:
        """Convert Gregorian date to Bikram Sambat date."""
        return self.from_julian_day(date_to_julian_day(date_obj))
