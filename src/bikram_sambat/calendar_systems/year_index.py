"""Cumulative year-start offsets for the tabulated Bikram Sambat years."""

import bisect
import threading
from typing import Optional, Sequence, Tuple

from bikram_sambat.utils.exceptions import YearOutOfRangeError
from bikram_sambat.utils.logging import get_logger

from . import month_table

logger = get_logger(__name__)


class YearStartIndex:
    """Days elapsed before each tabulated year, counted from the first one.

    Holds the decoded month table next to the offsets derived from it so the
    pair is always published together.
    """

    __slots__ = ("words", "starts", "total_days")

    def __init__(
        self, words: Tuple[int, ...], starts: Tuple[int, ...], total_days: int
    ) -> None:
        """Initialize the index. Use ``build`` to derive one from a table."""
        self.words = words
        self.starts = starts
        self.total_days = total_days

    @classmethod
    def build(cls, words: Sequence[int]) -> "YearStartIndex":
        """Derive the index from decoded year words in one pass."""
        starts = []
        year_start = 0
        for word in words:
            starts.append(year_start)
            for month in range(1, month_table.MONTHS_IN_YEAR + 1):
                year_start += month_table.word_month_length(word, month)
        return cls(tuple(words), tuple(starts), year_start)

    def __len__(self) -> int:
        """Number of tabulated years."""
        return len(self.starts)

    def total_days_before(self, year_index: int) -> int:
        """Days in all tabulated years before ``year_index``."""
        if year_index < 0 or year_index >= len(self.starts):
            year = month_table.FIRST_TABULATED_YEAR + year_index
            raise YearOutOfRangeError(
                year,
                month_table.FIRST_TABULATED_YEAR,
                month_table.FIRST_TABULATED_YEAR + len(self.starts) - 1,
            )
        return self.starts[year_index]

    def year_index_for_day(self, days: int) -> int:
        """Index of the year containing day offset ``days``.

        Binary search for the last start that is ``<= days``. Callers check
        that ``0 <= days < total_days``.
        """
        return bisect.bisect_right(self.starts, days) - 1


_year_start_index: Optional[YearStartIndex] = None
_index_lock = threading.Lock()


def get_year_start_index() -> YearStartIndex:
    """Return the process-wide index, building it on first use."""
    global _year_start_index
    if _year_start_index is None:
        with _index_lock:
            # Double-check locking pattern
            if _year_start_index is None:
                index = YearStartIndex.build(month_table.decode())
                logger.debug(
                    "year_start_index_built",
                    years=len(index),
                    total_days=index.total_days,
                )
                _year_start_index = index
    return _year_start_index
