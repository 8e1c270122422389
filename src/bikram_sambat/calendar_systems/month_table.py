"""Month-length table for the Bikram Sambat calendar.

Bikram Sambat month lengths follow the published almanac rather than a
rule, so they are tabulated. Each year is stored as a 24-bit little-endian
word; bits ``[2m, 2m+1]`` of the word (``m`` = 0 for Baisakh through 11 for
Chaitra) hold the number of days the month has beyond 29.
"""

import threading
from typing import Optional, Tuple

from bikram_sambat.utils.exceptions import (
    InvalidMonthError,
    MonthTableError,
    YearOutOfRangeError,
)

FIRST_TABULATED_YEAR = 1970
BASE_MONTH_LENGTH = 29
MONTHS_IN_YEAR = 12
WORD_SIZE = 3

ENCODED_MONTH_LENGTHS = bytes.fromhex(
    "ba1a51ba1751ee5690ed5684ba1a51fa1951ee5690ed5684ba1a51fa1651"  # 1970-1979
    "ee5690ea4a51ba1a51fa1651ee5690ea4a51ba1a51ee1651ee5690ea1a51"  # 1980-1989
    "ba1a51ee1651ee5684ea1a51ba1a51ee5650ee5684ba1a51ba1a51ee5690"  # 1990-1999
    "ed5684ba1a51fa1651ee5690ed5684ba1a51fa1651ee5690ea4a81ba1a51"  # 2000-2009
    "fa1651ee5690ea4a51ba1a51fa1651ee5690ea4a51ba1a51ee1651ee5684"  # 2010-2019
    "ea1a51ba1a51ee5650ee5684ea1a51ba1a51ee5690ed5684ba1a51ba1751"  # 2020-2029
    "ee5690ed5684ba1a51fa1651ee5690ed4a81ba1a51fa1651ee5690ea4a51"  # 2030-2039
    "ba1a51fa1651ee5690ea4a51ba1a51ee1651ee5690ea1a51ba1a51ee5650"  # 2040-2049
    "ee5684ea1a51ba1a51ee5650ee5684ba1a51ba1751ee5690ed5684ba1a51"  # 2050-2059
    "fa1651ee5690ed4a84ba1a51fa1651ee5690ea4a81ba1a51fa1651ee5690"  # 2060-2069
    "ea4a51ba1a51ee1651ee5690ea1a51ba1a51ee5650ee5684ea1a51ba1a51"  # 2070-2079
    "ee5650ee5684ba1a51ba1a51ee5690ed5684ba1a51fa1651ee5690ed5684"  # 2080-2089
    "ba1a51fa1651ee5690ea4a81ba1a51fa1651ee5690ea4a51ba1a51fa1651"  # 2090-2099
)

LAST_TABULATED_YEAR = FIRST_TABULATED_YEAR + len(ENCODED_MONTH_LENGTHS) // WORD_SIZE - 1

_decoded: Optional[Tuple[int, ...]] = None
_decode_lock = threading.Lock()


def decode_words(blob: bytes) -> Tuple[int, ...]:
    """Split an encoded blob into one unsigned word per year."""
    if len(blob) % WORD_SIZE:
        raise MonthTableError(
            f"Encoded table length {len(blob)} is not a multiple of {WORD_SIZE}"
        )
    return tuple(
        int.from_bytes(blob[offset : offset + WORD_SIZE], "little")
        for offset in range(0, len(blob), WORD_SIZE)
    )


def decode() -> Tuple[int, ...]:
    """Return the decoded table, decoding it on first use."""
    global _decoded
    if _decoded is None:
        with _decode_lock:
            # Double-check locking pattern
            if _decoded is None:
                _decoded = decode_words(ENCODED_MONTH_LENGTHS)
    return _decoded


def year_count() -> int:
    """Number of tabulated years."""
    return len(decode())


def word_month_length(word: int, month: int) -> int:
    """Length of ``month`` as packed in a single year word."""
    return BASE_MONTH_LENGTH + ((word >> (2 * (month - 1))) & 3)


def month_length(year: int, month: int) -> int:
    """Get the number of days in a Bikram Sambat month.

    Args:
        year: BS year
        month: BS month (1-12)

    Returns:
        Number of days, 29 to 32

    Raises:
        InvalidMonthError: If month is not in 1..12
        YearOutOfRangeError: If the year is not tabulated
    """
    if month < 1 or month > MONTHS_IN_YEAR:
        raise InvalidMonthError(month)

    words = decode()
    offset = year - FIRST_TABULATED_YEAR
    if offset < 0 or offset >= len(words):
        raise YearOutOfRangeError(year, FIRST_TABULATED_YEAR, LAST_TABULATED_YEAR)

    return word_month_length(words[offset], month)


def month_lengths(year: int) -> Tuple[int, ...]:
    """Get all twelve month lengths of a year."""
    return tuple(month_length(year, m) for m in range(1, MONTHS_IN_YEAR + 1))
