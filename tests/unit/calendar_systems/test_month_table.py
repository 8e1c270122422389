"""Tests for the encoded Bikram Sambat month-length table."""

import pytest

from bikram_sambat.calendar_systems import month_table
from bikram_sambat.utils.exceptions import (
    InvalidMonthError,
    MonthTableError,
    YearOutOfRangeError,
)


class TestDecode:
    """Test decoding of the embedded table."""

    def test_one_word_per_tabulated_year(self):
        """Test the table covers 1970 to 2099 BS."""
        words = month_table.decode()

        assert len(words) == 130
        assert month_table.year_count() == 130
        assert month_table.FIRST_TABULATED_YEAR == 1970
        assert month_table.LAST_TABULATED_YEAR == 2099

    def test_words_match_published_encoding(self):
        """Test decoded words against the published 24-bit values."""
        words = month_table.decode()

        assert words[0] == 0x511ABA  # 1970
        assert words[1] == 0x5117BA  # 1971
        assert words[2] == 0x9056EE  # 1972
        assert words[110] == 0x5056EE  # 2080
        assert words[-1] == 0x5116FA  # 2099
        assert all(0 <= word < 2**24 for word in words)

    def test_decode_is_idempotent(self):
        """Test later calls return the cached tuple."""
        first = month_table.decode()
        second = month_table.decode()

        assert first is second
        assert isinstance(first, tuple)

    def test_lazy_decode(self, uninitialized_tables):
        """Test nothing is decoded until first use."""
        assert month_table._decoded is None

        words = month_table.decode()

        assert month_table._decoded is words

    def test_malformed_blob_rejected(self):
        """Test a blob that does not split into whole words."""
        with pytest.raises(MonthTableError) as exc_info:
            month_table.decode_words(b"\xba\x1a")

        assert exc_info.value.code == "MONTH_TABLE_ERROR"

    def test_decode_words_little_endian(self):
        """Test byte order of packed words."""
        assert month_table.decode_words(bytes.fromhex("ba1a51ee5690")) == (
            0x511ABA,
            0x9056EE,
        )


class TestMonthLength:
    """Test month length lookups."""

    def test_first_month_of_first_year(self):
        """Test Baisakh 1970 has the tabulated 31 days."""
        assert month_table.month_length(1970, 1) == 31

    def test_known_years(self):
        """Test full years against the almanac."""
        assert month_table.month_lengths(1970) == (
            31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30,
        )
        assert month_table.month_lengths(1972) == (
            31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31,
        )
        assert month_table.month_lengths(2081) == (
            31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31,
        )
        assert month_table.month_lengths(2099) == (
            31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30,
        )

    def test_lengths_within_bounds(self):
        """Test every tabulated month has 29 to 32 days."""
        for year in range(1970, 2100):
            for length in month_table.month_lengths(year):
                assert 29 <= length <= 32

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_invalid_month(self, month):
        """Test months outside 1..12 are rejected."""
        with pytest.raises(InvalidMonthError) as exc_info:
            month_table.month_length(2000, month)

        assert exc_info.value.month == month

    @pytest.mark.parametrize("year", [1969, 2100, 0])
    def test_year_without_data(self, year):
        """Test years outside the table are rejected."""
        with pytest.raises(YearOutOfRangeError) as exc_info:
            month_table.month_length(year, 1)

        assert exc_info.value.year == year
        assert exc_info.value.first_year == 1970
        assert exc_info.value.last_year == 2099

    def test_month_checked_before_year(self):
        """Test an invalid month is reported even for an untabulated year."""
        with pytest.raises(InvalidMonthError):
            month_table.month_length(1969, 13)
