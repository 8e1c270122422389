"""Calendar system types and data classes."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class CalendarSystem(str, Enum):
    """Calendar identifiers used for capability dispatch."""

    GREGORIAN = "gregorian"
    NEPALI = "nepali"  # Bikram Sambat


@dataclass(frozen=True, order=True)
class CalendarDate:
    """Represents a date in a specific calendar system.

    Ordering compares ``(calendar_system, year, month, day)`` so dates of one
    calendar sort chronologically.
    """

    calendar_system: CalendarSystem
    year: int
    month: int
    day: int
    era: Optional[str] = field(default=None, compare=False)

    def __str__(self) -> str:
        """Return string representation of the date."""
        return f"{self.year:04d}/{self.month:02d}/{self.day:02d}"


@dataclass(frozen=True)
class CalendarConfig:
    """Localized names for a calendar system.

    Every name table maps a language code to its names, with ``"en"`` as the
    transliterated fallback.
    """

    system: CalendarSystem
    month_names: Dict[str, Dict[str, List[str]]]  # Language -> width -> names
    day_names: Dict[str, Dict[str, List[str]]]  # Language -> width -> names
    era_names: Dict[str, Dict[str, str]]  # Language -> width -> era name
