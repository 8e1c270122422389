"""Locale-aware rendering of Gregorian dates in the Bikram Sambat calendar.

Dates are converted to Bikram Sambat through their Julian Day Number and
rendered with Nepali (Devanagari) names and digits for ``ne`` locales, and
with transliterated names for every other locale.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, List, Literal, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, model_validator

from bikram_sambat.config import get_settings
from bikram_sambat.utils.exceptions import InvalidLocaleError
from bikram_sambat.utils.logging import get_logger

from .gregorian import date_to_julian_day
from .nepali import NepaliCalendar
from .types import CalendarConfig, CalendarDate, CalendarSystem

logger = get_logger(__name__)

DateInput = Union[date, datetime, int, float, None]

DEVANAGARI_DIGITS = "०१२३४५६७८९"
_TO_DEVANAGARI = str.maketrans("0123456789", DEVANAGARI_DIGITS)

_LOCALE_PATTERN = re.compile(
    r"^(?P<language>[A-Za-z]{2,3})"
    r"(?:-(?P<script>[A-Za-z]{4}))?"
    r"(?:-(?P<region>[A-Za-z]{2}|[0-9]{3}))?$"
)

NEPALI_CALENDAR_CONFIG = CalendarConfig(
    system=CalendarSystem.NEPALI,
    month_names={
        "en": {
            "long": [
                "Baisakh",
                "Jestha",
                "Asadh",
                "Shrawan",
                "Bhadra",
                "Ashwin",
                "Kartik",
                "Mangsir",
                "Poush",
                "Magh",
                "Falgun",
                "Chaitra",
            ],
            "short": [
                "Bai",
                "Jes",
                "Asa",
                "Shr",
                "Bha",
                "Ash",
                "Kar",
                "Man",
                "Pou",
                "Mag",
                "Fal",
                "Cha",
            ],
            "narrow": ["B", "J", "A", "S", "B", "A", "K", "M", "P", "M", "F", "C"],
        },
        "ne": {
            "long": [
                "बैशाख",
                "जेठ",
                "असार",
                "श्रावण",
                "भाद्र",
                "आश्विन",
                "कार्तिक",
                "मंसिर",
                "पौष",
                "माघ",
                "फाल्गुन",
                "चैत्र",
            ],
            "short": [
                "बैशाख",
                "जेठ",
                "असार",
                "श्रावण",
                "भाद्र",
                "आश्विन",
                "कार्तिक",
                "मंसिर",
                "पौष",
                "माघ",
                "फाल्गुन",
                "चैत्र",
            ],
            "narrow": [
                "बै",
                "जे",
                "अ",
                "श्रा",
                "भा",
                "आ",
                "का",
                "मं",
                "पौ",
                "मा",
                "फा",
                "चै",
            ],
        },
    },
    day_names={
        "en": {
            "long": [
                "Sunday",
                "Monday",
                "Tuesday",
                "Wednesday",
                "Thursday",
                "Friday",
                "Saturday",
            ],
            "short": ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"],
            "narrow": ["S", "M", "T", "W", "T", "F", "S"],
        },
        "ne": {
            "long": [
                "आइतबार",
                "सोमबार",
                "मंगलबार",
                "बुधबार",
                "बिहिबार",
                "शुक्रबार",
                "शनिबार",
            ],
            "short": ["आइत", "सोम", "मंगल", "बुध", "बिहि", "शुक्र", "शनि"],
            "narrow": ["आ", "सो", "मं", "बु", "बि", "शु", "श"],
        },
    },
    era_names={
        "en": {"long": "Bikram Sambat", "short": "BS", "narrow": "BS"},
        "ne": {"long": "बिक्रम सम्बत", "short": "बि.सं.", "narrow": "बि.सं."},
    },
)

# Field widths implied by each date style
STYLE_FIELDS: Dict[str, Dict[str, str]] = {
    "full": {"weekday": "long", "month": "long", "day": "numeric", "year": "numeric"},
    "long": {"month": "long", "day": "numeric", "year": "numeric"},
    "medium": {"month": "short", "day": "numeric", "year": "numeric"},
    "short": {"month": "numeric", "day": "numeric", "year": "numeric"},
}

FIELD_ORDER = {
    "ne": ("year", "month", "day", "era", "weekday"),
    "en": ("weekday", "month", "day", "year", "era"),
}

NUMERIC_WIDTHS = ("numeric", "2-digit")


class DateTimeFormatOptions(BaseModel):
    """Formatting options, named after their ``Intl.DateTimeFormat`` peers."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    date_style: Optional[Literal["full", "long", "medium", "short"]] = None
    year: Optional[Literal["numeric", "2-digit"]] = None
    month: Optional[Literal["numeric", "2-digit", "narrow", "short", "long"]] = None
    day: Optional[Literal["numeric", "2-digit"]] = None
    weekday: Optional[Literal["narrow", "short", "long"]] = None
    era: Optional[Literal["narrow", "short", "long"]] = None
    numbering_system: Optional[str] = None

    @model_validator(mode="after")
    def check_date_style_conflicts(self) -> "DateTimeFormatOptions":
        """Reject date_style combined with explicit date fields."""
        if self.date_style and any((self.year, self.month, self.day, self.weekday)):
            raise ValueError(
                "date_style cannot be combined with year, month, day or weekday"
            )
        return self


@dataclass(frozen=True)
class DateTimeFormatPart:
    """One typed piece of a formatted date."""

    type: str
    value: str
    source: Optional[str] = None


def canonicalize_locale(locale: str) -> str:
    """Normalize a ``language[-Script][-REGION]`` tag, e.g. ``ne_np`` to ``ne-NP``."""
    match = _LOCALE_PATTERN.match(locale.replace("_", "-")) if locale else None
    if not match:
        raise InvalidLocaleError(locale)

    parts = [match.group("language").lower()]
    if match.group("script"):
        parts.append(match.group("script").title())
    if match.group("region"):
        parts.append(match.group("region").upper())
    return "-".join(parts)


class NepaliDateTimeFormat:
    """Formats Gregorian dates as Bikram Sambat dates for a locale."""

    def __init__(
        self,
        locale: Optional[str] = None,
        options: Optional[Union[DateTimeFormatOptions, Dict[str, Any]]] = None,
        **option_kwargs: Any,
    ) -> None:
        """Initialize the formatter.

        Args:
            locale: BCP 47 locale tag; defaults to ``settings.default_locale``
            options: Options model or mapping of option values
            **option_kwargs: Individual options, overriding ``options``
        """
        settings = get_settings()
        self.locale = canonicalize_locale(locale or settings.default_locale)
        self.language = self.locale.split("-")[0]
        self.range_separator = settings.range_separator

        if isinstance(options, DateTimeFormatOptions):
            options = options.model_dump(exclude_none=True)
        self.options = DateTimeFormatOptions(**{**(options or {}), **option_kwargs})

        self.calendar = NepaliCalendar()

    @property
    def _is_nepali_locale(self) -> bool:
        return self.language == "ne"

    @property
    def _use_devanagari_digits(self) -> bool:
        return self._is_nepali_locale or self.options.numbering_system == "deva"

    @property
    def _names_language(self) -> str:
        return "ne" if self._is_nepali_locale else "en"

    def format(self, value: DateInput = None) -> str:
        """Format a date according to the locale and options."""
        return "".join(part.value for part in self.format_to_parts(value))

    def format_to_parts(self, value: DateInput = None) -> List[DateTimeFormatPart]:
        """Format a date to typed parts according to the locale and options."""
        gregorian = self._to_gregorian(value)
        return self._build_parts(gregorian)

    def format_range(self, start: DateInput, end: DateInput) -> str:
        """Format a date range according to the locale and options."""
        return "".join(part.value for part in self.format_range_to_parts(start, end))

    def format_range_to_parts(
        self, start: DateInput, end: DateInput
    ) -> List[DateTimeFormatPart]:
        """Format a date range to parts tagged with the range end they come from.

        When both ends fall on the same Bikram Sambat date the single date is
        rendered and every part is tagged ``shared``.
        """
        start_date = self._to_gregorian(start)
        end_date = self._to_gregorian(end)

        if start_date == end_date:
            return self._build_parts(start_date, source="shared")

        return [
            *self._build_parts(start_date, source="startRange"),
            DateTimeFormatPart("literal", self.range_separator, "shared"),
            *self._build_parts(end_date, source="endRange"),
        ]

    def resolved_options(self) -> Dict[str, Any]:
        """Get the resolved options used for formatting."""
        resolved: Dict[str, Any] = {
            "locale": self.locale,
            "calendar": CalendarSystem.NEPALI.value,
            "numbering_system": "deva" if self._use_devanagari_digits else "latn",
        }
        resolved.update(
            self.options.model_dump(exclude_none=True, exclude={"numbering_system"})
        )
        return resolved

    @staticmethod
    def supported_locales_of(locales: Union[str, Sequence[str]]) -> List[str]:
        """Return the requested locales that have native Bikram Sambat names.

        Raises:
            InvalidLocaleError: If any tag is not well formed
        """
        if isinstance(locales, str):
            locales = [locales]

        supported: List[str] = []
        for locale in locales:
            canonical = canonicalize_locale(locale)
            language = canonical.split("-")[0]
            if (
                language in NEPALI_CALENDAR_CONFIG.month_names
                and canonical not in supported
            ):
                supported.append(canonical)
        return supported

    @staticmethod
    def _to_gregorian(value: DateInput) -> date:
        if value is None:
            return date.today()
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            # Epoch milliseconds, read in local time
            return datetime.fromtimestamp(value / 1000).date()
        raise TypeError(f"Cannot format value of type {type(value).__name__}")

    def _resolve_fields(self) -> Dict[str, str]:
        options = self.options
        if options.date_style:
            fields = dict(STYLE_FIELDS[options.date_style])
        else:
            fields = {
                name: width
                for name, width in (
                    ("weekday", options.weekday),
                    ("year", options.year),
                    ("month", options.month),
                    ("day", options.day),
                )
                if width
            }
            if not fields:
                fields = {"year": "numeric", "month": "numeric", "day": "numeric"}

        if options.era:
            fields["era"] = options.era
        return fields

    def _build_parts(
        self, gregorian: date, source: Optional[str] = None
    ) -> List[DateTimeFormatPart]:
        nepali_date = self.calendar.ad_to_bs(gregorian)
        # Days of the week align between calendars; 0 is Sunday
        weekday_index = (date_to_julian_day(gregorian) + 1) % 7
        logger.debug(
            "nepali_date_resolved",
            gregorian=gregorian.isoformat(),
            nepali=str(nepali_date),
            locale=self.locale,
        )

        fields = self._resolve_fields()
        textual_month = fields.get("month") not in NUMERIC_WIDTHS

        parts: List[DateTimeFormatPart] = []
        previous: Optional[str] = None
        for field_type in FIELD_ORDER[self._names_language]:
            width = fields.get(field_type)
            if width is None:
                continue
            if previous is not None:
                separator = self._separator(previous, field_type, textual_month)
                parts.append(DateTimeFormatPart("literal", separator, source))
            value = self._field_value(field_type, width, nepali_date, weekday_index)
            parts.append(DateTimeFormatPart(field_type, value, source))
            previous = field_type
        return parts

    def _separator(self, previous: str, current: str, textual_month: bool) -> str:
        date_separator = " " if textual_month else "/"
        if self._is_nepali_locale:
            if current == "weekday":
                return ", "
            if previous in ("year", "month") and current in ("month", "day"):
                return date_separator
            return " "

        if previous == "weekday":
            return ", "
        if previous == "day" and current == "year":
            return ", " if textual_month else "/"
        if previous in ("month", "day") and current in ("day", "year"):
            return date_separator
        return " "

    def _field_value(
        self, field_type: str, width: str, nepali_date: CalendarDate, weekday: int
    ) -> str:
        names_language = self._names_language
        if field_type == "year":
            year = nepali_date.year % 100 if width == "2-digit" else nepali_date.year
            return self._format_number(year, pad=width == "2-digit")
        if field_type == "month":
            if width in NUMERIC_WIDTHS:
                return self._format_number(nepali_date.month, pad=width == "2-digit")
            month_names = NEPALI_CALENDAR_CONFIG.month_names[names_language]
            return month_names[width][nepali_date.month - 1]
        if field_type == "day":
            return self._format_number(nepali_date.day, pad=width == "2-digit")
        if field_type == "weekday":
            return NEPALI_CALENDAR_CONFIG.day_names[names_language][width][weekday]
        return NEPALI_CALENDAR_CONFIG.era_names[names_language][width]

    def _format_number(self, value: int, pad: bool = False) -> str:
        text = f"{value:02d}" if pad else str(value)
        if self._use_devanagari_digits:
            return text.translate(_TO_DEVANAGARI)
        return text
