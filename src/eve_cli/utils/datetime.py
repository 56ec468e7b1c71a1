"""Date and time parsing for Eve task fields.

Users type dates loosely, so a fixed, ordered list of accepted shapes is
tried against the whole (trimmed) input. The first shape that matches the
entire string wins; a shape that only matches a prefix never counts.

Parsed values are naive local datetimes. Date-only input becomes midnight.
"""

import re
from dataclasses import dataclass
from datetime import datetime, time
from typing import Optional, Tuple


@dataclass(frozen=True)
class DateFormat:
    """An accepted input shape.

    ``pattern`` gates the exact shape of the text (digit counts and
    separators); ``strptime_format`` then validates the calendar values.
    """
    name: str
    pattern: "re.Pattern[str]"
    strptime_format: str

    def parse(self, text: str) -> Optional[datetime]:
        if not self.pattern.fullmatch(text):
            return None
        try:
            return datetime.strptime(text, self.strptime_format)
        except ValueError:
            return None


def _fmt(name: str, pattern: str, strptime_format: str) -> DateFormat:
    return DateFormat(name, re.compile(pattern), strptime_format)


_ISO_DATE = r"\d{4}-\d{2}-\d{2}"
_DMY_SLASH = r"\d{1,2}/\d{1,2}/\d{4}"
_DMY_DASH = r"\d{1,2}-\d{1,2}-\d{4}"
_SPACED = r"\d{1,2} \d{1,2} \d{4}"
_COMPACT_TIME = r"\d{4}"
_COLON_TIME = r"\d{2}:\d{2}"

# Order matters: the first full match wins.
DATETIME_FORMATS: Tuple[DateFormat, ...] = (
    _fmt("iso-datetime", _ISO_DATE + r"T\d{2}:\d{2}", "%Y-%m-%dT%H:%M"),
    _fmt("iso-datetime-seconds", _ISO_DATE + r"T\d{2}:\d{2}:\d{2}", "%Y-%m-%dT%H:%M:%S"),
    _fmt("iso-date compact-time", _ISO_DATE + " " + _COMPACT_TIME, "%Y-%m-%d %H%M"),
    _fmt("iso-date colon-time", _ISO_DATE + " " + _COLON_TIME, "%Y-%m-%d %H:%M"),
    _fmt("d/m/y compact-time", _DMY_SLASH + " " + _COMPACT_TIME, "%d/%m/%Y %H%M"),
    _fmt("d/m/y colon-time", _DMY_SLASH + " " + _COLON_TIME, "%d/%m/%Y %H:%M"),
    _fmt("d-m-y compact-time", _DMY_DASH + " " + _COMPACT_TIME, "%d-%m-%Y %H%M"),
    _fmt("d-m-y colon-time", _DMY_DASH + " " + _COLON_TIME, "%d-%m-%Y %H:%M"),
    _fmt("m d y compact-time", _SPACED + " " + _COMPACT_TIME, "%m %d %Y %H%M"),
    _fmt("m d y colon-time", _SPACED + " " + _COLON_TIME, "%m %d %Y %H:%M"),
    _fmt("d m y compact-time", _SPACED + " " + _COMPACT_TIME, "%d %m %Y %H%M"),
    _fmt("d m y colon-time", _SPACED + " " + _COLON_TIME, "%d %m %Y %H:%M"),
)

DATE_FORMATS: Tuple[DateFormat, ...] = (
    _fmt("iso-date", _ISO_DATE, "%Y-%m-%d"),
    _fmt("d/m/y", _DMY_SLASH, "%d/%m/%Y"),
    _fmt("d-m-y", _DMY_DASH, "%d-%m-%Y"),
    _fmt("d m y", _SPACED, "%d %m %Y"),
    _fmt("m d y", _SPACED, "%m %d %Y"),
)


class DateTimeParser:
    """Parses free-text dates and renders them for display and storage."""

    def __init__(self,
                 datetime_formats: Tuple[DateFormat, ...] = DATETIME_FORMATS,
                 date_formats: Tuple[DateFormat, ...] = DATE_FORMATS):
        self.datetime_formats = datetime_formats
        self.date_formats = date_formats

    def parse(self, text: Optional[str]) -> Optional[datetime]:
        """Parse a date or date-time string.

        Args:
            text: Raw user input, surrounding whitespace is ignored

        Returns:
            The parsed datetime (midnight for date-only input), or None if
            no accepted format matches the whole string
        """
        if text is None:
            return None

        candidate = text.strip()
        if not candidate:
            return None

        for fmt in self.datetime_formats:
            parsed = fmt.parse(candidate)
            if parsed is not None:
                return parsed

        for fmt in self.date_formats:
            parsed = fmt.parse(candidate)
            if parsed is not None:
                return datetime.combine(parsed.date(), time.min)

        return None

    @staticmethod
    def render(value: datetime) -> str:
        """Render a datetime for display.

        Midnight values are shown as a bare date, e.g. ``2019/12/2``;
        anything else as ``2019/12/2 18:00``.
        """
        date_part = f"{value.year}/{value.month}/{value.day}"
        if value.time() == time.min:
            return date_part
        return f"{date_part} {value:%H:%M}"

    @staticmethod
    def encode(value: datetime) -> str:
        """Render a datetime as an ISO 8601 storage token.

        Returns:
            ``YYYY-MM-DDTHH:MM``, with ``:SS`` appended only when the value
            carries seconds. The token always parses back to ``value``.
        """
        token = (f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
                 f"T{value.hour:02d}:{value.minute:02d}")
        if value.second:
            token += f":{value.second:02d}"
        return token


_default_parser = DateTimeParser()


def parse_datetime(text: Optional[str]) -> Optional[datetime]:
    """Parse text with the default format list."""
    return _default_parser.parse(text)


def render_datetime(value: datetime) -> str:
    """Display form of a parsed datetime."""
    return DateTimeParser.render(value)


def encode_datetime(value: datetime) -> str:
    """Storage token of a parsed datetime."""
    return DateTimeParser.encode(value)
