"""Calendar date parsing and formatting."""

from datetime import date, datetime

DISPLAY_FORMAT = "%a %b %d %Y"

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def format_calendar_date(value: date) -> str:
    """Return the display form of a date, e.g. ``Mon Jan 01 2024``.

    Names are always English regardless of the process locale.
    """
    weekday = _WEEKDAYS[value.weekday()]
    month = _MONTHS[value.month - 1]
    return f"{weekday} {month} {value.day:02d} {value.year:04d}"


def parse_calendar_date(raw: str) -> date | None:
    """Parse a calendar date, returning None when the value is not a date.

    Accepts ``YYYY-MM-DD``, ISO date-times (time and offset are dropped) and
    the display form produced by :func:`format_calendar_date`.
    """
    cleaned = raw.strip()
    if not cleaned:
        return None
    try:
        return date.fromisoformat(cleaned)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(cleaned.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    return _parse_display_form(cleaned)


def _parse_display_form(cleaned: str) -> date | None:
    parts = cleaned.split()
    if len(parts) != 4:  # noqa: PLR2004
        return None
    weekday, month, day, year = parts
    if weekday.title() not in _WEEKDAYS or month.title() not in _MONTHS:
        return None
    if not (day.isdigit() and year.isdigit()):
        return None
    try:
        return date(int(year), _MONTHS.index(month.title()) + 1, int(day))
    except ValueError:
        return None
