"""
Locale-aware date rendering that survives hydration.

Server-rendered markup must match what the browser produces on its first
render, but locale and timezone are only known in the browser. So the
server emits a placeholder inside a ``<time>`` element and the client
script (static/formatted-date.js) swaps in the locale-formatted text once
the page has hydrated.

``FormattedDate.render(hydrated=True)`` produces the same text server-side
via Babel, in the locale the date was created with (the configured
``DEFAULT_LOCALE`` for template dates) unless the caller passes one.
"""

from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Optional, Union

from babel import dates as babel_dates
from markupsafe import Markup, escape

DateInput = Union[datetime, date, str, int, float]

DEFAULT_FALLBACK = "..."


class DateFormat(str, Enum):
    """Which parts of the timestamp to show."""

    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"


def to_datetime(value: DateInput) -> datetime:
    """
    Coerce supported inputs to a datetime.

    Numbers are epoch milliseconds (UTC). Strings are ISO-8601; a trailing
    "Z" is accepted.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, bool):
        raise TypeError("Booleans are not dates")
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return datetime.fromisoformat(text)
    raise TypeError(f"Unsupported date value: {value!r}")


def format_date(
    value: DateInput,
    fmt: DateFormat | str = DateFormat.DATE,
    locale: str = "en_US",
    tzinfo=None,
) -> str:
    """
    Format a date for display in the given locale (CLDR "medium" style).

    Args:
        value: Date value (see to_datetime)
        fmt: date, time or datetime
        locale: Babel locale identifier, e.g. "en_US" or "de_DE"
        tzinfo: Optional timezone to convert aware/UTC values into
    """
    fmt = DateFormat(fmt)
    dt = to_datetime(value)

    if fmt is DateFormat.TIME:
        return babel_dates.format_time(dt, format="medium", tzinfo=tzinfo, locale=locale)
    if fmt is DateFormat.DATETIME:
        return babel_dates.format_datetime(dt, format="medium", tzinfo=tzinfo, locale=locale)

    calendar_day = isinstance(value, date) and not isinstance(value, datetime)
    if tzinfo is not None and not calendar_day:
        # Babel reads naive values as UTC in the time modes; match it here
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        dt = dt.astimezone(tzinfo)
    return babel_dates.format_date(dt.date(), format="medium", locale=locale)


def format_relative(
    value: DateInput,
    fmt: DateFormat | str = DateFormat.DATE,
    now: Optional[datetime] = None,
) -> str:
    """
    Short relative description, e.g. "5m ago" or "yesterday".

    Time and datetime formats count minutes and hours; the date format
    starts at whole days ("today", "yesterday").
    """
    fmt = DateFormat(fmt)
    dt = to_datetime(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    seconds = abs((now - dt).total_seconds())
    minutes = int(seconds // 60)
    hours = int(seconds // 3600)
    days = int(seconds // 86400)

    if fmt in (DateFormat.TIME, DateFormat.DATETIME):
        if minutes < 1:
            return "just now"
        if minutes < 60:
            return f"{minutes}m ago"
        if hours < 24:
            return f"{hours}h ago"
    else:
        if days == 0:
            return "today"
        if days == 1:
            return "yesterday"

    if days < 7:
        return f"{days}d ago"
    if days < 30:
        return f"{days // 7}w ago"
    if days < 365:
        return f"{days // 30}mo ago"
    return f"{days // 365}y ago"


class FormattedDate:
    """
    A date that renders a fallback until the client has hydrated.

    Usage in templates (via the ``formatted_date`` filter):
        {{ submission.created_at | formatted_date("datetime") }}
    """

    def __init__(
        self,
        value: DateInput,
        format: DateFormat | str = DateFormat.DATE,
        fallback: str = DEFAULT_FALLBACK,
        locale: str = "en_US",
    ):
        self.value = to_datetime(value)
        self.format = DateFormat(format)
        self.fallback = fallback
        self.locale = locale

    def render(self, hydrated: bool, locale: Optional[str] = None, tzinfo=None) -> str:
        """Text for the current render pass: the fallback before hydration."""
        if not hydrated:
            return self.fallback
        return format_date(self.value, self.format, locale=locale or self.locale, tzinfo=tzinfo)

    def __html__(self) -> Markup:
        """Server-side markup; the client script fills in the formatted text."""
        return Markup(
            '<time class="formatted-date" datetime="{iso}" data-format="{fmt}">{fallback}</time>'
        ).format(
            iso=self.value.isoformat(),
            fmt=self.format.value,
            fallback=escape(self.fallback),
        )

    def __str__(self) -> str:
        return str(self.__html__())
