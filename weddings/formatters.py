"""Pure formatting functions shared by the renderer and the calendar generator."""

import re
from datetime import datetime, timezone, tzinfo
from urllib.parse import quote, urljoin

# Characters encodeURIComponent leaves alone besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"

_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")


def localize(dt: datetime, tz: tzinfo) -> datetime:
    """Attach tz to naive datetimes and convert aware ones into it."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def format_utc_stamp(dt: datetime, tz: tzinfo = timezone.utc) -> str:
    """Format as a UTC iCalendar date-time, e.g. 20251212T123000Z.

    Args:
        dt: Datetime to format. Naive values are read in ``tz``.
        tz: Timezone assumed for naive values.

    Returns:
        ``YYYYMMDDTHHMMSSZ`` string.
    """
    return localize(dt, tz).astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def format_local(dt: datetime, tz: tzinfo) -> str:
    """Format for display, e.g. "Fri, Dec 12, 2025, 06:00 PM"."""
    return localize(dt, tz).strftime("%a, %b %d, %Y, %I:%M %p")


def format_time(dt: datetime, tz: tzinfo) -> str:
    """Format the time of day only, e.g. "08:30 PM"."""
    return localize(dt, tz).strftime("%I:%M %p")


def slugify_title(title: str) -> str:
    """Lowercase and collapse non-alphanumeric runs into single hyphens."""
    return _NON_ALNUM_RUN.sub("-", str(title).lower()).strip("-")


def encode_uri_component(value: object) -> str:
    """Percent-encode a query parameter value the way browsers encode URI components."""
    return quote(str(value), safe=_URI_COMPONENT_SAFE)


def join_nonempty(parts, sep: str = ", ") -> str:
    return sep.join(p for p in parts if p)


def webcal_url(calendar_url: str, page_url: str | None = None) -> str:
    """Subscription URL: the absolute calendar URL with https: swapped for webcal:."""
    absolute = urljoin(page_url, calendar_url) if page_url else calendar_url
    return re.sub(r"^https:", "webcal:", absolute)
