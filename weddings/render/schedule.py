"""Schedule cards with map and add-to-calendar links."""

from dataclasses import dataclass
from datetime import tzinfo

from weddings.formatters import (
    encode_uri_component,
    format_local,
    format_time,
    format_utc_stamp,
)
from weddings.models.details import Venue
from weddings.models.entries import ScheduleEntry

GOOGLE_CALENDAR_URL = "https://calendar.google.com/calendar/"
GOOGLE_CALENDAR_TEMPLATE = (
    GOOGLE_CALENDAR_URL
    + "render?action=TEMPLATE&text={text}&dates={dates}&details={details}&location={location}"
)


@dataclass(frozen=True)
class ScheduleCard:
    entry_id: str
    title: str
    time_text: str
    place: str
    notes: str | None
    map_url: str | None
    calendar_link: str


def google_calendar_link(entry: ScheduleEntry, tz: tzinfo) -> str:
    """Prefilled "create event" link for one schedule entry."""
    dates = f"{format_utc_stamp(entry.start, tz)}/{format_utc_stamp(entry.end, tz)}"
    return GOOGLE_CALENDAR_TEMPLATE.format(
        text=encode_uri_component(entry.title or "Event"),
        dates=dates,
        details=encode_uri_component(entry.notes or ""),
        location=encode_uri_component(entry.location),
    )


def render_schedule(
    entries: list[ScheduleEntry], venue: Venue, tz: tzinfo
) -> list[ScheduleCard]:
    """One card per entry, in document order."""
    cards = []
    for entry in entries:
        cards.append(
            ScheduleCard(
                entry_id=entry.entry_id,
                title=entry.title,
                time_text=f"{format_local(entry.start, tz)} to {format_time(entry.end, tz)}",
                place=entry.location,
                notes=entry.notes or None,
                map_url=entry.map_url or venue.map_url,
                calendar_link=google_calendar_link(entry, tz),
            )
        )
    return cards
