"""Build iCalendar documents from wedding details."""

import logging
from datetime import datetime, timezone
from typing import Any

from icalendar import Calendar, Event, Timezone, TimezoneStandard

from weddings.config import WeddingsConfig
from weddings.formatters import join_nonempty, localize
from weddings.models.base import parse_entries
from weddings.models.entries import ScheduleEntry

logger = logging.getLogger(__name__)

CEREMONY_ID = "ceremony"
DEFAULT_CEREMONY_TITLE = "Wedding Ceremony"

# Any date before the first event works for a zone without transitions
TIMEZONE_EPOCH = datetime(1970, 1, 1)


def _mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def build_schedule(document: dict[str, Any]) -> list[Any]:
    """Schedule items for the calendar, ceremony included.

    Returns a new list; the document is never modified. When the primary
    event has a start and an end and no item is already identified as the
    ceremony, one is synthesized from the primary event and venue and
    appended after the explicit items.
    """
    raw = document.get("schedule")
    schedule = list(raw) if isinstance(raw, list) else []

    primary = _mapping(document.get("primaryEvent"))
    if not (primary.get("start") and primary.get("end")):
        return schedule

    has_ceremony = any(
        str(_mapping(item).get("id") or "").lower() == CEREMONY_ID for item in schedule
    )
    if has_ceremony:
        return schedule

    venue = _mapping(document.get("primaryVenue"))
    schedule.append(
        {
            "id": CEREMONY_ID,
            "title": primary.get("title") or DEFAULT_CEREMONY_TITLE,
            "start": primary["start"],
            "end": primary["end"],
            "locationName": venue.get("name"),
            "address": venue.get("address"),
            "mapUrl": venue.get("mapUrl"),
            "notes": "",
        }
    )
    return schedule


def event_uid(slug: str, entry: ScheduleEntry, domain: str) -> str:
    """UID that stays the same across regenerations of the same entry."""
    return f"{slug}-{entry.entry_id}@{domain}"


def event_description(entry: ScheduleEntry) -> str:
    parts = []
    if entry.notes:
        parts.append(entry.notes)
    if entry.map_url:
        parts.append(f"Map: {entry.map_url}")
    return "\n".join(parts)


def _timezone_component(config: WeddingsConfig) -> Timezone:
    tz = Timezone()
    tz.add("tzid", config.event_timezone)

    standard = TimezoneStandard()
    standard.add("tzoffsetfrom", config.utc_offset)
    standard.add("tzoffsetto", config.utc_offset)
    standard.add("tzname", config.event_tz_name)
    standard.add("dtstart", TIMEZONE_EPOCH)
    tz.add_component(standard)
    return tz


def build_calendar(
    document: dict[str, Any],
    slug: str,
    config: WeddingsConfig | None = None,
    now: datetime | None = None,
) -> Calendar:
    """
    Convert a details document into an iCalendar object.

    Args:
        document: Parsed details JSON
        slug: Event slug, used in UIDs and as the fallback calendar name
        config: Domain and timezone settings (defaults from environment)
        now: Timestamp for DTSTAMP (defaults to the current UTC time)

    Returns:
        An icalendar.Calendar with one VTIMEZONE and one VEVENT per valid
        schedule item
    """
    if config is None:
        config = WeddingsConfig.from_env()
    tzid = config.event_timezone
    tzinfo = config.tzinfo
    dtstamp = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)

    couple_names = document.get("coupleNames")
    calendar_name = f"{couple_names or slug} Wedding"

    cal = Calendar()
    cal.add("prodid", f"-//{config.site_domain}//Wedding Invite//EN")
    cal.add("version", "2.0")
    cal.add("calscale", "GREGORIAN")
    cal.add("method", "PUBLISH")
    cal.add("x-wr-calname", calendar_name)
    cal.add("x-wr-timezone", tzid)
    cal.add_component(_timezone_component(config))

    entries = parse_entries(build_schedule(document), ScheduleEntry, "schedule entry")
    for entry in entries:
        event = Event()

        # Required fields
        event.add("uid", event_uid(slug, entry, config.site_domain))
        event.add("dtstamp", dtstamp)
        event.add(
            "dtstart",
            localize(entry.start, tzinfo).replace(tzinfo=None),
            parameters={"TZID": tzid},
        )
        event.add(
            "dtend",
            localize(entry.end, tzinfo).replace(tzinfo=None),
            parameters={"TZID": tzid},
        )
        event.add("summary", entry.title)

        location = join_nonempty([entry.location_name, entry.address])
        if location:
            event.add("location", location)

        description = event_description(entry)
        if description:
            event.add("description", description)

        cal.add_component(event)

    logger.debug(f"Built calendar for '{slug}' with {len(entries)} event(s)")
    return cal


def generate_calendar(
    document: dict[str, Any],
    slug: str,
    config: WeddingsConfig | None = None,
    now: datetime | None = None,
) -> str:
    """Calendar text for one details document (CRLF line endings)."""
    return build_calendar(document, slug, config=config, now=now).to_ical().decode("utf-8")
