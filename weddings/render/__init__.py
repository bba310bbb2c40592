"""Invite renderer: turns a details document into page regions.

Each sub-renderer owns its own regions and tolerates missing optional
data. Required fields are enforced when the document is validated, so a
broken document fails before any region is produced.
"""

from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from typing import Any

from weddings.formatters import format_local, localize, webcal_url
from weddings.models.details import WeddingDetails
from weddings.render.countdown import format_countdown, utc_now
from weddings.render.decor import DecorState, render_decor
from weddings.render.lists import ContactView, UpdateView, render_contacts, render_updates
from weddings.render.photo import CouplePhotoView, render_couple_photo
from weddings.render.rsvp import RsvpWidget
from weddings.render.schedule import ScheduleCard, render_schedule
from weddings.render.theme import ThemeStyle, render_theme


@dataclass(frozen=True)
class CountdownView:
    text: str
    target: datetime
    label: str

    @property
    def target_iso(self) -> str:
        return self.target.isoformat()


@dataclass
class InvitePage:
    """Everything the invite template displays."""

    slug: str | None
    couple_names: str
    tagline: str
    city_line: str | None
    wedding_date: str
    last_updated: str
    map_url: str | None
    calendar_url: str
    subscribe_url: str
    countdown: CountdownView
    theme: ThemeStyle
    decor: DecorState
    couple_photo: CouplePhotoView | None
    rsvp: RsvpWidget
    schedule: list[ScheduleCard] = field(default_factory=list)
    updates: list[UpdateView] = field(default_factory=list)
    contacts: list[ContactView] = field(default_factory=list)


def render_invite(
    details: WeddingDetails | dict[str, Any],
    calendar_url: str,
    *,
    tz: tzinfo,
    page_url: str | None = None,
    now: datetime | None = None,
    dark: bool = False,
    slug: str | None = None,
) -> InvitePage:
    """Render a details document into an InvitePage.

    Args:
        details: Validated details, or a raw document to validate first
        calendar_url: URL of the calendar file (may be relative to page_url)
        tz: Event timezone, also used for date-times without an offset
        page_url: Absolute URL of the page, used to resolve calendar_url
        now: Current time for the countdown (defaults to the clock)
        dark: Whether the page is currently in dark mode
        slug: Event slug, for error messages

    Raises:
        RequiredFieldError: If a raw document lacks a required field
    """
    if not isinstance(details, WeddingDetails):
        details = WeddingDetails.from_document(details, slug=slug)

    primary = details.primary_event
    target = localize(primary.start, tz)
    countdown = CountdownView(
        text=format_countdown(target, now or utc_now(), primary.title),
        target=target,
        label=primary.title,
    )

    return InvitePage(
        slug=slug,
        couple_names=details.couple_names,
        tagline=details.tagline or "",
        city_line=details.city_line or None,
        wedding_date=format_local(primary.start, tz),
        last_updated=format_local(details.last_updated, tz),
        map_url=details.primary_venue.map_url,
        calendar_url=calendar_url,
        subscribe_url=webcal_url(calendar_url, page_url),
        countdown=countdown,
        theme=render_theme(details.theme),
        decor=render_decor(details.effective_decor, dark),
        couple_photo=render_couple_photo(details.media),
        rsvp=RsvpWidget(details.rsvp, tz),
        schedule=render_schedule(details.schedule, details.primary_venue, tz),
        updates=render_updates(details.updates, tz),
        contacts=render_contacts(details.contacts),
    )


__all__ = [
    "CountdownView",
    "InvitePage",
    "render_invite",
]
