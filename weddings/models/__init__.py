"""Models for wedding details documents."""

from weddings.models.base import CamelModel, parse_entries
from weddings.models.details import (
    CORNERS,
    CornerOverride,
    CouplePhoto,
    DecorConfig,
    Media,
    PrimaryEvent,
    Rsvp,
    Theme,
    Venue,
    WeddingDetails,
    coerce_secret,
)
from weddings.models.entries import Contact, ScheduleEntry, Update

__all__ = [
    "CORNERS",
    "CamelModel",
    "Contact",
    "CornerOverride",
    "CouplePhoto",
    "DecorConfig",
    "Media",
    "PrimaryEvent",
    "Rsvp",
    "ScheduleEntry",
    "Theme",
    "Update",
    "Venue",
    "WeddingDetails",
    "coerce_secret",
    "parse_entries",
]
