"""Details document model with Pydantic v2 validation."""

import logging
import math
from datetime import datetime
from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator

from weddings.exceptions import DetailsFormatError, RequiredFieldError
from weddings.models.base import CamelModel, fall_back_to_default, field_default, parse_entries
from weddings.models.entries import Contact, ScheduleEntry, Update

logger = logging.getLogger(__name__)

CORNERS = ("tl", "tr", "bl", "br")


def coerce_secret(value: Any) -> str | None:
    """Render a password value as text the way it was written in JSON."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class PrimaryEvent(CamelModel):
    title: str = ""
    start: datetime
    end: datetime | None = None


class Venue(CamelModel):
    name: str | None = None
    address: str | None = None
    map_url: str | None = None


class CornerOverride(CamelModel):
    image_url: str | None = None
    rotation: Any = None

    @field_validator("image_url", mode="wrap")
    @classmethod
    def lenient_values(cls, v, handler, info):
        return fall_back_to_default(cls, v, handler, info)

    @property
    def rotation_degrees(self) -> float:
        """Numeric rotation override; anything non-numeric counts as 0."""
        if isinstance(self.rotation, bool):
            return 0.0
        try:
            value = float(self.rotation)
        except (TypeError, ValueError):
            return 0.0
        return value if math.isfinite(value) else 0.0


class DecorConfig(CamelModel):
    """Four rotated corner ornaments."""

    enabled: bool = False
    mode: str = "corners"
    image_url: str | None = None
    opacity_dark: float = 0.16
    opacity_light: float = 0.28
    size: float = 360
    rotate: bool = True
    base_rotation: float = 0
    corners: dict[str, CornerOverride] = Field(default_factory=dict)

    @field_validator(
        "enabled", "opacity_dark", "opacity_light", "size", "rotate", "base_rotation", mode="wrap"
    )
    @classmethod
    def lenient_values(cls, v, handler, info):
        return fall_back_to_default(cls, v, handler, info)

    @field_validator("mode", mode="before")
    @classmethod
    def default_mode(cls, v):
        return v or "corners"

    @field_validator("corners", mode="before")
    @classmethod
    def known_corners(cls, v):
        """Drop keys other than tl/tr/bl/br."""
        if not isinstance(v, dict):
            return {}
        return {k: c for k, c in v.items() if k in CORNERS and isinstance(c, dict)}


class Theme(CamelModel):
    background: Literal["gradient", "image"] | None = None
    gradient: str | None = None
    image_url: str | None = None
    decor: DecorConfig | None = None

    # An unknown background or a broken decor block only loses itself
    @field_validator("background", "gradient", "image_url", "decor", mode="wrap")
    @classmethod
    def lenient_values(cls, v, handler, info):
        return fall_back_to_default(cls, v, handler, info)


class CouplePhoto(CamelModel):
    enabled: bool = False
    src: str | None = None
    alt: str = ""
    shape: str = "circle"
    size: float = 112


class Media(CamelModel):
    couple_photo: CouplePhoto | None = None


class Rsvp(CamelModel):
    enabled: bool = False
    title: str | None = None
    deadline: datetime | None = None
    mode: str = "button"
    show_button: bool = True
    form_url: str | None = None
    embed_url: str | None = None
    button_text: str | None = None
    open_in_new_tab_text: str | None = None

    @field_validator("deadline", "show_button", mode="wrap")
    @classmethod
    def lenient_values(cls, v, handler, info):
        return fall_back_to_default(cls, v, handler, info)

    @field_validator("mode", mode="before")
    @classmethod
    def normalize_mode(cls, v):
        return str(v or "button").lower()


class WeddingDetails(CamelModel):
    """One couple's invite configuration.

    ``coupleNames``, ``lastUpdated`` and ``primaryEvent.start`` are required;
    everything else degrades by omission. Optional sections that fail
    validation are dropped with a warning, and invalid list entries are
    skipped one by one.
    """

    couple_names: str
    tagline: str | None = None
    city_line: str | None = None
    last_updated: datetime
    password: str | None = None
    password_hint: str | None = None

    primary_event: PrimaryEvent
    primary_venue: Venue = Field(default_factory=Venue)

    schedule: list[ScheduleEntry] = Field(default_factory=list)
    updates: list[Update] = Field(default_factory=list)
    contacts: list[Contact] = Field(default_factory=list)

    theme: Theme | None = None
    decor: DecorConfig | None = None
    media: Media | None = None
    rsvp: Rsvp | None = None

    @field_validator("couple_names")
    @classmethod
    def names_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("coupleNames must not be empty")
        return v

    @field_validator("password", mode="before")
    @classmethod
    def coerce_password(cls, v):
        return coerce_secret(v)

    @field_validator("schedule", mode="before")
    @classmethod
    def lenient_schedule(cls, v):
        return parse_entries(v, ScheduleEntry, "schedule entry")

    @field_validator("updates", mode="before")
    @classmethod
    def lenient_updates(cls, v):
        return parse_entries(v, Update, "update")

    @field_validator("contacts", mode="before")
    @classmethod
    def lenient_contacts(cls, v):
        return parse_entries(v, Contact, "contact")

    @field_validator("primary_venue", mode="before")
    @classmethod
    def default_venue(cls, v):
        return v if isinstance(v, dict) else {}

    @field_validator("primary_venue", "theme", "decor", "media", "rsvp", mode="wrap")
    @classmethod
    def lenient_section(cls, v, handler, info):
        """Drop a malformed optional section instead of failing the document."""
        try:
            return handler(v)
        except ValidationError:
            logger.warning(f"Ignoring malformed '{info.field_name}' section")
            return field_default(cls, info.field_name)

    @property
    def effective_decor(self) -> DecorConfig | None:
        """Decor settings: ``theme.decor`` wins over top-level ``decor``."""
        if self.theme is not None and self.theme.decor is not None:
            return self.theme.decor
        return self.decor

    @classmethod
    def from_document(cls, data: Any, slug: str | None = None) -> "WeddingDetails":
        """Validate a parsed JSON document.

        Raises:
            DetailsFormatError: If the document is not a JSON object
            RequiredFieldError: If a required field is missing or invalid
        """
        if not isinstance(data, dict):
            raise DetailsFormatError(
                f"Details document must be a JSON object, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            raise RequiredFieldError(fields, slug) from e
