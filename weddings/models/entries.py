"""List entry models: schedule items, updates and contacts."""

from datetime import datetime

from pydantic import field_validator

from weddings.formatters import join_nonempty, slugify_title
from weddings.models.base import CamelModel, stringify_number


class ScheduleEntry(CamelModel):
    """One timed item of the wedding schedule."""

    id: str | None = None
    title: str
    start: datetime
    end: datetime
    location_name: str | None = None
    address: str | None = None
    notes: str | None = None
    map_url: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        """Numeric ids are used as-is in UIDs."""
        if v is None or v == "":
            return None
        return stringify_number(v)

    @field_validator("title", mode="before")
    @classmethod
    def coerce_title(cls, v):
        """A numeric title such as 2026 is kept as text."""
        return stringify_number(v)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title must not be empty")
        return v

    @property
    def entry_id(self) -> str:
        """Stable identifier: explicit id, else the slugified title."""
        return self.id if self.id else slugify_title(self.title)

    @property
    def location(self) -> str:
        return join_nonempty([self.location_name, self.address])


class Update(CamelModel):
    """Dated news item shown on the invite."""

    when: str
    text: str

    @field_validator("when", "text", mode="before")
    @classmethod
    def numbers_as_text(cls, v):
        return stringify_number(v)


class Contact(CamelModel):
    """Person guests can reach out to."""

    name: str
    role: str | None = None
    phone: str | None = None

    @field_validator("name", "role", "phone", mode="before")
    @classmethod
    def numbers_as_text(cls, v):
        """Phone numbers are often written as JSON numbers."""
        return stringify_number(v)
