"""Configuration for the wedding invite site and calendar generator."""

import os
import re
from datetime import timedelta, timezone
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

_OFFSET_RE = re.compile(r"^([+-])(\d{2})(\d{2})$")


class WeddingsConfig(BaseModel):
    """Site configuration with Pydantic validation."""

    # Storage paths
    data_dir: Path = Field(default=Path("data/weddings/data"))
    calendar_dir: Path = Field(default=Path("data/weddings/calendars"))
    log_dir: Path = Field(default=Path("logs"))

    # File naming
    log_filename: str = Field(default="weddings.log")
    reserved_slugs: list[str] = Field(default_factory=lambda: ["template"])

    # Calendar output
    site_domain: str = Field(default="jiteshgosar.com")
    event_timezone: str = Field(default="Asia/Kolkata")
    event_utc_offset: str = Field(default="+0530")
    event_tz_name: str = Field(default="IST")

    # Web
    secret_key: str = Field(default="dev-only-change-me")
    details_base_url: str | None = None
    details_timeout: float = Field(default=10.0, gt=0)

    @field_validator("event_utc_offset")
    @classmethod
    def validate_offset(cls, v: str) -> str:
        """Offsets are written the iCalendar way, e.g. +0530."""
        if not _OFFSET_RE.match(v):
            raise ValueError(f"Invalid UTC offset: {v} (expected e.g. +0530)")
        return v

    @property
    def utc_offset(self) -> timedelta:
        """Event timezone offset as a timedelta."""
        sign, hours, minutes = _OFFSET_RE.match(self.event_utc_offset).groups()
        delta = timedelta(hours=int(hours), minutes=int(minutes))
        return -delta if sign == "-" else delta

    @property
    def tzinfo(self) -> timezone:
        """Fixed-offset tzinfo for the event timezone (no DST transitions)."""
        return timezone(self.utc_offset, self.event_tz_name)

    def details_path(self, slug: str) -> Path:
        return self.data_dir / f"{slug}.json"

    def calendar_path(self, slug: str) -> Path:
        return self.calendar_dir / f"{slug}.ics"

    def details_url(self, slug: str) -> str:
        """Where the details document for a slug is loaded from."""
        if self.details_base_url:
            return f"{self.details_base_url.rstrip('/')}/{slug}.json"
        return str(self.details_path(slug))

    @classmethod
    def from_env(cls) -> "WeddingsConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv()

        config_dict = {}

        # Storage paths
        if "WEDDINGS_DATA_DIR" in os.environ:
            config_dict["data_dir"] = Path(os.environ["WEDDINGS_DATA_DIR"])
        if "WEDDINGS_CALENDAR_DIR" in os.environ:
            config_dict["calendar_dir"] = Path(os.environ["WEDDINGS_CALENDAR_DIR"])
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])

        # File naming
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]
        if "RESERVED_SLUGS" in os.environ:
            config_dict["reserved_slugs"] = [
                s.strip() for s in os.environ["RESERVED_SLUGS"].split(",") if s.strip()
            ]

        # Calendar output
        if "SITE_DOMAIN" in os.environ:
            config_dict["site_domain"] = os.environ["SITE_DOMAIN"]
        if "EVENT_TIMEZONE" in os.environ:
            config_dict["event_timezone"] = os.environ["EVENT_TIMEZONE"]
        if "EVENT_UTC_OFFSET" in os.environ:
            config_dict["event_utc_offset"] = os.environ["EVENT_UTC_OFFSET"]
        if "EVENT_TZ_NAME" in os.environ:
            config_dict["event_tz_name"] = os.environ["EVENT_TZ_NAME"]

        # Web
        if "SECRET_KEY" in os.environ:
            config_dict["secret_key"] = os.environ["SECRET_KEY"]
        if "DETAILS_BASE_URL" in os.environ:
            config_dict["details_base_url"] = os.environ["DETAILS_BASE_URL"]
        if "DETAILS_TIMEOUT" in os.environ:
            try:
                config_dict["details_timeout"] = float(os.environ["DETAILS_TIMEOUT"])
            except ValueError:
                pass  # Keep default if invalid

        return cls(**config_dict)
