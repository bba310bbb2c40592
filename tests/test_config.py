"""Tests for configuration."""

from datetime import timedelta
from pathlib import Path

import pytest
from pydantic import ValidationError

from weddings.config import WeddingsConfig


def test_weddings_config_defaults():
    """Test WeddingsConfig default values."""
    config = WeddingsConfig()
    assert config.data_dir == Path("data/weddings/data")
    assert config.calendar_dir == Path("data/weddings/calendars")
    assert config.site_domain == "jiteshgosar.com"
    assert config.event_timezone == "Asia/Kolkata"
    assert config.reserved_slugs == ["template"]
    assert config.details_base_url is None


def test_weddings_config_from_env_all_vars(monkeypatch):
    """Test loading config values from environment."""
    monkeypatch.setenv("WEDDINGS_DATA_DIR", "/srv/weddings/data")
    monkeypatch.setenv("WEDDINGS_CALENDAR_DIR", "/srv/weddings/calendars")
    monkeypatch.setenv("SITE_DOMAIN", "example.com")
    monkeypatch.setenv("EVENT_TIMEZONE", "America/New_York")
    monkeypatch.setenv("EVENT_UTC_OFFSET", "-0500")
    monkeypatch.setenv("EVENT_TZ_NAME", "EST")
    monkeypatch.setenv("RESERVED_SLUGS", "template, draft")
    monkeypatch.setenv("DETAILS_TIMEOUT", "2.5")

    config = WeddingsConfig.from_env()
    assert config.data_dir == Path("/srv/weddings/data")
    assert config.calendar_dir == Path("/srv/weddings/calendars")
    assert config.site_domain == "example.com"
    assert config.event_timezone == "America/New_York"
    assert config.utc_offset == timedelta(hours=-5)
    assert config.reserved_slugs == ["template", "draft"]
    assert config.details_timeout == 2.5


def test_weddings_config_invalid_timeout_keeps_default(monkeypatch):
    """Test handling invalid DETAILS_TIMEOUT."""
    monkeypatch.setenv("DETAILS_TIMEOUT", "soon")
    config = WeddingsConfig.from_env()
    assert config.details_timeout == 10.0


def test_weddings_config_rejects_bad_offset():
    """Offsets must look like +0530."""
    with pytest.raises(ValidationError):
        WeddingsConfig(event_utc_offset="5:30")


def test_tzinfo_is_fixed_offset():
    """The event timezone is a fixed offset with the configured name."""
    config = WeddingsConfig()
    assert config.utc_offset == timedelta(hours=5, minutes=30)
    assert config.tzinfo.tzname(None) == "IST"


def test_details_url_local_and_remote():
    """Details come from the data dir unless a base URL is configured."""
    local = WeddingsConfig(data_dir=Path("/data"))
    assert local.details_url("asha") == str(Path("/data/asha.json"))

    remote = WeddingsConfig(details_base_url="https://cdn.example.com/weddings/")
    assert remote.details_url("asha") == "https://cdn.example.com/weddings/asha.json"
