import copy
import json
from datetime import timedelta, timezone

import pytest

from weddings import create_app
from weddings.config import WeddingsConfig

IST = timezone(timedelta(hours=5, minutes=30), "IST")

SAMPLE_DETAILS = {
    "coupleNames": "Priya and Dev",
    "tagline": "Two families, one celebration",
    "cityLine": "Jaipur, Rajasthan",
    "lastUpdated": "2026-10-01T09:30:00+05:30",
    "password": 2712,
    "passwordHint": "Our wedding date, DDMM",
    "primaryEvent": {
        "title": "Wedding Ceremony",
        "start": "2026-12-27T18:30:00+05:30",
        "end": "2026-12-27T22:00:00+05:30",
    },
    "primaryVenue": {
        "name": "Rambagh Lawns",
        "address": "Bhawani Singh Rd, Jaipur",
        "mapUrl": "https://maps.example.com/rambagh",
    },
    "schedule": [
        {
            "id": "mehendi",
            "title": "Mehendi",
            "start": "2026-12-26T15:00:00+05:30",
            "end": "2026-12-26T19:00:00+05:30",
            "locationName": "Courtyard",
            "address": "Rambagh, Jaipur",
            "notes": "Bright colours encouraged",
        },
        {
            "id": "brunch",
            "title": "Farewell Brunch",
            "start": "2026-12-28T10:00:00+05:30",
            "end": "2026-12-28T12:30:00+05:30",
            "locationName": "Garden Cafe",
            "mapUrl": "https://maps.example.com/garden-cafe",
        },
    ],
    "updates": [
        {"when": "2026-10-01T09:30:00+05:30", "text": "Shuttle timings added."},
        {"when": "2026-09-15T12:00:00+05:30", "text": "Invite published."},
    ],
    "contacts": [
        {"name": "Meera", "role": "Sister of the bride", "phone": "+91 98765 43210"},
    ],
    "theme": {
        "background": "gradient",
        "gradient": "from-rose-50 via-white to-amber-50",
    },
    "rsvp": {
        "enabled": True,
        "mode": "button",
        "formUrl": "https://forms.example.com/rsvp",
    },
}


@pytest.fixture
def details_document():
    """A fresh, complete details document (safe to mutate)."""
    return copy.deepcopy(SAMPLE_DETAILS)


@pytest.fixture
def config(tmp_path):
    """Config pointing every directory at a temporary location."""
    return WeddingsConfig(
        data_dir=tmp_path / "data",
        calendar_dir=tmp_path / "calendars",
        log_dir=tmp_path / "logs",
        secret_key="test-secret",
    )


@pytest.fixture
def write_details(config):
    """Write a details document as {data_dir}/{slug}.json."""

    def _write(slug, document):
        config.data_dir.mkdir(parents=True, exist_ok=True)
        path = config.details_path(slug)
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def app(config):
    """Create and configure a Flask app for testing."""
    app = create_app(config)
    app.config.update(
        {
            "TESTING": True,
        }
    )
    return app


@pytest.fixture
def client(app):
    """Create a test client for the app."""
    return app.test_client()


@pytest.fixture
def ist():
    """The fixed +05:30 event timezone."""
    return IST
