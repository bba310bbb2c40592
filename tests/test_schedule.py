"""Tests for schedule cards and Google Calendar links."""

from urllib.parse import parse_qs, urlparse

from weddings.models import Venue, WeddingDetails
from weddings.render.schedule import google_calendar_link, render_schedule


def test_cards_in_document_order(details_document, ist):
    details = WeddingDetails.from_document(details_document)
    cards = render_schedule(details.schedule, details.primary_venue, ist)
    assert [c.entry_id for c in cards] == ["mehendi", "brunch"]


def test_card_text(details_document, ist):
    details = WeddingDetails.from_document(details_document)
    mehendi, brunch = render_schedule(details.schedule, details.primary_venue, ist)

    assert mehendi.time_text == "Sat, Dec 26, 2026, 03:00 PM to 07:00 PM"
    assert mehendi.place == "Courtyard, Rambagh, Jaipur"
    assert mehendi.notes == "Bright colours encouraged"
    assert brunch.time_text == "Mon, Dec 28, 2026, 10:00 AM to 12:30 PM"
    assert brunch.place == "Garden Cafe"
    assert brunch.notes is None


def test_map_url_falls_back_to_venue(details_document, ist):
    details = WeddingDetails.from_document(details_document)
    mehendi, brunch = render_schedule(details.schedule, details.primary_venue, ist)
    assert mehendi.map_url == "https://maps.example.com/rambagh"
    assert brunch.map_url == "https://maps.example.com/garden-cafe"


def test_no_map_url_anywhere(details_document, ist):
    details = WeddingDetails.from_document(details_document)
    cards = render_schedule(details.schedule, Venue(), ist)
    assert cards[0].map_url is None


def test_google_calendar_link_uses_utc_dates(details_document, ist):
    """Test the prefilled link converts local times to UTC stamps."""
    details = WeddingDetails.from_document(details_document)
    brunch = details.schedule[1]
    link = google_calendar_link(brunch, ist)

    assert link.startswith("https://calendar.google.com/calendar/render?action=TEMPLATE&")
    assert "&dates=20261228T043000Z/20261228T070000Z&" in link
    query = parse_qs(urlparse(link).query, keep_blank_values=True)
    assert query["text"] == ["Farewell Brunch"]
    assert query["location"] == ["Garden Cafe"]
    assert query["details"] == [""]


def test_google_calendar_link_encodes_components(ist):
    details = WeddingDetails.model_validate(
        {
            "coupleNames": "A and B",
            "lastUpdated": "2026-01-01T00:00:00Z",
            "primaryEvent": {"start": "2026-12-01T10:00:00Z"},
            "schedule": [
                {
                    "title": "Tea & Cake",
                    "start": "2026-12-01T16:00:00",
                    "end": "2026-12-01T17:00:00",
                    "notes": "Bring a friend?",
                }
            ],
        }
    )
    link = google_calendar_link(details.schedule[0], ist)
    assert "text=Tea%20%26%20Cake" in link
    assert "details=Bring%20a%20friend%3F" in link
    # Naive times are read in the event timezone
    assert "dates=20261201T103000Z/20261201T113000Z" in link
