"""Tests for the RSVP widget."""

from datetime import timedelta, timezone

from weddings.models import Rsvp
from weddings.render.rsvp import RsvpWidget

IST = timezone(timedelta(hours=5, minutes=30), "IST")


def make_widget(on_load=None, on_scroll=None, **data):
    config = Rsvp.model_validate({"enabled": True, **data})
    return RsvpWidget(config, IST, on_load=on_load, on_scroll=on_scroll)


def test_disabled_or_missing_is_hidden():
    assert not RsvpWidget(None, IST).visible
    assert not RsvpWidget(Rsvp(enabled=False), IST).visible


def test_button_mode_links_to_form():
    widget = make_widget(mode="button", formUrl="https://forms.example.com/r", title="Let us know")
    assert widget.visible
    assert widget.title == "Let us know"
    assert widget.button_visible
    assert widget.button_text == "RSVP Now"
    assert widget.button_href == "https://forms.example.com/r"
    assert widget.button_opens_new_tab
    assert widget.embed_url is None


def test_button_mode_without_form_url_hides_button():
    widget = make_widget(mode="button")
    assert widget.visible
    assert not widget.button_visible


def test_mode_is_case_insensitive():
    widget = make_widget(mode="EMBED", embedUrl="https://forms.example.com/embed")
    assert widget.mode == "embed"
    assert widget.deferred_embed


def test_deadline_text():
    widget = make_widget(deadline="2026-12-01T23:59:00+05:30", formUrl="https://f")
    assert widget.deadline_text == "RSVP deadline: Tue, Dec 01, 2026, 11:59 PM"


def test_deferred_embed_loads_once_across_clicks():
    """The iframe loads on the first click only; later clicks only scroll."""
    loads, scrolls = [], []
    widget = make_widget(
        on_load=loads.append,
        on_scroll=lambda: scrolls.append(True),
        mode="embed",
        embedUrl="https://forms.example.com/embed",
    )

    assert widget.button_visible
    assert widget.button_text == "RSVP (open form here)"
    assert not widget.embed_visible
    assert widget.embed_src is None

    widget.click()
    widget.click()
    widget.click()

    assert widget.embed_visible
    assert widget.embed_src == "https://forms.example.com/embed"
    assert loads == ["https://forms.example.com/embed"]
    assert widget.load_count == 1
    assert len(scrolls) == 3


def test_embed_without_button_loads_immediately():
    loads = []
    widget = make_widget(
        on_load=loads.append,
        mode="embed",
        showButton=False,
        embedUrl="https://forms.example.com/embed",
    )
    assert not widget.button_visible
    assert widget.embed_visible
    assert widget.embed_src == "https://forms.example.com/embed"
    assert loads == ["https://forms.example.com/embed"]

    widget.click()
    assert widget.load_count == 1


def test_new_tab_link_uses_form_url():
    widget = make_widget(
        mode="embed",
        embedUrl="https://forms.example.com/embed",
        formUrl="https://forms.example.com/full",
        openInNewTabText="Open the form",
    )
    assert widget.new_tab_href == "https://forms.example.com/full"
    assert widget.new_tab_text == "Open the form"


def test_click_in_button_mode_does_nothing():
    loads = []
    widget = make_widget(on_load=loads.append, formUrl="https://forms.example.com/r")
    widget.click()
    assert loads == []
    assert not widget.embed_visible
