"""RSVP section: a link button or an embedded form.

Two independent settings drive it. ``mode`` is ``button`` (link out to
``formUrl``) or ``embed`` (show ``embedUrl`` in an iframe). In embed mode,
``showButton`` decides whether the iframe loads right away or only after
the first click on the button.
"""

import logging
from collections.abc import Callable
from datetime import tzinfo

from weddings.formatters import format_local
from weddings.models.details import Rsvp

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "RSVP"
DEFAULT_BUTTON_TEXT = "RSVP Now"
DEFAULT_EMBED_BUTTON_TEXT = "RSVP (open form here)"
DEFAULT_NEW_TAB_TEXT = "Open in Google Forms"


class RsvpWidget:
    """State of the RSVP section for one render."""

    def __init__(
        self,
        config: Rsvp | None,
        tz: tzinfo,
        on_load: Callable[[str], None] | None = None,
        on_scroll: Callable[[], None] | None = None,
    ):
        self.on_load = on_load
        self.on_scroll = on_scroll

        self.visible = False
        self.title = DEFAULT_TITLE
        self.deadline_text: str | None = None
        self.mode = "button"
        self.show_button = True

        self.button_visible = False
        self.button_text = ""
        self.button_href: str | None = None
        self.button_opens_new_tab = False

        self.new_tab_href: str | None = None
        self.new_tab_text = DEFAULT_NEW_TAB_TEXT

        self.embed_url: str | None = None
        self.embed_visible = False
        self.embed_src: str | None = None
        self.load_count = 0

        if config is not None and config.enabled:
            self._configure(config, tz)

    @property
    def deferred_embed(self) -> bool:
        """True when the iframe waits for the first button click."""
        return self.mode == "embed" and self.show_button and self.embed_url is not None

    def _configure(self, config: Rsvp, tz: tzinfo) -> None:
        self.visible = True
        self.title = config.title or DEFAULT_TITLE
        if config.deadline is not None:
            self.deadline_text = f"RSVP deadline: {format_local(config.deadline, tz)}"

        self.mode = config.mode
        self.show_button = config.show_button is not False

        if config.form_url:
            self.new_tab_href = config.form_url
            self.new_tab_text = config.open_in_new_tab_text or DEFAULT_NEW_TAB_TEXT

        if self.mode == "button":
            if not config.form_url:
                return
            self.button_text = config.button_text or DEFAULT_BUTTON_TEXT
            self.button_href = config.form_url
            self.button_opens_new_tab = True
            self.button_visible = True
            return

        if not config.embed_url:
            return
        self.embed_url = config.embed_url

        if not self.show_button:
            self.embed_visible = True
            self._load()
            return

        self.button_visible = True
        self.button_text = config.button_text or DEFAULT_EMBED_BUTTON_TEXT
        self.button_href = "#"

    def click(self) -> None:
        """Handle a click on the RSVP button.

        In deferred embed mode this reveals the iframe, loads it on the
        first click only, and asks for it to be scrolled into view.
        Button mode clicks are plain links and need no handling.
        """
        if not self.deferred_embed:
            return
        self.embed_visible = True
        if self.embed_src is None:
            self._load()
        if self.on_scroll is not None:
            self.on_scroll()

    def _load(self) -> None:
        self.embed_src = self.embed_url
        self.load_count += 1
        logger.debug(f"Loading RSVP embed {self.embed_url}")
        if self.on_load is not None:
            self.on_load(self.embed_url)
