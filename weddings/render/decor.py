"""Rotated corner ornaments and the theme-mode events that restyle them."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from weddings.models.details import CORNERS, DecorConfig, WeddingDetails

logger = logging.getLogger(__name__)

# Auto rotation per corner so one ornament image points inward everywhere
AUTO_ROTATION = {"tl": 0, "tr": 90, "bl": -90, "br": 180}


@dataclass(frozen=True)
class DecorCorner:
    key: str
    image_url: str | None = None
    rotation: float = 0
    size: float = 0
    opacity: float = 0

    @property
    def hidden(self) -> bool:
        return not self.image_url

    @property
    def style(self) -> dict[str, str]:
        if self.hidden:
            return {}
        return {
            "width": f"{self.size:g}px",
            "height": f"{self.size:g}px",
            "opacity": f"{self.opacity:g}",
            "background-image": f"url('{self.image_url}')",
            "background-size": "contain",
            "background-repeat": "no-repeat",
            "background-position": "center",
            "transform": f"rotate({self.rotation:g}deg)",
        }

    @property
    def style_attr(self) -> str:
        return "; ".join(f"{k}: {v}" for k, v in self.style.items())


@dataclass(frozen=True)
class DecorState:
    """Resolved decor for one dark-mode state."""

    corners: dict[str, DecorCorner] = field(default_factory=dict)
    opacity_light: float = 0
    opacity_dark: float = 0

    @property
    def hidden(self) -> bool:
        return all(corner.hidden for corner in self.corners.values())

    def rotations(self) -> dict[str, float]:
        return {key: corner.rotation for key, corner in self.corners.items()}


HIDDEN_DECOR = DecorState(corners={key: DecorCorner(key) for key in CORNERS})


def corner_image(decor: DecorConfig, key: str) -> str | None:
    override = decor.corners.get(key)
    if override is not None and override.image_url:
        return override.image_url
    return decor.image_url or None


def corner_rotation(decor: DecorConfig, key: str) -> float:
    """baseRotation + automatic corner rotation + per-corner override."""
    auto = AUTO_ROTATION[key] if decor.rotate else 0
    override = decor.corners.get(key)
    extra = override.rotation_degrees if override is not None else 0
    return decor.base_rotation + auto + extra


def render_decor(decor: DecorConfig | None, dark: bool = False) -> DecorState:
    """Resolve all four corners; hidden unless enabled in corners mode."""
    if decor is None or decor.enabled is not True or decor.mode != "corners":
        return HIDDEN_DECOR

    opacity = decor.opacity_dark if dark else decor.opacity_light
    corners = {
        key: DecorCorner(
            key=key,
            image_url=corner_image(decor, key),
            rotation=corner_rotation(decor, key),
            size=decor.size,
            opacity=opacity,
        )
        for key in CORNERS
    }
    return DecorState(
        corners=corners,
        opacity_light=decor.opacity_light,
        opacity_dark=decor.opacity_dark,
    )


ThemeModeListener = Callable[[bool], None]


class ThemeModeSource:
    """Publishes light/dark mode changes to subscribers."""

    def __init__(self, dark: bool = False):
        self._dark = dark
        self._listeners: list[ThemeModeListener] = []

    @property
    def dark(self) -> bool:
        return self._dark

    def set_dark(self, dark: bool) -> None:
        """Change the mode; subscribers only hear about actual changes."""
        if dark == self._dark:
            return
        self._dark = dark
        for listener in list(self._listeners):
            listener(dark)

    def toggle(self) -> None:
        self.set_dark(not self._dark)

    def subscribe(self, listener: ThemeModeListener) -> Callable[[], None]:
        """Register a listener and return a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


class DecorRenderer:
    """Keeps the decor state in sync with the theme mode for one document.

    Server-side counterpart of the page script that restyles the corners
    when the dark class changes; the `show` command drives it.
    """

    def __init__(self, on_render: Callable[[DecorState], None] | None = None):
        self.on_render = on_render
        self.state: DecorState = HIDDEN_DECOR
        self._unsubscribe: Callable[[], None] | None = None

    def bind(self, source: ThemeModeSource, details: WeddingDetails) -> DecorState:
        """Render for ``details`` now and again on every mode change.

        Binding again replaces the previous subscription, so only the most
        recently bound document is ever re-rendered.
        """
        self.unbind()
        decor = details.effective_decor

        def rerender(dark: bool) -> None:
            self._apply(render_decor(decor, dark))

        self._unsubscribe = source.subscribe(rerender)
        rerender(source.dark)
        return self.state

    def unbind(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _apply(self, state: DecorState) -> None:
        self.state = state
        logger.debug(f"Decor re-rendered (hidden={state.hidden})")
        if self.on_render is not None:
            self.on_render(state)
