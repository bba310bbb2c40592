"""Page background: a named gradient or a cover image."""

from dataclasses import dataclass, field

from weddings.models.details import Theme

BASE_CLASSES = ("relative", "min-h-screen")


@dataclass(frozen=True)
class ThemeStyle:
    """Classes and inline style for the theme wrapper.

    Built from scratch on every render, so re-applying a theme never
    leaves classes or styles from a previous one behind.
    """

    classes: tuple[str, ...] = ()
    style: dict[str, str] = field(default_factory=dict)

    @property
    def class_attr(self) -> str:
        return " ".join(self.classes)

    @property
    def style_attr(self) -> str:
        return "; ".join(f"{k}: {v}" for k, v in self.style.items())


def render_theme(theme: Theme | None) -> ThemeStyle:
    if theme is None:
        return ThemeStyle()

    if theme.background == "gradient" and theme.gradient:
        return ThemeStyle(
            classes=BASE_CLASSES + ("bg-gradient-to-br",) + tuple(theme.gradient.split()),
        )

    if theme.background == "image" and theme.image_url:
        return ThemeStyle(
            classes=BASE_CLASSES,
            style={
                "background-image": f"url('{theme.image_url}')",
                "background-size": "cover",
                "background-position": "center",
                "background-repeat": "no-repeat",
            },
        )

    return ThemeStyle(classes=BASE_CLASSES)
