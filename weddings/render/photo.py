"""Optional couple photo."""

from dataclasses import dataclass

from weddings.models.details import Media

DEFAULT_PHOTO_SIZE = 112


@dataclass(frozen=True)
class CouplePhotoView:
    src: str
    alt: str
    shape_class: str
    size: float

    @property
    def style_attr(self) -> str:
        return f"width: {self.size:g}px; height: {self.size:g}px"


def render_couple_photo(media: Media | None) -> CouplePhotoView | None:
    """No placeholder: missing or disabled photos render nothing."""
    photo = media.couple_photo if media is not None else None
    if photo is None or not photo.enabled or not photo.src:
        return None

    shape = (photo.shape or "circle").lower()
    return CouplePhotoView(
        src=photo.src,
        alt=photo.alt or "",
        shape_class="rounded-2xl" if shape == "rounded" else "rounded-full",
        size=photo.size or DEFAULT_PHOTO_SIZE,
    )
