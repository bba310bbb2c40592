"""Generate calendar files for every details document in a directory."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from weddings.calendar.generator import generate_calendar
from weddings.config import WeddingsConfig
from weddings.exceptions import CalendarGenerationError, WeddingsError
from weddings.loader import DetailsLoader

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Outcome of a batch run: written files and per-slug failures."""

    written: dict[str, Path] = field(default_factory=dict)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


def list_slugs(data_dir: Path, reserved: list[str] | None = None) -> list[str]:
    """Slugs of all ``*.json`` documents in data_dir, reserved names excluded."""
    if not data_dir.is_dir():
        return []
    reserved = set(reserved or [])
    return sorted(
        path.stem
        for path in data_dir.glob("*.json")
        if path.is_file() and path.stem not in reserved
    )


def write_calendar(path: Path, content: str) -> None:
    """Write calendar text as UTF-8, removing the file if the write fails."""
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        # newline="" keeps the CRLF line endings intact
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        if path.exists() and path.stat().st_size == 0:
            path.unlink(missing_ok=True)
        raise CalendarGenerationError(f"Failed to write {path}: {e}") from e


def generate_file(
    slug: str,
    config: WeddingsConfig,
    loader: DetailsLoader | None = None,
    now: datetime | None = None,
) -> Path:
    """Generate ``{calendar_dir}/{slug}.ics`` from ``{data_dir}/{slug}.json``.

    Raises:
        DetailsNotFoundError: If the details file cannot be read
        DetailsFormatError: If the details file is not a JSON object
        CalendarGenerationError: If the calendar cannot be written
    """
    loader = loader or DetailsLoader(timeout=config.details_timeout)
    document = loader.load_raw(config.details_path(slug))

    if not document.get("password"):
        # Not needed for the calendar, but the page cannot be unlocked without it
        logger.warning(f"{slug}.json missing \"password\"")

    out_path = config.calendar_path(slug)
    write_calendar(out_path, generate_calendar(document, slug, config=config, now=now))
    logger.info(f"Wrote {out_path}")
    return out_path


def generate_all(
    config: WeddingsConfig,
    slugs: list[str] | None = None,
    now: datetime | None = None,
) -> BatchResult:
    """Generate calendars for the given slugs (default: every document).

    A file that cannot be read, parsed or written is recorded as failed
    and the run continues with the next one.
    """
    if slugs is None:
        slugs = list_slugs(config.data_dir, config.reserved_slugs)

    loader = DetailsLoader(timeout=config.details_timeout)
    result = BatchResult()
    for slug in slugs:
        try:
            result.written[slug] = generate_file(slug, config, loader=loader, now=now)
        except WeddingsError as e:
            logger.error(f"Skipping '{slug}': {e}")
            result.failed[slug] = str(e)

    logger.info(f"Generated {len(result.written)} calendar(s), {len(result.failed)} failed")
    return result
