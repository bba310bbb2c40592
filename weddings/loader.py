"""Fetch wedding details documents from a URL or the local data directory."""

import json
import logging
from pathlib import Path
from typing import Any
from urllib.parse import unquote, urlparse

import requests

from weddings.exceptions import DetailsFormatError, DetailsNotFoundError
from weddings.models.details import WeddingDetails

logger = logging.getLogger(__name__)

# Always revalidate; a details edit must show up on the next page load
NO_CACHE_HEADERS = {"Cache-Control": "no-cache", "Pragma": "no-cache"}


class DetailsLoader:
    """Loads a details document fresh on every call.

    ``details_url`` may be an http(s) URL, a ``file://`` URL or a plain
    filesystem path. Nothing is cached, failures included.
    """

    def __init__(self, timeout: float = 10.0, session: requests.Session | None = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def load_raw(self, details_url: str | Path) -> dict[str, Any]:
        """Fetch and parse the JSON document without model validation.

        Raises:
            DetailsNotFoundError: If the document cannot be fetched
            DetailsFormatError: If the body is not a JSON object
        """
        url = str(details_url)
        scheme = urlparse(url).scheme.lower()
        if scheme in ("http", "https"):
            data = self._fetch_http(url)
        elif scheme == "file":
            data = self._read_file(Path(unquote(urlparse(url).path)))
        else:
            data = self._read_file(Path(url))

        if not isinstance(data, dict):
            raise DetailsFormatError(
                f"Details at {url} must be a JSON object, got {type(data).__name__}"
            )
        return data

    def load(self, details_url: str | Path, slug: str | None = None) -> WeddingDetails:
        """Fetch, parse and validate a details document.

        Raises:
            DetailsNotFoundError: If the document cannot be fetched
            DetailsFormatError: If the body is not a JSON object
            RequiredFieldError: If a required field is missing
        """
        return WeddingDetails.from_document(self.load_raw(details_url), slug=slug)

    def _fetch_http(self, url: str) -> Any:
        try:
            response = self.session.get(url, headers=NO_CACHE_HEADERS, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Failed to fetch details from {url}: {e}")
            raise DetailsNotFoundError(f"Could not fetch details from {url}") from e

        if not response.ok:
            logger.warning(f"Details request to {url} returned {response.status_code}")
            raise DetailsNotFoundError(
                f"Details not found at {url} (HTTP {response.status_code})"
            )

        try:
            return response.json()
        except ValueError as e:
            raise DetailsFormatError(f"Invalid JSON from {url}: {e}") from e

    def _read_file(self, path: Path) -> Any:
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            logger.warning(f"Failed to read details file {path}: {e}")
            raise DetailsNotFoundError(f"Details file not found: {path}") from e

        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise DetailsFormatError(f"Invalid JSON in {path}: {e}") from e
