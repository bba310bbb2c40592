"""Shared-secret password gate and the per-slug unlock flag.

The gate only deters casual browsing: the comparison is plain string
equality, there is no hashing and no rate limiting.
"""

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

from weddings.models.details import WeddingDetails, coerce_secret

logger = logging.getLogger(__name__)


def unlock_key(slug: str) -> str:
    """Storage key remembering that a visitor unlocked this slug."""
    return f"weddings-{slug}-unlocked"


def check_password(candidate: Any, document: WeddingDetails | Mapping[str, Any]) -> bool:
    """Compare a visitor's input with the document password as strings.

    A document without a password can never be unlocked.
    """
    if isinstance(document, WeddingDetails):
        expected = document.password
    else:
        expected = coerce_secret(document.get("password"))

    if expected is None:
        return False
    return coerce_secret(candidate) == expected


class UnlockStore:
    """Reads and writes unlock flags in a mapping (the Flask session in the app)."""

    def __init__(self, storage: MutableMapping[str, Any]):
        self.storage = storage

    def is_unlocked(self, slug: str) -> bool:
        return self.storage.get(unlock_key(slug)) is True

    def unlock(self, slug: str) -> None:
        self.storage[unlock_key(slug)] = True
        logger.info(f"Unlocked '{slug}'")

    def lock(self, slug: str) -> None:
        self.storage.pop(unlock_key(slug), None)

    def attempt(self, slug: str, candidate: Any, document: WeddingDetails) -> bool:
        """Check the password and set the flag on a match."""
        if check_password(candidate, document):
            self.unlock(slug)
            return True
        logger.debug(f"Wrong password for '{slug}'")
        return False
