"""Storage domain — local key/value store and document persistence."""

from pagesmith.storage.services import load_document, reconcile, save_document
from pagesmith.storage.store import (
    CONTENT_KEY,
    CREDENTIAL_KEY,
    ELEVATED_KEY,
    STORE_FILENAME,
    LocalStore,
)

__all__ = [
    "CONTENT_KEY",
    "CREDENTIAL_KEY",
    "ELEVATED_KEY",
    "STORE_FILENAME",
    "LocalStore",
    "load_document",
    "reconcile",
    "save_document",
]
