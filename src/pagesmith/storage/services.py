"""Load, reconcile and save the persisted content document.

The persisted document may predate the current default: sections added
to the schema since the owner's last save would otherwise be missing.
``reconcile`` fills those in with a depth-1 merge.  The merge is
shallow: inside a top-level section that exists in the
saved document, the saved sub-tree wins as-is, so a nested field that
was added later stays absent.
"""

from __future__ import annotations

import copy
import json
import logging
from typing import Any

from pagesmith.content.models import Document
from pagesmith.storage.store import CONTENT_KEY, LocalStore

logger = logging.getLogger(__name__)


def reconcile(default: Document, loaded: dict[str, Any]) -> Document:
    """Merge a loaded document over the default, one level deep.

    Top-level keys of ``loaded`` win unless their value is None; keys
    missing from ``loaded`` (or None) take the default's value.  Keys that
    only exist in ``loaded`` are kept.  Neither input is mutated and the
    result shares no structure with them.
    """
    merged = copy.deepcopy(default)
    for key, value in loaded.items():
        if value is None:
            continue
        merged[key] = copy.deepcopy(value)
    return merged


def load_document(store: LocalStore, default: Document) -> Document:
    """Load the persisted document reconciled against ``default``.

    Returns a copy of ``default`` if nothing was saved, or if the saved
    content cannot be parsed as a JSON object.
    """
    raw = store.get(CONTENT_KEY)
    if raw is None:
        return copy.deepcopy(default)
    try:
        loaded = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Stored content is not valid JSON, using default document", exc_info=True)
        return copy.deepcopy(default)
    if not isinstance(loaded, dict):
        logger.warning(
            "Stored content is a %s, not an object; using default document",
            type(loaded).__name__,
        )
        return copy.deepcopy(default)

    missing = [k for k in default if loaded.get(k) is None]
    if missing:
        logger.info("Filling sections missing from saved content: %s", ", ".join(missing))
    return reconcile(default, loaded)


def save_document(store: LocalStore, document: Document) -> None:
    """Persist ``document``, replacing any previously saved version.

    Raises StorageQuotaExceeded if the store rejects the write; the
    caller's in-memory document is unaffected.
    """
    store.set(CONTENT_KEY, json.dumps(document, ensure_ascii=False))
    logger.info("Saved content document to %s", store.path)
