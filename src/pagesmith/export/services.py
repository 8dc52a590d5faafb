"""Snapshot export of the content document.

The rendering is the same JSON format as the bundled default document,
so an exported file can be dropped in as the new default when the site
is redeployed.  Every snapshot is validated against the content schema
before it is rendered, so anything written here loads back through
``load_default_document``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path

from pydantic import ValidationError

from pagesmith.content.defaults import DEFAULT_CONTENT_FILENAME, conform_document
from pagesmith.content.models import ContentDocument, Document
from pagesmith.errors import SnapshotInvalid

logger = logging.getLogger(__name__)

EXPORT_FILENAME = DEFAULT_CONTENT_FILENAME


def render_snapshot(document: Document, *, default: Document | None = None) -> str:
    """Render ``document`` as stable, human-readable JSON text.

    Args:
        document: The document to export.
        default: When given, gaps in ``document`` (for example nested fields
            missing from a document saved under an older schema) are filled
            from it and unknown top-level keys are dropped.

    Raises:
        SnapshotInvalid: If the result would not load as a default document.
    """
    if default is not None:
        document = conform_document(document, default)
    try:
        tree = ContentDocument.model_validate(document).to_tree()
    except ValidationError as exc:
        raise SnapshotInvalid(f"document does not match the content schema: {exc}") from exc
    return json.dumps(tree, indent=2, ensure_ascii=False) + "\n"


def write_snapshot(
    document: Document,
    directory: Path,
    *,
    filename: str = EXPORT_FILENAME,
    default: Document | None = None,
) -> Path:
    """Write the snapshot to ``directory/filename`` and return the path."""
    text = render_snapshot(document, default=default)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(text, encoding="utf-8")
    logger.info("Exported content snapshot to %s", path)
    return path


def copy_snapshot(
    document: Document,
    writer: Callable[[str], object],
    *,
    default: Document | None = None,
) -> None:
    """Hand the snapshot text to a clipboard writer."""
    writer(render_snapshot(document, default=default))
