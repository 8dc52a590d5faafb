"""Bundled default content document.

The default ships as ``default_content.json`` next to this module.  An
exported snapshot has the same format, so redeploying edits means either
replacing that file or pointing ``content.default_path`` at the export.
"""

from __future__ import annotations

import copy
import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any

from pagesmith.content.models import ContentDocument, Document

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_FILENAME = "default_content.json"


def load_default_document(path: str | Path | None = None) -> Document:
    """Load and validate the default content document.

    Args:
        path: Optional replacement file. When omitted (or empty), the
            document bundled with the package is used.

    Returns:
        The validated document as a JSON tree.

    Raises:
        pydantic.ValidationError: If the file does not match the content schema.
    """
    if path:
        source = Path(path)
        raw = source.read_text(encoding="utf-8")
        logger.debug("Loading default content from %s", source)
    else:
        raw = (
            resources.files("pagesmith.content")
            .joinpath(DEFAULT_CONTENT_FILENAME)
            .read_text(encoding="utf-8")
        )
    return ContentDocument.model_validate(json.loads(raw)).to_tree()


def _conform(value: Any, fallback: Any) -> Any:
    if value is None:
        return copy.deepcopy(fallback)
    if isinstance(fallback, dict):
        if not isinstance(value, dict):
            return copy.deepcopy(fallback)
        merged = copy.deepcopy(value)
        for key, fallback_value in fallback.items():
            merged[key] = _conform(value.get(key), fallback_value)
        return merged
    if isinstance(fallback, list) and fallback:
        if not isinstance(value, list):
            return copy.deepcopy(fallback)
        # Items fill from the default item at the same position, else the last one
        last = len(fallback) - 1
        return [_conform(item, fallback[min(i, last)]) for i, item in enumerate(value)]
    return copy.deepcopy(value)


def conform_document(document: Document, default: Document) -> Document:
    """Fill gaps in ``document`` from ``default`` at every depth.

    Unlike the depth-1 load-time merge, this walks into sections and list
    items so a document saved before a nested field existed gets that
    field from the default.  Top-level keys the default does not know are
    dropped.  Neither input is mutated.
    """
    unknown = [key for key in document if key not in default]
    if unknown:
        logger.info("Dropping unknown top-level keys: %s", ", ".join(unknown))
    return {key: _conform(document.get(key), value) for key, value in default.items()}
