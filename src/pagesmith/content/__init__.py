"""Content domain — document models, bundled default and path mutation."""

from pagesmith.content.defaults import conform_document, load_default_document
from pagesmith.content.models import (
    ContentDocument,
    Document,
    Language,
    LocalizedText,
    ServiceItem,
    TimelineItem,
    VideoItem,
    localize,
)
from pagesmith.content.paths import get_at, update

__all__ = [
    "ContentDocument",
    "Document",
    "Language",
    "LocalizedText",
    "ServiceItem",
    "TimelineItem",
    "VideoItem",
    "conform_document",
    "get_at",
    "load_default_document",
    "localize",
    "update",
]
