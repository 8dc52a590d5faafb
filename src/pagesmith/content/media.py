"""Helpers for image and video values stored in the document."""

from __future__ import annotations

import base64
import logging
import mimetypes
import re
from pathlib import Path

from pagesmith.errors import ImageTooLarge

logger = logging.getLogger(__name__)

MAX_UPLOAD_BYTES = 2 * 1024 * 1024
DEFAULT_IMAGE_MIME = "image/png"

_YOUTUBE_ID = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)([^\"&?/\s]{11})"
)


def image_to_data_uri(data: bytes, mime_type: str | None = None) -> str:
    """Encode raw image bytes as a self-contained ``data:`` URI."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type or DEFAULT_IMAGE_MIME};base64,{encoded}"


def read_image_file(path: Path, *, max_bytes: int = MAX_UPLOAD_BYTES) -> str:
    """Read an image file into a data URI.

    Raises:
        ImageTooLarge: If the file is larger than ``max_bytes``.
    """
    size = path.stat().st_size
    if size > max_bytes:
        raise ImageTooLarge(
            f"{path.name} is {size} bytes; images must be under {max_bytes} bytes"
        )
    mime_type, _ = mimetypes.guess_type(path.name)
    logger.debug("Embedding %s (%d bytes, %s)", path.name, size, mime_type)
    return image_to_data_uri(path.read_bytes(), mime_type)


def to_embed_url(url: str) -> str:
    """Normalise a YouTube link to its embeddable form.

    Links that are not recognised as YouTube are returned unchanged.
    """
    match = _YOUTUBE_ID.search(url)
    if match:
        return f"https://www.youtube.com/embed/{match.group(1)}"
    return url
