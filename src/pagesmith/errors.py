"""Error types raised by the document engine.

Every condition the engine reports derives from ``PagesmithError`` so the
presentation layer can catch the whole family in one place and show a
dismissible message.  Programmer errors (``PathNotFound``,
``InvalidTransition``) are meant to surface loudly instead.
"""

from __future__ import annotations

from collections.abc import Sequence


class PagesmithError(Exception):
    """Base error for the document engine."""


# ---------------------------------------------------------------------------
# Programmer errors
# ---------------------------------------------------------------------------


class PathNotFound(PagesmithError, LookupError):
    """A path segment does not resolve inside the document."""

    def __init__(self, path: Sequence[str | int], position: int) -> None:
        self.path = tuple(path)
        self.position = position
        segment = self.path[position] if position < len(self.path) else None
        super().__init__(
            f"path {list(self.path)!r} does not resolve at segment {position} ({segment!r})"
        )


class InvalidTransition(PagesmithError):
    """A session gate operation was called from the wrong state."""


# ---------------------------------------------------------------------------
# User input / session state
# ---------------------------------------------------------------------------


class NotEditing(PagesmithError):
    """An edit-only action was attempted while edit mode is locked."""


class InvalidCredential(PagesmithError):
    """The submitted credential does not match the stored one."""


class CredentialTooShort(PagesmithError):
    """A new credential is shorter than the minimum length."""


class ImageTooLarge(PagesmithError):
    """An uploaded image exceeds the configured size limit."""


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


class StorageQuotaExceeded(PagesmithError):
    """The durable store rejected a write for capacity reasons."""


# ---------------------------------------------------------------------------
# External image service
# ---------------------------------------------------------------------------


class GenerationError(PagesmithError):
    """Base error for image generation."""


class MissingServiceCredential(GenerationError):
    """No API key is configured for the image service."""


class NoContentGenerated(GenerationError):
    """The image service answered without any image data."""


class GenerationFailed(GenerationError):
    """The image service call raised; the cause is chained."""


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------


class SnapshotInvalid(PagesmithError):
    """A document cannot be exported as a loadable default document."""
