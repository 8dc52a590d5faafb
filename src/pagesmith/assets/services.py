"""AI image generation for document image slots.

Uses Google Gemini's image generation via the google-genai SDK.  A
successful call is encoded as a ``data:`` URI and written into the
document at the target's path; every failure leaves the document as it
was.  Nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Protocol

from google import genai
from google.genai import types

from pagesmith.assets.models import DEFAULT_MODEL, HERO_IMAGE, GenerationTarget, GenerationTasks
from pagesmith.content.media import image_to_data_uri
from pagesmith.errors import GenerationFailed, MissingServiceCredential, NoContentGenerated

logger = logging.getLogger(__name__)


class DocumentHolder(Protocol):
    """Anything that can install a path update into its current document."""

    def apply(self, path: Sequence[str | int], value: Any) -> None: ...


def _extract_image(response: Any) -> tuple[bytes, str | None]:
    """Return the first inline image payload and its mime type."""
    for part in response.parts or []:
        inline = part.inline_data
        if inline is not None and inline.data:
            return inline.data, inline.mime_type
    return b"", None


class ImageGenerator:
    """Generate images for document targets via Google Gemini.

    Tracks one in-flight flag per target.  Calling ``generate`` twice for
    the same target while the first call is pending is not prevented
    here; callers disable the trigger while ``is_in_flight`` is true.
    """

    def __init__(
        self,
        api_key: str = "",
        *,
        model: str = DEFAULT_MODEL,
        image_size: str | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.image_size = image_size
        self.tasks = GenerationTasks()
        self._client: genai.Client | None = None

    def is_configured(self) -> bool:
        """Check whether an API key is available."""
        return bool(self.api_key.strip())

    def is_in_flight(self, target: GenerationTarget = HERO_IMAGE) -> bool:
        return self.tasks.is_in_flight(target.name)

    def _get_client(self) -> genai.Client:
        """Lazy-create and cache the genai Client."""
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(
        self,
        holder: DocumentHolder,
        target: GenerationTarget = HERO_IMAGE,
    ) -> str:
        """Generate an image for ``target`` and write it into the document.

        Args:
            holder: State handle owning the document to update.
            target: Which image slot to fill and how to prompt for it.

        Returns:
            The ``data:`` URI written at ``target.path``.

        Raises:
            MissingServiceCredential: No API key; nothing was started.
            NoContentGenerated: The response held no image data.
            GenerationFailed: The service call raised.
        """
        if not self.is_configured():
            raise MissingServiceCredential("image generation API key is not configured")

        self.tasks.start(target.name)
        try:
            try:
                client = self._get_client()
                response = await client.aio.models.generate_content(
                    model=self.model,
                    contents=target.prompt,
                    config=types.GenerateContentConfig(
                        response_modalities=["TEXT", "IMAGE"],
                        image_config=types.ImageConfig(
                            aspect_ratio=target.aspect_ratio,
                            image_size=self.image_size or target.image_size,
                        ),
                    ),
                )
            except Exception as exc:
                logger.warning("Image generation failed for %s", target.name, exc_info=True)
                raise GenerationFailed(f"image generation failed: {exc}") from exc

            payload, mime_type = _extract_image(response)
            if not payload:
                logger.warning("No image data in response for %s", target.name)
                raise NoContentGenerated("the service returned no image data")

            reference = image_to_data_uri(payload, mime_type)
            holder.apply(target.path, reference)
            logger.info("Generated %d-byte image for %s", len(payload), target.name)
            return reference
        finally:
            self.tasks.finish(target.name)
