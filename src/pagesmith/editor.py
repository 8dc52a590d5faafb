"""The editor state handle.

``Editor`` owns the current content document together with the store,
the session gate and the image generator, and is what the presentation
layer holds on to.  There is no module-level document: every mutation
goes through ``apply``, which installs a fresh copy produced by the path
mutator, so earlier ``document`` references remain valid snapshots.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from pagesmith.assets.models import HERO_IMAGE, GenerationTarget
from pagesmith.assets.services import ImageGenerator
from pagesmith.config import PagesmithConfig, load_config
from pagesmith.content.defaults import load_default_document
from pagesmith.content.media import read_image_file, to_embed_url
from pagesmith.content.models import Document, Language, localize
from pagesmith.content.paths import get_at, update
from pagesmith.errors import NotEditing
from pagesmith.export.services import copy_snapshot, render_snapshot, write_snapshot
from pagesmith.session.gate import SessionGate
from pagesmith.storage.services import load_document, save_document
from pagesmith.storage.store import LocalStore

logger = logging.getLogger(__name__)


class Editor:
    """Single owner of the in-memory content document."""

    def __init__(
        self,
        config: PagesmithConfig,
        *,
        store: LocalStore,
        default: Document,
        generator: ImageGenerator | None = None,
    ) -> None:
        self.config = config
        self.store = store
        self.default = default
        self.gate = SessionGate(store, default_credential=config.session.default_credential)
        self.generator = generator or ImageGenerator(
            config.generation.api_key,
            model=config.generation.model,
            image_size=config.generation.image_size,
        )
        self.language = Language.EN
        self._document = load_document(store, default)

    @classmethod
    def open(cls, config: PagesmithConfig | None = None) -> Editor:
        """Build an editor from config, loading any saved document.

        Without an explicit config, ``load_config`` reads .pagesmith.toml and
        the environment (including ``GOOGLE_AI_API_KEY``).
        """
        config = config or load_config()
        store = LocalStore(
            Path(config.storage.path),
            quota_bytes=config.storage.quota_bytes,
        )
        default = load_default_document(config.content.default_path or None)
        return cls(config, store=store, default=default)

    # ── Reading ──────────────────────────────────────────────────

    @property
    def document(self) -> Document:
        return self._document

    def read(self, path: Sequence[str | int]) -> Any:
        return get_at(self._document, path)

    def text(self, path: Sequence[str | int]) -> str:
        """Read a localized text field in the current language."""
        return localize(self.read(path), self.language)

    def set_language(self, language: Language | str) -> None:
        self.language = Language(language)

    # ── Mutation ─────────────────────────────────────────────────

    def apply(self, path: Sequence[str | int], value: Any) -> None:
        """Install ``value`` at ``path`` regardless of the gate."""
        self._document = update(self._document, path, value)

    def _require_editing(self) -> None:
        if not self.gate.is_editing:
            raise NotEditing("enter edit mode first")

    def edit(self, path: Sequence[str | int], value: Any) -> None:
        """Replace the value at ``path``; only allowed in edit mode."""
        self._require_editing()
        self.apply(path, value)

    def set_image(self, path: Sequence[str | int], image_file: Path) -> None:
        """Embed an image file as a data URI at ``path``."""
        self._require_editing()
        self.apply(
            path,
            read_image_file(image_file, max_bytes=self.config.content.max_upload_bytes),
        )

    def set_video(self, index: int, url: str) -> None:
        """Set a testimonial video link, normalising YouTube URLs.

        Blank input is ignored and the current link is kept.
        """
        self._require_editing()
        if not url.strip():
            return
        self.edit(["testimonials", "items", index, "url"], to_embed_url(url))

    async def generate(self, target: GenerationTarget = HERO_IMAGE) -> str:
        """Generate an image for ``target`` into the document."""
        self._require_editing()
        return await self.generator.generate(self, target)

    # ── Persistence ──────────────────────────────────────────────

    def save(self) -> None:
        """Persist the document, then leave edit mode if configured.

        StorageQuotaExceeded propagates with the document and the gate
        untouched.
        """
        save_document(self.store, self._document)
        if self.config.session.lock_on_save and self.gate.is_editing:
            self.gate.exit_edit_mode()

    # ── Export ───────────────────────────────────────────────────

    def export_text(self) -> str:
        return render_snapshot(self._document, default=self.default)

    def download(self, directory: Path) -> Path:
        return write_snapshot(
            self._document,
            directory,
            filename=self.config.export.filename,
            default=self.default,
        )

    def copy(self, writer: Callable[[str], object]) -> None:
        copy_snapshot(self._document, writer, default=self.default)
