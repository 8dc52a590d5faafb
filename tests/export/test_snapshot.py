"""Tests for snapshot export."""

import copy
import json
from pathlib import Path

import pytest
from pagesmith.content.defaults import load_default_document
from pagesmith.content.paths import update
from pagesmith.errors import SnapshotInvalid
from pagesmith.export.services import (
    EXPORT_FILENAME,
    copy_snapshot,
    render_snapshot,
    write_snapshot,
)


class TestRenderSnapshot:
    def test_is_deterministic(self, default_doc):
        assert render_snapshot(default_doc) == render_snapshot(copy.deepcopy(default_doc))

    def test_parses_back_to_document(self, default_doc):
        assert json.loads(render_snapshot(default_doc)) == default_doc

    def test_keeps_unicode_readable(self, default_doc):
        assert "个人背景" in render_snapshot(default_doc)

    def test_indented_with_trailing_newline(self, default_doc):
        text = render_snapshot(default_doc)
        assert text.startswith('{\n  "hero_image"')
        assert text.endswith("}\n")


class TestWriteSnapshot:
    def test_writes_fixed_filename(self, tmp_path: Path, default_doc):
        path = write_snapshot(default_doc, tmp_path)
        assert path == tmp_path / EXPORT_FILENAME
        assert path.read_text(encoding="utf-8") == render_snapshot(default_doc)

    def test_custom_filename(self, tmp_path: Path, default_doc):
        path = write_snapshot(default_doc, tmp_path / "out", filename="site.json")
        assert path.name == "site.json"
        assert path.exists()

    def test_reloads_as_default(self, tmp_path: Path, default_doc):
        edited = update(default_doc, ["hero", "title", "en"], "New Title")
        edited = update(edited, ["testimonials", "items", 0, "url"], "https://example.com/v")

        path = write_snapshot(edited, tmp_path)
        assert load_default_document(path) == edited


class TestCopySnapshot:
    def test_passes_rendering_to_writer(self, default_doc):
        received: list[str] = []
        copy_snapshot(default_doc, received.append)
        assert received == [render_snapshot(default_doc)]


class TestLegacySnapshot:
    def _legacy(self, default_doc) -> dict:
        legacy = copy.deepcopy(default_doc)
        del legacy["hero"]["cta"]
        legacy["retired_section"] = {"note": "old"}
        return legacy

    def test_rejected_without_default(self, default_doc):
        with pytest.raises(SnapshotInvalid):
            render_snapshot(self._legacy(default_doc))

    def test_failed_write_leaves_no_file(self, tmp_path: Path, default_doc):
        with pytest.raises(SnapshotInvalid):
            write_snapshot(self._legacy(default_doc), tmp_path / "out")
        assert not (tmp_path / "out").exists()

    def test_filled_from_default_reloads(self, tmp_path: Path, default_doc):
        legacy = self._legacy(default_doc)
        legacy["hero"]["title"]["en"] = "Legacy Title"

        path = write_snapshot(legacy, tmp_path, default=default_doc)
        reloaded = load_default_document(path)

        assert reloaded["hero"]["cta"] == default_doc["hero"]["cta"]
        assert reloaded["hero"]["title"]["en"] == "Legacy Title"
        assert "retired_section" not in reloaded

    def test_copy_uses_default(self, default_doc):
        received: list[str] = []
        copy_snapshot(self._legacy(default_doc), received.append, default=default_doc)
        assert json.loads(received[0])["hero"]["cta"] == default_doc["hero"]["cta"]
