"""Shared fixtures for pagesmith tests."""

from pathlib import Path

import pytest
from pagesmith.content.defaults import load_default_document
from pagesmith.storage.store import LocalStore


@pytest.fixture
def default_doc() -> dict:
    return load_default_document()


@pytest.fixture
def store(tmp_path: Path) -> LocalStore:
    return LocalStore(tmp_path / "store.json")
