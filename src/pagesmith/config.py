"""Unified configuration loaded from .pagesmith.toml and env vars.

Loading order: defaults → TOML file → env vars.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

from pagesmith.assets.models import DEFAULT_MODEL
from pagesmith.content.media import MAX_UPLOAD_BYTES
from pagesmith.export.services import EXPORT_FILENAME
from pagesmith.session.models import DEFAULT_CREDENTIAL
from pagesmith.storage.store import DEFAULT_QUOTA_BYTES, STORE_FILENAME

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".pagesmith.toml"
CONFIG_SEARCH_PATHS = [
    Path("."),
]
GLOBAL_CONFIG = Path.home() / ".config" / "pagesmith" / "config.toml"


class StorageConfig(BaseModel):
    """[storage] section."""

    path: str = f"./{STORE_FILENAME}"
    quota_bytes: int = DEFAULT_QUOTA_BYTES


class SessionConfig(BaseModel):
    """[session] section."""

    default_credential: str = DEFAULT_CREDENTIAL
    lock_on_save: bool = True


class ContentConfig(BaseModel):
    """[content] section."""

    default_path: str = ""
    max_upload_bytes: int = MAX_UPLOAD_BYTES


class GenerationConfig(BaseModel):
    """[generation] section."""

    api_key: str = ""
    model: str = DEFAULT_MODEL
    # None lets each generation target choose its own size
    image_size: str | None = None


class ExportConfig(BaseModel):
    """[export] section."""

    filename: str = EXPORT_FILENAME


class PagesmithConfig(BaseModel):
    """Top-level configuration for the content engine."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)
    content: ContentConfig = Field(default_factory=ContentConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)


def load_config(path: str | Path | None = None) -> PagesmithConfig:
    """Load configuration from a TOML file.

    Search order:
    1. Explicit path (if provided)
    2. .pagesmith.toml in CWD
    3. ~/.config/pagesmith/config.toml

    Then overlay environment variables.

    Args:
        path: Explicit path to a TOML file.

    Returns:
        Merged PagesmithConfig.
    """
    data: dict[str, object] = {}

    if path is not None:
        toml_path = Path(path)
        if toml_path.exists():
            data = _load_toml(toml_path)
        else:
            logger.warning("Config file not found: %s", toml_path)
    else:
        for search_dir in CONFIG_SEARCH_PATHS:
            candidate = search_dir / CONFIG_FILENAME
            if candidate.exists():
                data = _load_toml(candidate)
                logger.info("Loaded config from %s", candidate)
                break
        if not data and GLOBAL_CONFIG.exists():
            data = _load_toml(GLOBAL_CONFIG)
            logger.info("Loaded config from %s", GLOBAL_CONFIG)

    config = PagesmithConfig.model_validate(data) if data else PagesmithConfig()

    return _apply_env_vars(config)


def _load_toml(path: Path) -> dict[str, object]:
    """Load a TOML file and return the data dict."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as exc:
        logger.warning("Failed to parse %s: %s", path, exc)
        return {}


def _apply_env_vars(config: PagesmithConfig) -> PagesmithConfig:
    """Apply environment variable overrides to config."""
    data = config.model_dump()

    env_mapping: dict[str, tuple[str, str]] = {
        "PAGESMITH_STORE_PATH": ("storage", "path"),
        "PAGESMITH_DEFAULT_CONTENT": ("content", "default_path"),
        "GOOGLE_AI_API_KEY": ("generation", "api_key"),
        "IMAGE_MODEL": ("generation", "model"),
    }

    for env_var, (section, field) in env_mapping.items():
        value = os.environ.get(env_var)
        if value is not None:
            data[section][field] = value

    quota_raw = os.environ.get("PAGESMITH_STORAGE_QUOTA")
    if quota_raw is not None:
        try:
            data["storage"]["quota_bytes"] = int(quota_raw)
        except ValueError:
            logger.warning("Ignoring non-integer PAGESMITH_STORAGE_QUOTA=%r", quota_raw)

    return PagesmithConfig.model_validate(data)
