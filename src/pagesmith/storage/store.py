"""JSON-backed local key/value store.

Holds a flat mapping of record name to string value in a single JSON
file, loaded on init.  Every write re-reads the file and applies only its own
key, so records written by another instance survive.  This plays the role
browser local storage plays for a static site: small, same-machine,
capacity-limited, no locking (last writer wins per record).
"""

from __future__ import annotations

import errno
import json
import logging
from pathlib import Path

from pagesmith.errors import StorageQuotaExceeded

logger = logging.getLogger(__name__)

STORE_FILENAME = ".pagesmith-store.json"
DEFAULT_QUOTA_BYTES = 5 * 1024 * 1024

# Record names
CONTENT_KEY = "site_content"
CREDENTIAL_KEY = "site_password"
ELEVATED_KEY = "is_admin"

_CAPACITY_ERRNOS = {errno.ENOSPC, errno.EDQUOT}


class LocalStore:
    """Durable string records persisted to one JSON file.

    Writes that would push the serialized file past ``quota_bytes`` are
    rejected with StorageQuotaExceeded and leave the store unchanged.
    """

    def __init__(self, path: Path, *, quota_bytes: int = DEFAULT_QUOTA_BYTES) -> None:
        self._path = path
        self.quota_bytes = quota_bytes
        self._records = self._load()

    @property
    def path(self) -> Path:
        return self._path

    # ── Private helpers ──────────────────────────────────────────

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("Corrupt local store at %s, starting fresh", self._path)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Local store at %s is not an object, starting fresh", self._path)
            return {}
        return {str(k): v for k, v in raw.items() if isinstance(v, str)}

    def _write(self, records: dict[str, str]) -> None:
        payload = json.dumps(records, indent=2, ensure_ascii=False)
        size = len(payload.encode("utf-8"))
        if size > self.quota_bytes:
            raise StorageQuotaExceeded(
                f"store would grow to {size} bytes (quota {self.quota_bytes})"
            )
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            if exc.errno in _CAPACITY_ERRNOS:
                raise StorageQuotaExceeded(str(exc)) from exc
            raise
        self._records = records

    # ── Public API ───────────────────────────────────────────────

    def get(self, key: str) -> str | None:
        """Return the stored value for ``key``, or None."""
        return self._records.get(key)

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, overwriting any prior value.

        Raises StorageQuotaExceeded if the write is rejected for capacity.
        """
        records = self._load()
        records[key] = value
        self._write(records)

    def remove(self, key: str) -> None:
        """Delete a record if present."""
        records = self._load()
        if key not in records:
            self._records = records
            return
        del records[key]
        self._write(records)

    def clear(self) -> None:
        """Delete every record."""
        self._write({})

    def keys(self) -> list[str]:
        return list(self._records)

    def __contains__(self, key: object) -> bool:
        return key in self._records
