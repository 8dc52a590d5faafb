"""Export domain — portable snapshots of the content document."""

from pagesmith.export.services import (
    EXPORT_FILENAME,
    copy_snapshot,
    render_snapshot,
    write_snapshot,
)

__all__ = [
    "EXPORT_FILENAME",
    "copy_snapshot",
    "render_snapshot",
    "write_snapshot",
]
