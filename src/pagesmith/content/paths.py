"""Path-addressed reads and copy-on-write updates of a document tree.

A path is a sequence of segments walked from the document root: ``str``
keys step into mappings and ``int`` indices step into lists.  For example
``["about", "timeline", 2, "title", "en"]``.

``update`` deep-copies the whole document before patching it, so any
reference a caller holds to the previous version stays valid.
"""

from __future__ import annotations

import copy
from collections.abc import Sequence
from typing import Any

from pagesmith.errors import PathNotFound

Segment = str | int
DocPath = Sequence[Segment]


def _step(node: Any, segment: Segment, path: DocPath, position: int) -> Any:
    """Resolve one segment against ``node`` or raise PathNotFound."""
    if isinstance(node, dict):
        if isinstance(segment, str) and segment in node:
            return node[segment]
    elif isinstance(node, list):
        # bool is an int subclass; never treat True/False as an index
        if isinstance(segment, int) and not isinstance(segment, bool):
            if 0 <= segment < len(node):
                return node[segment]
    raise PathNotFound(path, position)


def _walk(document: Any, path: DocPath, stop: int) -> Any:
    node = document
    for position in range(stop):
        node = _step(node, path[position], path, position)
    return node


def get_at(document: Any, path: DocPath) -> Any:
    """Return the value at ``path``; the empty path returns the document."""
    return _walk(document, path, len(path))


def update(document: Any, path: DocPath, value: Any) -> Any:
    """Return a copy of ``document`` with the location at ``path`` replaced.

    The input document is never mutated and no intermediate structure is
    created: every segment, including the last, must already resolve.

    Raises:
        ValueError: If ``path`` is empty.
        PathNotFound: If any segment does not resolve.
    """
    if len(path) == 0:
        raise ValueError("path must contain at least one segment")

    # Resolve the whole path before copying
    _walk(document, path, len(path))

    new_document = copy.deepcopy(document)
    target = _walk(new_document, path, len(path) - 1)
    target[path[-1]] = copy.deepcopy(value)
    return new_document
