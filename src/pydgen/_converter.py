"""Deep markdown field conversion for nested documents."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydgen._renderer import Renderer, get_renderer
from pydgen._utils import (
    FieldPath,
    copy_document,
    deep_merge,
    dotted,
    get_path,
    has_path,
    iter_leaf_paths,
    set_path,
)

logger = logging.getLogger(__name__)


def get_props_deep(doc: Mapping[Any, Any]) -> list[str]:
    """Return the dot-joined path of every leaf in ``doc``."""
    return [dotted(path) for path in iter_leaf_paths(doc)]


def select_paths(doc: Mapping[Any, Any], md_props: Iterable[str]) -> list[FieldPath]:
    """Return the leaf paths of ``doc`` whose last key is in ``md_props``."""
    names = set(md_props)
    if not names:
        return []
    return [path for path in iter_leaf_paths(doc) if str(path[-1]) in names]


def convert_markdown(
    doc: Mapping[Any, Any],
    md_props: Iterable[str],
    *,
    renderer: Renderer | None = None,
    skip_non_strings: bool = False,
) -> dict[Any, Any]:
    """Convert every markdown field of ``doc`` to HTML.

    A field qualifies when it is a leaf (any non-mapping value) and its own
    key, ignoring its ancestors, is one of ``md_props``. Matching fields at
    every depth are rendered once each and merged over a deep copy of the
    document, so ``doc`` itself is never modified.

    Args:
        doc: The document to convert.
        md_props: Bare field names holding markdown text.
        renderer: Callable rendering markdown to HTML. Defaults to the
            CommonMark renderer.
        skip_non_strings: If True, qualifying fields whose value is not a
            str are left as they are. Otherwise they are handed to the
            renderer like any other value, and the default renderer raises
            TypeError for them.

    Returns:
        A copy of ``doc`` with the markdown fields replaced by HTML.

    Raises:
        Exception: Whatever the renderer raises, unchanged.
    """
    if renderer is None:
        renderer = get_renderer()

    overlay: dict[Any, Any] = {}
    rendered = 0
    for path in select_paths(doc, md_props):
        if not has_path(doc, path):
            continue
        value = get_path(doc, path)
        if skip_non_strings and not isinstance(value, str):
            logger.debug("Skip non-string markdown field %s", dotted(path))
            continue
        set_path(overlay, path, renderer(value))
        rendered += 1

    logger.debug("Rendered %d markdown field(s)", rendered)
    return deep_merge(copy_document(doc), overlay)
