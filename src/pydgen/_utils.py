"""Path helpers for walking and updating nested documents."""

from __future__ import annotations

import copy
from collections.abc import Hashable, Iterator, Mapping, MutableMapping
from typing import Any

from pydgen._constants import PATH_SEPARATOR

FieldPath = tuple[Hashable, ...]
"""Keys from the document root down to a leaf."""

_MISSING = object()


def iter_leaf_paths(doc: Mapping[Any, Any], prefix: FieldPath = ()) -> Iterator[FieldPath]:
    """Yield the path of every leaf in ``doc``, depth first.

    Only mappings are descended into. Sequences and primitives are leaves,
    and an empty mapping contributes no path at all.
    """
    for key, value in doc.items():
        path = (*prefix, key)
        if isinstance(value, Mapping):
            yield from iter_leaf_paths(value, path)
        else:
            yield path


def copy_document(doc: Mapping[Any, Any]) -> dict[Any, Any]:
    """Return an independent copy of ``doc`` with every mapping turned into a dict.

    Read-only mappings such as ``MappingProxyType`` are copied too; leaf
    values are deep-copied.
    """
    return {
        key: copy_document(value) if isinstance(value, Mapping) else copy.deepcopy(value)
        for key, value in doc.items()
    }


def dotted(path: FieldPath) -> str:
    return PATH_SEPARATOR.join(str(key) for key in path)


def get_path(doc: Mapping[Any, Any], path: FieldPath, default: Any = None) -> Any:
    node: Any = doc
    for key in path:
        if not isinstance(node, Mapping) or key not in node:
            return default
        node = node[key]
    return node


def has_path(doc: Mapping[Any, Any], path: FieldPath) -> bool:
    return get_path(doc, path, _MISSING) is not _MISSING


def set_path(doc: MutableMapping[Any, Any], path: FieldPath, value: Any) -> None:
    """Set ``value`` at ``path``, creating intermediate dicts as needed."""
    if not path:
        raise ValueError("path cannot be empty")
    node = doc
    for key in path[:-1]:
        child = node.get(key)
        if not isinstance(child, MutableMapping):
            child = {}
            node[key] = child
        node = child
    node[path[-1]] = value


def deep_merge(base: MutableMapping[Any, Any], overlay: Mapping[Any, Any]) -> MutableMapping[Any, Any]:
    """Merge ``overlay`` into ``base`` key by key and return ``base``.

    Nested mappings are merged recursively; any other overlay value,
    sequences included, replaces the base value outright.
    """
    for key, value in overlay.items():
        current = base.get(key)
        if isinstance(value, Mapping) and isinstance(current, MutableMapping):
            deep_merge(current, value)
        elif isinstance(value, Mapping):
            seed = dict(current) if isinstance(current, Mapping) else {}
            base[key] = deep_merge(seed, value)
        else:
            base[key] = value
    return base
