"""Text and structured data file helpers.

Loads YAML and JSON documents, finds files by pattern, and reads or writes
plain text files. Used by the template processor and handy for feeding
:func:`pydgen.convert_markdown` with documents kept on disk.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml

from pydgen._constants import JSON_SUFFIXES, TEXT_ENCODING, YAML_SUFFIXES
from pydgen._errors import DataFileError, SourceNotFoundError
from pydgen._utils import deep_merge

__all__ = [
    "find_files",
    "load_data",
    "load_data_file",
    "load_text_file",
    "merge_text_files_by_file_name",
    "save_text_file",
]

logger = logging.getLogger(__name__)


def load_text_file(path: str | Path) -> str:
    file_path = Path(path)
    if not file_path.is_file():
        raise SourceNotFoundError(
            "text file not found",
            f"no such file: {file_path.resolve()}",
            path=file_path,
        )
    return file_path.read_text(encoding=TEXT_ENCODING)


def save_text_file(path: str | Path, content: str) -> None:
    """Write ``content`` to ``path``, creating parent directories."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding=TEXT_ENCODING)


def find_files(base_path: str | Path, pattern: str | re.Pattern[str] = r".*") -> list[Path]:
    """Find regular files under ``base_path`` matching ``pattern``.

    The pattern is searched in each file's path relative to ``base_path``,
    written with forward slashes. Results are sorted.
    """
    base = Path(base_path)
    if not base.is_dir():
        raise SourceNotFoundError(
            "directory not found",
            f"no such directory: {base.resolve()}",
            path=base,
        )
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    return sorted(
        p for p in base.rglob("*")
        if p.is_file() and regex.search(p.relative_to(base).as_posix())
    )


def merge_text_files_by_file_name(paths: Iterable[str | Path]) -> dict[str, str]:
    """Map each file path to its text content."""
    return {str(p): load_text_file(p) for p in paths}


def load_data_file(path: str | Path) -> dict[str, Any]:
    """Load one YAML or JSON file holding a mapping.

    Raises:
        SourceNotFoundError: If the file does not exist.
        DataFileError: If the file has an unsupported suffix, cannot be
            parsed, or its top-level value is not a mapping.
    """
    file_path = Path(path)
    suffix = file_path.suffix.lower()
    if suffix not in YAML_SUFFIXES and suffix not in JSON_SUFFIXES:
        raise DataFileError(
            f"unsupported data file format: {suffix or '<none>'}",
            f"cannot load {file_path}: expected one of "
            f"{', '.join(sorted(YAML_SUFFIXES | JSON_SUFFIXES))}",
            path=file_path,
        )

    text = load_text_file(file_path)
    try:
        if suffix in YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text) if text.strip() else None
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise DataFileError(
            "data file could not be parsed",
            f"failed to parse {file_path}: {e}",
            wrapped=e,
            path=file_path,
        ) from e

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise DataFileError(
            "data file must contain a mapping",
            f"{file_path} holds a top-level {type(data).__name__}",
            path=file_path,
        )
    return dict(data)


def load_data(paths: Iterable[str | Path]) -> dict[str, Any]:
    """Load data files and deep-merge them in order; later files win."""
    result: dict[str, Any] = {}
    for p in paths:
        logger.debug("Load data file %s", p)
        deep_merge(result, load_data_file(p))
    return result
