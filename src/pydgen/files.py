"""Directory and file copy helpers."""

from __future__ import annotations

import logging
import os
import re
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from pydgen._constants import HIDDEN_PREFIX
from pydgen._errors import SourceNotFoundError, TargetExistsError

logger = logging.getLogger(__name__)

NameFilter = str | re.Pattern[str] | Callable[[str, str], bool]
"""Regex (searched in the entry name) or predicate ``(name, dir) -> bool``."""


@dataclass(frozen=True)
class CopyDirOptions:
    """Options of a :func:`copy_dir` operation.

    ``filter`` is a blacklist unless ``whitelist`` is set. ``include`` and
    ``exclude`` take precedence over ``filter`` when either is given.
    """

    source_base_dir: str | Path
    target_base_dir: str | Path
    dir_name: str | Path
    force_delete: bool = False
    exclude_hidden_unix: bool = False
    preserve_files: bool = False
    inflate_symlinks: bool = False
    filter: NameFilter | None = None
    whitelist: bool = False
    include: NameFilter | None = None
    exclude: NameFilter | None = None


def _matches(name_filter: NameFilter, name: str, directory: str) -> bool:
    if callable(name_filter):
        return name_filter(name, directory) is True
    return re.search(name_filter, name) is not None


def is_name_included(opts: CopyDirOptions, directory: str, name: str) -> bool:
    """Decide whether the entry ``name`` inside ``directory`` gets copied."""
    if opts.exclude_hidden_unix and name.startswith(HIDDEN_PREFIX):
        return False
    if opts.include is not None or opts.exclude is not None:
        if opts.exclude is not None and _matches(opts.exclude, name, directory):
            return False
        if opts.include is not None:
            return _matches(opts.include, name, directory)
        return True
    if opts.filter is not None:
        matched = _matches(opts.filter, name, directory)
        return matched if opts.whitelist else not matched
    return True


def _copy_preserving(src: str, dst: str) -> str:
    if os.path.lexists(dst):
        logger.debug("Keep existing file %s", dst)
        return dst
    return shutil.copy2(src, dst)


def copy_dir(opts: CopyDirOptions) -> Path:
    """Copy ``dir_name`` from the source base directory to the target one.

    Returns:
        The destination directory.

    Raises:
        SourceNotFoundError: If the source directory does not exist.
        TargetExistsError: If the destination exists and neither
            ``force_delete`` nor ``preserve_files`` is set.
    """
    source = Path(opts.source_base_dir, opts.dir_name).resolve()
    dest = Path(opts.target_base_dir, opts.dir_name).resolve()

    if not source.is_dir():
        raise SourceNotFoundError(
            "source directory not found",
            f"no such directory: {source}",
            path=source,
        )

    merge = False
    if dest.exists():
        if opts.force_delete:
            logger.info("Remove existing directory %s", dest)
            shutil.rmtree(dest)
        elif opts.preserve_files:
            merge = True
        else:
            raise TargetExistsError(
                "target directory already exists",
                f"{dest} exists; set force_delete or preserve_files to copy over it",
                path=dest,
            )

    def ignore(directory: str, names: list[str]) -> set[str]:
        skipped = {n for n in names if not is_name_included(opts, directory, n)}
        if merge:
            # copytree recreates links with os.symlink, bypassing copy_function
            target_dir = dest / os.path.relpath(directory, source)
            for n in names:
                existing = target_dir / n
                is_real_dir = existing.is_dir() and not existing.is_symlink()
                if os.path.lexists(existing) and not is_real_dir:
                    logger.debug("Keep existing entry %s", existing)
                    skipped.add(n)
        return skipped

    logger.info("Copy dir from %s to %s", source, dest)
    shutil.copytree(
        source,
        dest,
        symlinks=not opts.inflate_symlinks,
        ignore=ignore,
        copy_function=_copy_preserving if merge else shutil.copy2,
        dirs_exist_ok=merge,
    )
    return dest


def copy_file(
    file_name: str | Path,
    source_base_dir: str | Path,
    target_base_dir: str | Path,
) -> Path:
    """Copy one file between base directories, keeping its relative name."""
    source = Path(source_base_dir, file_name).resolve()
    dest = Path(target_base_dir, file_name).resolve()

    if not source.is_file():
        raise SourceNotFoundError(
            "source file not found",
            f"no such file: {source}",
            path=source,
        )

    logger.info("Copy file from %s to %s", source, dest)
    dest.write_bytes(source.read_bytes())
    return dest
