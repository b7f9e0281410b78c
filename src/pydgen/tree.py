"""Project directory tree creation."""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def create_directory_tree(
    root_dir_name: str | Path,
    project_tree: Iterable[str | Path],
    remove_if_exist: bool = False,
) -> bool:
    """Create a directory tree below ``root_dir_name``.

    Each entry of ``project_tree`` is created in order, relative to the root,
    and without creating missing parents: list a parent before its children.

    Args:
        root_dir_name: Root directory of the tree.
        project_tree: Directories to create below the root.
        remove_if_exist: If the root already exists, remove it first when
            True, or give up without touching anything when False.

    Returns:
        True if the tree was created, False if the root exists and
        ``remove_if_exist`` is False.

    Raises:
        FileNotFoundError: If an entry's parent was not created before it.
    """
    root = Path(os.path.abspath(root_dir_name))

    if os.path.lexists(root):
        logger.error("Directory already exists: %s", root)
        if not remove_if_exist:
            return False
        logger.info("Remove existing directory %s", root)
        if root.is_dir() and not root.is_symlink():
            shutil.rmtree(root)
        else:
            root.unlink()

    root.mkdir(parents=True)
    for entry in project_tree:
        target = root / entry
        logger.info("Create %s", target)
        target.mkdir()
    return True
