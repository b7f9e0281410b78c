"""Directory tree creation tests."""

import logging
import os

import pytest

from pydgen import create_directory_tree

PROJECT_TREE = [
    "services",
    "services/monitoring",
    "services/monitoring/isAlive",
]


class TestCreateDirectoryTree:
    def test_creates_missing_tree(self, tmp_path):
        root = tmp_path / "generator" / "target"
        assert create_directory_tree(root, PROJECT_TREE, True) is True
        for entry in PROJECT_TREE:
            assert (root / entry).is_dir()

    def test_do_not_overwrite_existing_content(self, tmp_path, caplog):
        root = tmp_path / "toNotOverwrite"
        root.mkdir()
        marker = root / "keep.txt"
        marker.write_text("original")

        with caplog.at_level(logging.ERROR, logger="pydgen.tree"):
            assert create_directory_tree(root, PROJECT_TREE, False) is False

        assert marker.read_text() == "original"
        assert sorted(p.name for p in root.iterdir()) == ["keep.txt"]
        assert "already exists" in caplog.text

    def test_default_is_not_to_overwrite(self, tmp_path):
        assert create_directory_tree(tmp_path, PROJECT_TREE) is False
        assert not (tmp_path / "services").exists()

    def test_overwrite_existing_content(self, tmp_path):
        root = tmp_path / "toOverwrite"
        assert create_directory_tree(root, PROJECT_TREE, True) is True
        (root / "services" / "stale.txt").write_text("stale")

        assert create_directory_tree(root, PROJECT_TREE, True) is True
        assert not (root / "services" / "stale.txt").exists()
        assert (root / "services" / "monitoring" / "isAlive").is_dir()

    def test_overwrite_replaces_plain_file(self, tmp_path):
        root = tmp_path / "occupied"
        root.write_text("not a directory")
        assert create_directory_tree(root, ["services"], True) is True
        assert (root / "services").is_dir()

    @pytest.mark.skipif(not hasattr(os, "symlink") or os.name == "nt", reason="symlinks")
    def test_overwrite_symlink_root_keeps_link_target(self, tmp_path):
        real = tmp_path / "real"
        real.mkdir()
        (real / "precious.txt").write_text("keep")
        link = tmp_path / "link"
        link.symlink_to(real, target_is_directory=True)

        assert create_directory_tree(link, ["services"], True) is True
        assert (real / "precious.txt").read_text() == "keep"
        assert not link.is_symlink()
        assert (link / "services").is_dir()

    def test_relative_root_normalized(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert create_directory_tree("a/../b", ["services"], False) is True
        assert (tmp_path / "b" / "services").is_dir()
        assert not (tmp_path / "a").exists()

    def test_entries_created_in_order(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            create_directory_tree(tmp_path / "root", ["services/monitoring", "services"], True)

    def test_empty_tree_creates_root_only(self, tmp_path):
        root = tmp_path / "a" / "b"
        assert create_directory_tree(str(root), [], False) is True
        assert root.is_dir()
        assert list(root.iterdir()) == []
