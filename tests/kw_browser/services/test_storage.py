from __future__ import annotations

import pytest

from kw_browser.services.storage import LocalFileSystemStorage


def test_write_exists_list(tmp_path):
    storage = LocalFileSystemStorage(tmp_path / "root")

    storage.write_text("one.txt", "semrush;1\n")
    storage.write_text("two.csv", "x")

    assert storage.exists("one.txt")
    assert not storage.exists("three.txt")
    assert (tmp_path / "root" / "one.txt").read_text(encoding="utf-8") == "semrush;1\n"
    assert storage.list_files(suffix=".txt") == ["one.txt"]
    assert storage.list_files() == ["one.txt", "two.csv"]


def test_path_traversal_is_denied(tmp_path):
    storage = LocalFileSystemStorage(tmp_path / "root")
    with pytest.raises(ValueError):
        storage.write_text("../outside.txt", "x")


def test_sibling_prefix_directory_is_denied(tmp_path):
    storage = LocalFileSystemStorage(tmp_path / "root")
    with pytest.raises(ValueError):
        storage.exists("../root-other/file.txt")


def test_nested_paths_are_denied(tmp_path):
    storage = LocalFileSystemStorage(tmp_path / "root")
    with pytest.raises(ValueError):
        storage.write_text("a/one.txt", "x")
