"""Tests for the directory size scanner."""
from __future__ import annotations

import os
from pathlib import Path

import pytest

from conftest import write_sized_file
from sizeplot.utils.exceptions import ScanException
from sizeplot.utils.file_io.size_scanner import iter_file_sizes


class TestIterFileSizes:
    """Tests for iter_file_sizes."""

    def test_collects_files_above_threshold_recursively(self, sized_tree: Path):
        assert sorted(iter_file_sizes(sized_tree)) == [5000, 8192, 12000, 20000]

    def test_threshold_is_exclusive(self, tmp_path: Path):
        write_sized_file(tmp_path / "at.bin", 4096)
        write_sized_file(tmp_path / "above.bin", 4097)

        assert list(iter_file_sizes(tmp_path)) == [4097]

    def test_custom_threshold(self, sized_tree: Path):
        assert sorted(iter_file_sizes(sized_tree, min_size=0)) == [10, 4096, 5000, 8192, 12000, 20000]

    def test_is_lazy(self, sized_tree: Path):
        sizes = iter_file_sizes(sized_tree)

        assert iter(sizes) is sizes
        assert next(sizes) in {5000, 8192, 12000, 20000}

    def test_empty_directory_yields_nothing(self, tmp_path: Path):
        assert list(iter_file_sizes(tmp_path)) == []

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_symlinks_are_not_counted(self, tmp_path: Path):
        target = write_sized_file(tmp_path / "outside" / "big.bin", 9000)
        root = tmp_path / "root"
        root.mkdir()
        try:
            os.symlink(target, root / "link.bin")
            os.symlink(target.parent, root / "linkdir", target_is_directory=True)
        except OSError:
            pytest.skip("cannot create symlinks here")

        assert list(iter_file_sizes(root)) == []

    def test_missing_root_raises(self, tmp_path: Path):
        with pytest.raises(ScanException):
            list(iter_file_sizes(tmp_path / "missing"))

    def test_file_root_raises(self, tmp_path: Path):
        path = write_sized_file(tmp_path / "file.bin", 5000)

        with pytest.raises(ScanException):
            list(iter_file_sizes(path))
