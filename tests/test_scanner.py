"""Tests for the license directory scanner."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from cargo_3pl.scanner import scan


class TestScan:
    def test_nonexistent_directory(self, tmp_path):
        assert scan(tmp_path / "missing") == []

    def test_empty_directory(self, tmp_path):
        assert scan(tmp_path) == []

    def test_file_instead_of_directory(self, tmp_path):
        f = tmp_path / "LICENSE"
        f.write_text("MIT")
        assert scan(f) == []

    def test_recursive_and_sorted(self, tmp_path):
        (tmp_path / "sub").mkdir()
        (tmp_path / "LICENSE.txt").write_text("a")
        (tmp_path / "sub" / "NOTICE.md").write_text("b")
        (tmp_path / "sub" / "readme.txt").write_text("c")

        assert scan(tmp_path) == [
            tmp_path / "LICENSE.txt",
            tmp_path / "sub" / "NOTICE.md",
        ]

    def test_results_sorted_regardless_of_creation_order(self, tmp_path):
        for name in ("LICENSE-MIT", "COPYING", "LICENSE-APACHE"):
            (tmp_path / name).write_text(name)
        assert [p.name for p in scan(tmp_path)] == ["COPYING", "LICENSE-APACHE", "LICENSE-MIT"]

    def test_directories_named_like_licenses_are_descended(self, tmp_path):
        licenses = tmp_path / "LICENSES"
        licenses.mkdir()
        (licenses / "MIT.txt").write_text("mit")
        (licenses / "LICENSE-BSD").write_text("bsd")
        assert scan(tmp_path) == [licenses / "LICENSE-BSD"]

    def test_match_all_collects_every_file(self, tmp_path):
        (tmp_path / "nested").mkdir()
        (tmp_path / "COPYRIGHT").write_text("x")
        (tmp_path / "nested" / "mit.html").write_text("y")
        assert scan(tmp_path, match_all=True) == [
            tmp_path / "COPYRIGHT",
            tmp_path / "nested" / "mit.html",
        ]

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlink_cycle_terminates(self, tmp_path):
        pkg = tmp_path / "pkg"
        pkg.mkdir()
        (pkg / "LICENSE").write_text("x")
        (pkg / "loop").symlink_to(pkg, target_is_directory=True)
        assert scan(pkg) == [pkg / "LICENSE"]

    def test_read_error_propagates(self, tmp_path):
        with patch("cargo_3pl.scanner.os.scandir", side_effect=PermissionError("denied")):
            with pytest.raises(PermissionError):
                scan(tmp_path)

    def test_returns_absolute_paths_under_root(self, tmp_path):
        (tmp_path / "LICENSE").write_text("x")
        result = scan(tmp_path)
        assert all(isinstance(p, Path) and p.is_absolute() for p in result)
