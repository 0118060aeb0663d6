"""Shared pytest fixtures for cargo-3pl tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def make_crate(tmp_path: Path):
    """Create an extracted crate directory containing *files* (relative path -> text)."""

    def _make(name: str, version: str, files: dict[str, str] | None = None) -> Path:
        root = tmp_path / "registry" / f"{name}-{version}"
        root.mkdir(parents=True)
        (root / "Cargo.toml").write_text(f'[package]\nname = "{name}"\n')
        for rel, text in (files or {}).items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text)
        return root

    return _make
