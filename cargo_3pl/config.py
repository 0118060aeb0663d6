"""Run configuration for cargo-3pl."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from cargo_3pl.color import COLOR_CHOICES
from cargo_3pl.metadata import MetadataOptions


def default_color() -> str:
    """Color policy from ``CARGO_3PL_COLOR``; unset or unrecognized values mean ``auto``."""
    value = os.environ.get("CARGO_3PL_COLOR", "").strip().lower()
    return value if value in COLOR_CHOICES else "auto"


@dataclass(frozen=True)
class ReportOptions:
    metadata: MetadataOptions = field(default_factory=MetadataOptions)
    require_files: bool = False
    source: Path | None = None
    show_url: bool = False
    color: str = "auto"
