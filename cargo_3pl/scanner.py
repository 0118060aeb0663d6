"""License directory scanner — walk a source tree collecting license files."""

from __future__ import annotations

import os
from pathlib import Path

import structlog

from cargo_3pl.matcher import is_license_filename

log = structlog.get_logger("cargo_3pl.scanner")


def scan(directory: Path, *, match_all: bool = False) -> list[Path]:
    """Return every license file under *directory*, sorted by path.

    A missing directory (or a path that is not a directory) yields an empty
    list.  With *match_all* every regular file is collected regardless of
    its name.  Errors while listing a directory propagate.
    """
    root = Path(directory)
    if not root.is_dir():
        return []

    found: list[Path] = []
    seen: set[str] = set()
    stack: list[Path] = [root]
    while stack:
        current = stack.pop()
        real = os.path.realpath(current)
        if real in seen:
            log.debug("scanner.cycle_skipped", directory=str(current))
            continue
        seen.add(real)

        with os.scandir(current) as it:
            entries = sorted(it, key=lambda e: e.name)
        subdirs: list[Path] = []
        for entry in entries:
            path = current / entry.name
            if entry.is_dir():
                subdirs.append(path)
            elif match_all or is_license_filename(entry.name):
                found.append(path)
        # Reversed so the lexicographically first child is visited first
        stack.extend(reversed(subdirs))

    found.sort()
    log.debug("scanner.done", directory=str(root), count=len(found))
    return found
