"""Filename heuristics for license files."""

from __future__ import annotations

from pathlib import PurePath

_NAME_MARKERS = ("license", "licence", "notice", "copying")
_EXTENSIONS = frozenset({"", "txt", "md"})


def is_license_filename(path: str | PurePath) -> bool:
    """Return True if *path* looks like a license file.

    The lowercased stem must contain one of the marker words and the
    lowercased extension must be empty, ``txt`` or ``md``.  Substring
    matching is intentional: ``LICENSE-MIT.txt`` and ``unlicensed.txt``
    both match.
    """
    p = PurePath(path)
    stem = p.stem.lower()
    ext = p.suffix[1:].lower()
    return ext in _EXTENSIONS and any(marker in stem for marker in _NAME_MARKERS)
