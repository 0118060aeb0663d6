"""Terminal coloring for warnings and errors."""

from __future__ import annotations

import os
from typing import IO

COLOR_CHOICES = ("auto", "always", "never")

_CODES = {
    "warning": 33,
    "error": 31,
}


def colorize(text: str, level: str, enabled: bool) -> str:
    """Wrap *text* in the ANSI color for *level* when *enabled*."""
    if not enabled:
        return text
    return f"\x1b[{_CODES[level]}m{text}\x1b[0m"


def color_enabled(policy: str, stream: IO) -> bool:
    """Decide whether escape codes should be written to *stream*.

    ``auto`` colors only interactive terminals and honours ``NO_COLOR``.
    """
    if policy == "always":
        return True
    if policy == "never":
        return False
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())
