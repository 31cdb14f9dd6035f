"""Locate the XMP or JSON sidecar that accompanies a media file."""

from __future__ import annotations

import glob
import os
from typing import Callable

IsMedia = Callable[[str], bool]


def sidecar_pattern(ext: str) -> str:
    """A glob pattern matching the extension in any letter case, e.g. ".xmp" -> ".[xX][mM][pP]"."""
    parts = []
    for char in ext:
        if char == ".":
            parts.append(".")
        else:
            parts.append(f"[{char.lower()}{char.upper()}]")
    return "".join(parts)


def _first_match(base: str, pattern: str) -> str | None:
    matches = sorted(glob.glob(glob.escape(base) + pattern))
    return matches[0] if matches else None


def _extension(name: str) -> str:
    base = os.path.basename(name)
    dot = base.rfind(".")
    return base[dot:] if dot >= 0 else ""


def find_sidecar(name: str | os.PathLike, ext: str, is_media: IsMedia) -> str | None:
    """Path of the sidecar with extension ext for the file name, or None.

    The sidecar is looked for first as name + ext (photo.jpg.xmp), then, when the
    file has a media extension, with that extension replaced (photo.xmp).
    The extension is matched regardless of letter case.
    """
    name = os.fspath(name)
    pattern = sidecar_pattern(ext)

    found = _first_match(name, pattern)
    if found is not None:
        return found

    media_ext = _extension(name)
    if not is_media(media_ext):
        return None
    return _first_match(name[: len(name) - len(media_ext)], pattern)