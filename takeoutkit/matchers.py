"""Rules that pair a takeout JSON sidecar name with a media file name."""

from __future__ import annotations

import re
from typing import Callable

IsMedia = Callable[[str], bool]

SUPPLEMENTAL = "supplemental-metadata"
TRUNCATED_LENGTH = 46

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _ext(name: str) -> str:
    dot = name.rfind(".")
    return name[dot:] if dot > name.rfind("/") else ""


def _trim_ext(name: str) -> str:
    ext = _ext(name)
    return name[: len(name) - len(ext)] if ext else name


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def get_file_index(name: str) -> tuple[str, str]:
    """Split a trailing "(n)" duplicate index out of a name; returns (name without it, index)."""
    open_pos = name.rfind("(")
    if open_pos >= 0:
        close_pos = name.rfind(")")
        if close_pos > open_pos:
            index = name[open_pos + 1 : close_pos]
            if _INTEGER.fullmatch(index):
                return name[:open_pos] + name[close_pos + 1 :], index
    return name, ""


def match_fast_track(json_name: str, file_name: str, is_media: IsMedia) -> bool:
    """The file is named exactly after the JSON."""
    return _trim_ext(json_name) == file_name


def match_normal(json_name: str, file_name: str, is_media: IsMedia) -> bool:
    """Same duplicate index, optional supplemental-metadata part, and 46-character truncation."""
    file_name, file_index = get_file_index(file_name)
    json_name, json_index = get_file_index(json_name)
    if file_index != json_index:
        return False

    last = json_name.rfind(".")
    if last >= 0 and _byte_len(json_name[:last]) > 1:
        previous = json_name[:last].rfind(".")
        if previous >= 0 and _byte_len(json_name[:previous]) > 1:
            if SUPPLEMENTAL.startswith(json_name[previous + 1 : last]):
                json_name = json_name[:previous] + json_name[last:]

    json_name = _trim_ext(json_name)
    if json_name == file_name:
        return True

    if _byte_len(file_name) > TRUNCATED_LENGTH:
        if len(file_name) > TRUNCATED_LENGTH:
            return file_name[:TRUNCATED_LENGTH] == json_name
        return _trim_ext(file_name)[:-1] == json_name
    return False


def match_forgotten_duplicates(json_name: str, file_name: str, is_media: IsMedia) -> bool:
    """The file name extends the JSON name by fewer than 10 characters."""
    json_name = _trim_ext(json_name)
    file_name = _trim_ext(file_name)
    return file_name.startswith(json_name) and len(file_name) - len(json_name) < 10


def match_edited_name(json_name: str, file_name: str, is_media: IsMedia) -> bool:
    """An edited copy whose name starts with the original's, such as IMG-edited.jpg."""
    if get_file_index(file_name)[1]:
        return False
    base = _trim_ext(json_name)
    dot = base.rfind(".")
    if dot >= 0 and _byte_len(base[:dot]) > 1 and SUPPLEMENTAL.startswith(base[dot + 1 :]):
        base = json_name[:dot]

    ext = _ext(base)
    if ext and is_media(ext):
        base = _trim_ext(base)
        file_name = _trim_ext(file_name)
    return file_name.startswith(base)


MATCHERS: tuple[tuple[str, Callable[[str, str, IsMedia], bool]], ...] = (
    ("matchFastTrack", match_fast_track),
    ("matchNormal", match_normal),
    ("matchForgottenDuplicates", match_forgotten_duplicates),
    ("matchEditedName", match_edited_name),
)


def find_matcher(json_name: str, file_name: str, is_media: IsMedia) -> str | None:
    """Name of the first rule, most common first, that pairs the two names, or None."""
    for name, matcher in MATCHERS:
        if matcher(json_name, file_name, is_media):
            return name
    return None