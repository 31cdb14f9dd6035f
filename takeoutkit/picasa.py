"""Album name and description from a Picasa .picasa.ini file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable


class PicasaError(ValueError):
    """A Picasa ini file could not be parsed."""


@dataclass(frozen=True)
class PicasaAlbum:
    """The album described by a Picasa ini file."""

    name: str = ""
    description: str = ""


def parse_picasa_ini(stream: Iterable[str]) -> PicasaAlbum:
    """Parse the lines of a Picasa ini file, reading only its [Picasa] section."""
    section = ""
    name = ""
    description = ""
    for raw in stream:
        line = raw.strip()
        if not line or line.startswith((";", "#")):
            continue
        if line.startswith("[") and line.endswith("]"):
            section = line[1:-1]
            continue
        if section != "Picasa":
            continue
        key, sep, value = line.partition("=")
        if not sep:
            raise PicasaError("invalid line: " + line)
        key, value = key.strip(), value.strip()
        if key == "name":
            name = value
        elif key == "description":
            description = value
    return PicasaAlbum(name=name, description=description)


def read_picasa_ini(path: str | os.PathLike) -> PicasaAlbum:
    """Read and parse a Picasa ini file."""
    with open(path, encoding="utf-8") as stream:
        try:
            return parse_picasa_ini(stream)
        except PicasaError as err:
            raise PicasaError(f"error parsing picasa ini file: {err}") from err