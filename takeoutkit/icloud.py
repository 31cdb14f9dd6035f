"""Albums and original creation dates from an iCloud takeout's CSV files."""

from __future__ import annotations

import csv
import os
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone


class ICloudError(ValueError):
    """An iCloud takeout CSV file could not be used."""


@dataclass
class ICloudMeta:
    """What the takeout says about one file: its albums and its original creation date."""

    albums: list[str] = field(default_factory=list)
    original_creation_date: datetime | None = None


_WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
_MONTHS = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)
_DATE = re.compile(
    r"(?P<weekday>[A-Za-z]+) (?P<month>[A-Za-z]+) (?P<day>\d{1,2}),(?P<year>\d{4}) "
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2}) (?P<half>AM|PM) GMT"
)


def _parse_creation_date(text: str) -> datetime:
    match = _DATE.fullmatch(text)
    if not match or match["weekday"].lower() not in _WEEKDAYS or match["month"].lower() not in _MONTHS:
        raise ValueError(f"cannot parse date {text!r}")
    hour = int(match["hour"])
    if hour > 23:
        raise ValueError(f"hour out of range in {text!r}")
    if match["half"] == "PM" and hour < 12:
        hour += 12
    elif match["half"] == "AM" and hour == 12:
        hour = 0
    return datetime(
        int(match["year"]),
        _MONTHS.index(match["month"].lower()) + 1,
        int(match["day"]),
        hour,
        int(match["minute"]),
        tzinfo=timezone.utc,
    )


def _read_records(path: str | os.PathLike) -> list[list[str]]:
    with open(path, newline="", encoding="utf-8") as stream:
        try:
            records = [row for row in csv.reader(stream) if row]
        except csv.Error as err:
            raise ICloudError("failed to read all csv records") from err
    if any(len(row) != len(records[0]) for row in records):
        raise ICloudError("failed to read all csv records")
    return records


def _album_name(path: str | os.PathLike) -> str:
    base = os.path.basename(os.fspath(path))
    dot = base.rfind(".")
    return base[:dot] if dot >= 0 else base


def use_icloud_album(metas: dict[str, ICloudMeta], path: str | os.PathLike) -> str:
    """Record the album listed in a CSV file (named after the album) and return its name."""
    album = _album_name(path)
    for record in _read_records(path)[1:]:
        if len(record) != 1:
            raise ICloudError("invalid record")
        metas.setdefault(record[0], ICloudMeta()).albums.append(album)
    return album


def use_icloud_photo_details(metas: dict[str, ICloudMeta], path: str | os.PathLike) -> None:
    """Record the original creation dates listed in a "Photo Details" CSV file."""
    for record in _read_records(path)[1:]:
        if len(record) != 8:
            raise ICloudError("invalid record")
        try:
            taken = _parse_creation_date(record[5])
        except ValueError as err:
            raise ICloudError(f"invalid original creation date: {err}") from err
        metas.setdefault(record[0], ICloudMeta()).original_creation_date = taken