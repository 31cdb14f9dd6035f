"""Settings for importing a Google Photos takeout."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, tzinfo

from takeoutkit.folder_options import default_banned_patterns


def _normalize_extensions(extensions: list[str]) -> list[str]:
    normalized: list[str] = []
    for ext in extensions:
        ext = ext.strip().lower()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = "." + ext
        if ext not in normalized:
            normalized.append(ext)
    return normalized


@dataclass
class ImportFlags:
    """What to take from a takeout and how to file it.

    The defaults are those of the command line.
    """

    create_albums: bool = True
    import_from_album: str = ""
    import_into_album: str = ""
    partner_shared_album: str = ""
    keep_trashed: bool = False
    keep_partner: bool = True
    keep_untitled: bool = False
    keep_archived: bool = True
    keep_json_less: bool = False
    included_extensions: list[str] = field(default_factory=list)
    excluded_extensions: list[str] = field(default_factory=list)
    date_after: datetime | None = None
    date_before: datetime | None = None
    banned_files: list[str] = field(default_factory=default_banned_patterns)
    manage_epson_fastfoto: bool = False
    tags: list[str] = field(default_factory=list)
    session_tag: bool = False
    takeout_tag: bool = True
    takeout_name: str = ""
    people_tag: bool = True
    tz: tzinfo | None = None

    def __post_init__(self) -> None:
        self.included_extensions = _normalize_extensions(self.included_extensions)
        self.excluded_extensions = _normalize_extensions(self.excluded_extensions)
        if (
            self.date_after is not None
            and self.date_before is not None
            and self.date_after > self.date_before
        ):
            raise ValueError("the start of the date range is after its end")

    @property
    def date_range_set(self) -> bool:
        """True when a date range restricts the import."""
        return self.date_after is not None or self.date_before is not None

    def includes_extension(self, ext: str) -> bool:
        """True when the extension is selected; an empty selection accepts every extension."""
        if not self.included_extensions:
            return True
        return ext.lower() in self.included_extensions

    def excludes_extension(self, ext: str) -> bool:
        """True when the extension is explicitly excluded."""
        return ext.lower() in self.excluded_extensions

    def in_date_range(self, moment: datetime | None) -> bool:
        """True when no range is set, or the moment lies in [date_after, date_before)."""
        if not self.date_range_set:
            return True
        if moment is None:
            return False
        if self.date_after is not None and moment < self.date_after:
            return False
        if self.date_before is not None and moment >= self.date_before:
            return False
        return True