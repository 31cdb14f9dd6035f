"""Settings for reading assets out of a folder tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import tzinfo
from enum import Enum

UPLOAD_COMMAND_NAME = "upload"

_DEFAULT_BANNED = (
    "@eaDir/",
    "@__thumb/",  # QNAP
    "SYNOFILE_THUMB_*.*",  # Synology
    "Lightroom Catalog/",  # Lightroom
    "thumbnails/",  # Android photo
    ".DS_Store/",  # macOS custom attributes
    "/._*",  # macOS resource files
    ".photostructure/",  # PhotoStructure
)


def default_banned_patterns() -> list[str]:
    """File name patterns excluded by default: NAS thumbnails, catalogs and OS clutter."""
    return list(_DEFAULT_BANNED)


class AlbumFolderMode(str, Enum):
    """How the folder structure turns into album names."""

    NONE = "NONE"
    FOLDER = "FOLDER"
    PATH = "PATH"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> AlbumFolderMode:
        """Read a mode given on the command line; only FOLDER and PATH may be chosen."""
        normalized = value.upper().strip()
        if normalized in (cls.FOLDER.value, cls.PATH.value):
            return cls(normalized)
        raise ValueError(
            f"invalid value for folder mode, expected {cls.FOLDER}, {cls.PATH} or {cls.NONE}"
        )


@dataclass
class ImportFolderOptions:
    """Settings for reading assets from a file system."""

    use_path_as_album_name: AlbumFolderMode = AlbumFolderMode.NONE
    album_name_path_separator: str = " / "
    import_into_album: str = ""
    banned_files: list[str] = field(default_factory=default_banned_patterns)
    recursive: bool = True
    ignore_sidecar_files: bool = False
    stack_jpg_with_raw: bool = False
    stack_burst_photos: bool = False
    manage_epson_fastfoto: bool = False
    tags: list[str] = field(default_factory=list)
    folder_as_tags: bool = False
    session_tag: bool = False
    take_date_from_filename: bool = True
    picasa_album: bool = False
    icloud_takeout: bool = False
    tz: tzinfo | None = None