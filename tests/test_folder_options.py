import pytest

from takeoutkit.folder_options import (
    AlbumFolderMode,
    ImportFolderOptions,
    default_banned_patterns,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("folder", AlbumFolderMode.FOLDER),
        ("FOLDER", AlbumFolderMode.FOLDER),
        ("  path ", AlbumFolderMode.PATH),
        ("Path", AlbumFolderMode.PATH),
    ],
)
def test_parse_accepts_folder_and_path(text, expected):
    assert AlbumFolderMode.parse(text) is expected


@pytest.mark.parametrize("text", ["NONE", "none", "", "album"])
def test_parse_rejects_other_values(text):
    with pytest.raises(ValueError, match="invalid value for folder mode"):
        AlbumFolderMode.parse(text)


def test_parsed_mode_string_is_its_value():
    assert str(AlbumFolderMode.parse("folder")) == "FOLDER"
    assert str(AlbumFolderMode.parse("path")) == "PATH"


def test_error_message_names_all_modes():
    with pytest.raises(ValueError) as info:
        AlbumFolderMode.parse("bad")
    assert "expected FOLDER, PATH or NONE" in str(info.value)


def test_default_banned_patterns_content():
    patterns = default_banned_patterns()
    assert "@eaDir/" in patterns
    assert "SYNOFILE_THUMB_*.*" in patterns
    assert "/._*" in patterns
    assert len(patterns) == 8


def test_default_banned_patterns_are_independent_copies():
    first = default_banned_patterns()
    first.append("extra/")
    assert "extra/" not in default_banned_patterns()


def test_options_defaults():
    options = ImportFolderOptions()
    assert options.use_path_as_album_name is AlbumFolderMode.NONE
    assert options.album_name_path_separator == " / "
    assert options.recursive is True
    assert options.take_date_from_filename is True
    assert options.picasa_album is False
    assert options.icloud_takeout is False
    assert options.banned_files == default_banned_patterns()


def test_options_lists_are_not_shared():
    a = ImportFolderOptions()
    b = ImportFolderOptions()
    a.tags.append("tag1")
    a.banned_files.append("x/")
    assert b.tags == []
    assert "x/" not in b.banned_files