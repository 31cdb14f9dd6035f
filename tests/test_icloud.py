from datetime import datetime, timezone

import pytest

from takeoutkit.icloud import ICloudError, ICloudMeta, use_icloud_album, use_icloud_photo_details

HEADER = "imgName,fileChecksum,favorite,hidden,deleted,originalCreationDate,viewCount,importDate\n"
ROW = (
    'IMG_7938.HEIC,AfQj57ORF2JIumUCjO+PawZ9nqPg,no,no,no,'
    '"Saturday June 4,2022 12:11 PM GMT",10,"Saturday June 4,2022 12:11 PM GMT"\n'
)


def write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_album_files_collect_titles(tmp_path):
    metas = {}
    first = write(tmp_path / "Spécial album.csv", "Images\nphoto1.jpg\nphoto2.jpg\n")
    second = write(tmp_path / "Spécial album 2.csv", "Images\nphoto2.jpg\n")
    assert use_icloud_album(metas, first) == "Spécial album"
    assert use_icloud_album(metas, second) == "Spécial album 2"
    assert metas["photo1.jpg"].albums == ["Spécial album"]
    assert metas["photo2.jpg"].albums == ["Spécial album", "Spécial album 2"]


def test_album_file_with_header_only(tmp_path):
    metas = {}
    path = write(tmp_path / "Empty.csv", "Images\n")
    assert use_icloud_album(metas, path) == "Empty"
    assert metas == {}


def test_album_record_with_two_fields(tmp_path):
    path = write(tmp_path / "Bad.csv", "Images,Other\na.jpg,b\n")
    with pytest.raises(ICloudError, match="invalid record"):
        use_icloud_album({}, path)


def test_album_inconsistent_field_count(tmp_path):
    path = write(tmp_path / "Bad.csv", "Images\na.jpg,b\n")
    with pytest.raises(ICloudError, match="failed to read all csv records"):
        use_icloud_album({}, path)


def test_photo_details_sets_creation_date(tmp_path):
    metas = {"IMG_7938.HEIC": ICloudMeta(albums=["Trip"])}
    path = write(tmp_path / "Photo Details.csv", HEADER + ROW)
    use_icloud_photo_details(metas, path)
    meta = metas["IMG_7938.HEIC"]
    assert meta.original_creation_date == datetime(2022, 6, 4, 12, 11, tzinfo=timezone.utc)
    assert meta.albums == ["Trip"]


def test_photo_details_invalid_date(tmp_path):
    row = ROW.replace("Saturday June 4,2022 12:11 PM GMT", "yesterday", 1)
    path = write(tmp_path / "Photo Details.csv", HEADER + row)
    with pytest.raises(ICloudError, match="invalid original creation date"):
        use_icloud_photo_details({}, path)


def test_photo_details_wrong_field_count(tmp_path):
    path = write(tmp_path / "Photo Details.csv", "a,b\nc,d\n")
    with pytest.raises(ICloudError, match="invalid record"):
        use_icloud_photo_details({}, path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        use_icloud_album({}, tmp_path / "missing.csv")