# takeoutkit

Building blocks for making sense of exported photo libraries:

- `takeoutkit.matchers` – pair a Google Photos takeout JSON sidecar name with
  the media file it describes, even when the name was truncated, renumbered or
  edited.
- `takeoutkit.icloud` – read iCloud takeout album CSV files and
  `Photo Details.csv` to recover albums and original creation dates.
- `takeoutkit.picasa` – read the album name and description from a
  `.picasa.ini` file.
- `takeoutkit.sidecar` – find the XMP or JSON sidecar next to a media file.
- `takeoutkit.folder_options` and `takeoutkit.takeout_options` – settings
  objects for importing a folder tree or a takeout.

The package has no dependencies outside the standard library.

## Installation

```
pip install takeoutkit
```

## Matching JSON files to media

Google shortens and renumbers file names in takeouts. `find_matcher` tries the
rules in `MATCHERS` from the most common to the least and returns the name of
the first one that pairs the two names, or `None`. Each rule takes a callable
that says whether an extension (with its dot) is a media extension.

```python
from takeoutkit.matchers import find_matcher, get_file_index

is_media = lambda ext: ext.lower() in {".jpg", ".heic", ".mp4"}

find_matcher("PXL_20211013_220651983.jpg.json", "PXL_20211013_220651983.jpg", is_media)
# "matchFastTrack"
find_matcher("DSC_0101.JPG(1).json", "DSC_0101(1).JPG", is_media)
# "matchNormal"
find_matcher("20161105_170829.jpg.supplemental-metadata.json", "20161105_170829.jpg", is_media)
# "matchNormal"
find_matcher("IMAG0061.JPG.supplemental-metadata.json", "IMAG0061-edited.JPG", is_media)
# "matchEditedName"
find_matcher("DSC_0104.JPG.json", "DSC_0104(1).JPG", is_media)
# None

get_file_index("IMG_3479(2).JPG")   # ("IMG_3479.JPG", "2")
```

The individual rules are `match_fast_track`, `match_normal`,
`match_forgotten_duplicates` and `match_edited_name`.

## iCloud takeouts

```python
from takeoutkit.icloud import use_icloud_album, use_icloud_photo_details

metas = {}
use_icloud_album(metas, "Albums/Summer.csv")         # returns "Summer"
use_icloud_photo_details(metas, "Photo Details.csv")

meta = metas["IMG_7938.HEIC"]
print(meta.albums, meta.original_creation_date)
```

`metas` maps file names to `ICloudMeta` records (a list of album names and a
UTC `datetime`). Malformed files raise `ICloudError`.

## Picasa

```python
from takeoutkit.picasa import read_picasa_ini

album = read_picasa_ini("holidays/.picasa.ini")
print(album.name, album.description)
```

Only the `[Picasa]` section is read; a line there without `=` raises
`PicasaError`. `parse_picasa_ini` takes any iterable of lines.

## Sidecars

```python
from takeoutkit.sidecar import find_sidecar, sidecar_pattern

sidecar_pattern(".xmp")   # ".[xX][mM][pP]"
find_sidecar("photos/IMG_0001.jpg", ".xmp", is_media)
```

`find_sidecar` looks for `IMG_0001.jpg.xmp` first and, when the file has a
media extension, for `IMG_0001.xmp`, in any letter case. It returns the path
found or `None`.

## Settings

`ImportFolderOptions` holds the settings for reading a folder tree: album
naming by `AlbumFolderMode` (`NONE`, `FOLDER`, `PATH`), banned file patterns
(`default_banned_patterns()`), tags, recursion, Picasa and iCloud switches.
`AlbumFolderMode.parse("folder")` reads a command-line value; only `FOLDER` and
`PATH` may be chosen, anything else raises `ValueError`.

`ImportFlags` holds the settings for a takeout import. Besides its switches it
answers:

```python
from datetime import datetime, timezone
from takeoutkit.takeout_options import ImportFlags

flags = ImportFlags(
    included_extensions=["JPG", ".heic"],
    date_after=datetime(2023, 1, 1, tzinfo=timezone.utc),
    date_before=datetime(2024, 1, 1, tzinfo=timezone.utc),
)
flags.includes_extension(".jpg")   # True
flags.excludes_extension(".jpg")   # False
flags.in_date_range(datetime(2023, 6, 1, tzinfo=timezone.utc))   # True
```

Extensions are lower-cased and given a leading dot; the date range is
half-open, `[date_after, date_before)`, and a start after the end raises
`ValueError`.

## What the package does not do

The package provides the pieces listed above and nothing more. It does not
parse the contents of Google Photos JSON sidecars, walk a takeout or folder
tree to build albums and drop duplicates, read EXIF data, or copy assets into
an output folder. It has no command-line program and talks to no server.

## Running the tests

```
pip install -e .[test]
pytest
```