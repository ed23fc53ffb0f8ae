# subfinder_types

Plain data types shared by the parts of a subtitle finder for movies and
series: subtitle languages, configuration and request parameters, Emby
server records, series and episode listings, parsed subtitle files, and
subtitles offered by download sites.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
pip install ".[test]"   # with the test dependencies
```

## Modules

### `subfinder_types.language`

`Language` is an `IntEnum` of subtitle languages, from `UNKNOWN` (0) to
`CHINESE_TRADITIONAL_KOREAN` (11). `str()` of a member gives its short
Chinese label, for example `str(Language.CHINESE_SIMPLE_ENGLISH)` is
`简英`; `Language.UNKNOWN` gives `未知语言`.

The module also holds the naming constants used for subtitle files: the
`chs` / `cht` keywords, the ISO 639 codes for Chinese (`zh`, `zho`, `chi`),
the `.default` and `.forced` marks, the Emby marks such as `EMBY_CHS_EN`
(`.chs_en`), and the label strings such as `MATCH_LANG_DOUBLE` (`双语`).

### `subfinder_types.emby`

- `EmbyConfig`: server URL, API key, how many recent items to fetch, and
  whether watched videos are skipped.
- Records read from an Emby server's JSON answers, each built with the
  class method `from_dict`: `EmbyRecentlyItems`, `EmbyRecentlyItem`,
  `EmbyUserData`, `EmbyItemsAncestors`, `EmbyVideoInfo` with its
  `MediaSource` and `MediaStream` entries, `EmbyUsers`, `EmbyUser`,
  `EmbyVideoInfoByUserId` and `UserMediaSource`. Keys are read in Emby's
  PascalCase (`"PlayCount"`, `"IsAVC"`, ...); missing or `null` keys leave
  the field at its default, unknown keys are ignored, and anything other
  than a mapping raises `TypeError`.
- `EmbyVideoInfoByUserId.default_sub_index()` returns the default subtitle
  stream index of the media source whose path matches the video's path,
  or `0` when there is none.
- `EmbyMixInfo` pairs an `EmbyVideoInfo` with its folder, file name,
  relative and full path, and its ancestors.
- `parse_emby_time(text)` reads a `2006-01-02T15:04:05` style timestamp,
  removing quotes and dropping any fractional seconds, and returns a naive
  `datetime`; a malformed string raises `ValueError`.
  `format_emby_time(value)` writes a `datetime` in the same form. When
  `from_dict` reads `DateCreated` or `PremiereDate`, a value that is not in
  that form is read as ISO 8601 instead.

### `subfinder_types.config`

`Config` (settings file contents), `HotFixParam` (movie and series root
folders), `ReqParam` (optional search parameters; `threads` defaults to
`2`) and `VideoIMDBInfo` (details read from `movie.xml` or `.nfo` files).

### `subfinder_types.series`

`SeriesInfo`, `EpisodeInfo` and `SubInfo`: a series folder, its episodes,
and subtitle files already found next to them.

### `subfinder_types.subparser`

`FileInfo`, `OneDialogue` and `OneDialogueEx`: a parsed subtitle file, its
dialogue lines, and lines split into Chinese, English, Korean and Japanese
parts.

### `subfinder_types.supplier`

`SubInfo` is a subtitle candidate found on a site. Season and episode
default to `-1`. `to_dict()` gives its JSON form, with the keys
`from_where`, `top_n`, `name`, `language` (an integer), `file-url`,
`score`, `offset`, `ext`, `data` (base64 text, or `None` when empty),
`season`, `episode` and `is_full_season`. `SubInfo.from_dict()` reads that
form back; invalid base64 data or an unknown language number raises
`ValueError`, and a non-mapping raises `TypeError`.

## Example

```python
from subfinder_types.emby import EmbyVideoInfoByUserId
from subfinder_types.language import Language

info = EmbyVideoInfoByUserId.from_dict({
    "Name": "Episode",
    "Path": "/media/show/s01e01.mkv",
    "MediaSources": [
        {"Path": "/media/show/s01e01.mkv", "DefaultSubtitleStreamIndex": 3},
    ],
})
print(info.default_sub_index())       # 3
print(str(Language.CHINESE_SIMPLE))   # 简
```

## What this package does not do

It only holds data types. It does not talk to an Emby server, search or
download subtitles, scan media folders, parse subtitle files or read a
configuration file, and it has no command-line program.

## Running the tests

```
pytest
```