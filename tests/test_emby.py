from datetime import datetime

import pytest

from subfinder_types.emby import (
    EmbyConfig,
    EmbyItemsAncestors,
    EmbyMixInfo,
    EmbyRecentlyItems,
    EmbyUsers,
    EmbyVideoInfo,
    EmbyVideoInfoByUserId,
    MediaStream,
    UserMediaSource,
    format_emby_time,
    parse_emby_time,
)


def test_parse_time_drops_fraction_and_quotes():
    assert parse_emby_time('"2021-06-20T12:34:56.0000000Z"') == datetime(2021, 6, 20, 12, 34, 56)


def test_parse_time_plain():
    assert parse_emby_time("2020-01-02T03:04:05") == datetime(2020, 1, 2, 3, 4, 5)


def test_parse_time_invalid():
    with pytest.raises(ValueError):
        parse_emby_time("not a time")


def test_time_round_trip():
    text = "2019-12-31T23:59:58"
    assert format_emby_time(parse_emby_time(text)) == text


def test_recently_items_from_dict():
    data = {
        "Items": [
            {
                "Name": "Pilot",
                "Id": "42",
                "IndexNumber": 1,
                "ParentIndexNumber": 2,
                "Type": "Episode",
                "UserData": {"PlaybackPositionTicks": 10, "PlayCount": 3, "IsFavorite": True, "Played": True},
                "SeriesName": "Show",
            }
        ],
        "TotalRecordCount": 1,
    }
    items = EmbyRecentlyItems.from_dict(data)
    assert items.total_record_count == 1
    item = items.items[0]
    assert (item.name, item.id, item.index_number, item.parent_index_number) == ("Pilot", "42", 1, 2)
    assert item.series_name == "Show"
    assert item.user_data.play_count == 3
    assert item.user_data.played is True


def test_missing_fields_take_defaults():
    items = EmbyRecentlyItems.from_dict({})
    assert items.items == []
    assert items.total_record_count == 0


def test_from_dict_rejects_non_mapping():
    with pytest.raises(TypeError):
        EmbyUsers.from_dict(["a"])


def test_users_from_dict():
    users = EmbyUsers.from_dict({"Items": [{"Name": "alice", "Id": "u1"}], "TotalRecordCount": 1})
    assert [(u.name, u.id) for u in users.items] == [("alice", "u1")]


def test_media_stream_acronym_key():
    stream = MediaStream.from_dict({"IsAVC": True, "Codec": "h264", "Index": 2})
    assert stream.is_avc is True
    assert stream.codec == "h264"
    assert stream.index == 2


def test_video_info_nested():
    data = {
        "Name": "Movie",
        "Path": "/media/movie.mkv",
        "DateCreated": "2021-06-20T12:34:56.1234567Z",
        "MediaSources": [
            {
                "Path": "/media/movie.mkv",
                "Size": 100,
                "MediaStreams": [{"Codec": "srt", "Language": "chi", "IsExternal": True}],
                "RequiredHttpHeaders": {},
                "DefaultSubtitleStreamIndex": 3,
            }
        ],
        "MediaStreams": [{"Codec": "ass", "Path": "/media/movie.ass"}],
    }
    info = EmbyVideoInfo.from_dict(data)
    assert info.name == "Movie"
    assert info.date_created == datetime(2021, 6, 20, 12, 34, 56)
    assert info.premiere_date is None
    source = info.media_sources[0]
    assert source.size == 100
    assert source.default_subtitle_stream_index == 3
    assert source.media_streams[0].language == "chi"
    assert info.media_streams[0].path == "/media/movie.ass"


def test_default_sub_index_matches_path():
    info = EmbyVideoInfoByUserId(
        path="/b.mkv",
        media_sources=[
            UserMediaSource(path="/a.mkv", default_subtitle_stream_index=5),
            UserMediaSource(path="/b.mkv", default_subtitle_stream_index=7),
        ],
    )
    assert info.default_sub_index() == 7


def test_default_sub_index_no_match_is_zero():
    info = EmbyVideoInfoByUserId.from_dict(
        {"Path": "/x.mkv", "MediaSources": [{"Path": "/y.mkv", "DefaultSubtitleStreamIndex": 4}]}
    )
    assert info.default_sub_index() == 0


def test_ancestors_and_mix_info():
    ancestor = EmbyItemsAncestors.from_dict({"Name": "Movies", "Path": "/media", "Type": "Folder"})
    mix = EmbyMixInfo(video_folder_name="Movies", ancestors=[ancestor])
    assert mix.ancestors[0].path == "/media"
    assert mix.video_info.media_sources == []


def test_emby_config_defaults():
    config = EmbyConfig(url="http://localhost:8096", api_key="placeholder")
    assert config.limit_count == 0
    assert config.skip_watched is False
    assert config.api_key == "placeholder"