"""Emby server settings and the records returned by its HTTP API."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, TypeVar

EMBY_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"

T = TypeVar("T")


def parse_emby_time(text: str) -> datetime:
    """Parse an Emby timestamp, dropping quotes and any fractional seconds.

    The result is a naive datetime in local time.
    """
    cleaned = text.replace('"', "")
    if "." in cleaned:
        cleaned = cleaned.split(".")[0]
    return datetime.strptime(cleaned, EMBY_TIME_FORMAT)


def format_emby_time(value: datetime) -> str:
    """Format a datetime the way Emby writes timestamps."""
    return value.strftime(EMBY_TIME_FORMAT)


def _parse_timestamp(text: str) -> datetime:
    try:
        return parse_emby_time(text)
    except ValueError:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))


def _json_key(name: str) -> str:
    return "".join(part.capitalize() for part in name.split("_"))


def _load(
    cls: type[T],
    data: Mapping[str, Any],
    *,
    aliases: Mapping[str, str] | None = None,
    converters: Mapping[str, Callable[[Any], Any]] | None = None,
) -> T:
    if not isinstance(data, Mapping):
        raise TypeError(f"{cls.__name__} expects a mapping, got {type(data).__name__}")
    aliases = aliases or {}
    converters = converters or {}
    kwargs = {}
    for f in fields(cls):
        key = aliases.get(f.name, _json_key(f.name))
        value = data.get(key)
        if value is None:
            continue
        convert = converters.get(f.name)
        kwargs[f.name] = convert(value) if convert else value
    return cls(**kwargs)


def _list_of(loader: Callable[[Any], T]) -> Callable[[Any], list[T]]:
    return lambda items: [loader(item) for item in items]


@dataclass
class EmbyConfig:
    """Connection settings for an Emby server."""

    url: str = ""
    api_key: str = ""
    limit_count: int = 0
    skip_watched: bool = False


@dataclass
class EmbyUserData:
    playback_position_ticks: int = 0
    play_count: int = 0
    is_favorite: bool = False
    played: bool = False

    @classmethod
    def from_dict(cls, data):
        return _load(cls, data)


@dataclass
class EmbyRecentlyItem:
    name: str = ""
    id: str = ""
    index_number: int = 0
    parent_index_number: int = 0
    type: str = ""
    user_data: EmbyUserData = field(default_factory=EmbyUserData)
    series_name: str = ""

    @classmethod
    def from_dict(cls, data):
        return _load(cls, data, converters={"user_data": EmbyUserData.from_dict})


@dataclass
class EmbyRecentlyItems:
    items: list[EmbyRecentlyItem] = field(default_factory=list)
    total_record_count: int = 0

    @classmethod
    def from_dict(cls, data):
        return _load(cls, data, converters={"items": _list_of(EmbyRecentlyItem.from_dict)})


@dataclass
class EmbyItemsAncestors:
    name: str = ""
    path: str = ""
    type: str = ""

    @classmethod
    def from_dict(cls, data):
        return _load(cls, data)


@dataclass
class MediaStream:
    codec: str = ""
    time_base: str = ""
    codec_time_base: str = ""
    video_range: str = ""
    display_title: str = ""
    nal_length_size: str = ""
    is_interlaced: bool = False
    is_avc: bool = False
    bit_rate: int = 0
    bit_depth: int = 0
    ref_frames: int = 0
    is_default: bool = False
    is_forced: bool = False
    height: int = 0
    width: int = 0
    average_frame_rate: float = 0.0
    real_frame_rate: float = 0.0
    profile: str = ""
    type: str = ""
    aspect_ratio: str = ""
    index: int = 0
    is_external: bool = False
    is_text_subtitle_stream: bool = False
    supports_external_stream: bool = False
    protocol: str = ""
    pixel_format: str = ""
    level: int = 0
    is_anamorphic: bool = False
    language: str = ""
    display_language: str = ""
    channel_layout: str = ""
    channels: int = 0
    sample_rate: int = 0
    title: str = ""
    path: str = ""

    @classmethod
    def from_dict(cls, data):
        return _load(cls, data, aliases={"is_avc": "IsAVC"})


@dataclass
class MediaSource:
    protocol: str = ""
    id: str = ""
    path: str = ""
    type: str = ""
    container: str = ""
    size: int = 0
    name: str = ""
    is_remote: bool = False
    run_time_ticks: int = 0
    supports_transcoding: bool = False
    supports_direct_stream: bool = False
    supports_direct_play: bool = False
    is_infinite_stream: bool = False
    requires_opening: bool = False
    requires_closing: bool = False
    requires_looping: bool = False
    supports_probing: bool = False
    media_streams: list[MediaStream] = field(default_factory=list)
    formats: list[Any] = field(default_factory=list)
    bitrate: int = 0
    required_http_headers: dict[str, Any] = field(default_factory=dict)
    read_at_native_framerate: bool = False
    default_audio_stream_index: int = 0
    default_subtitle_stream_index: int = 0

    @classmethod
    def from_dict(cls, data):
        return _load(
            cls,
            data,
            converters={
                "media_streams": _list_of(MediaStream.from_dict),
                "formats": list,
                "required_http_headers": dict,
            },
        )


@dataclass
class EmbyVideoInfo:
    name: str = ""
    original_title: str = ""
    id: str = ""
    date_created: datetime | None = None
    premiere_date: datetime | None = None
    sort_name: str = ""
    path: str = ""
    media_sources: list[MediaSource] = field(default_factory=list)
    media_streams: list[MediaStream] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        return _load(
            cls,
            data,
            converters={
                "date_created": _parse_timestamp,
                "premiere_date": _parse_timestamp,
                "media_sources": _list_of(MediaSource.from_dict),
                "media_streams": _list_of(MediaStream.from_dict),
            },
        )


@dataclass
class EmbyUser:
    name: str = ""
    id: str = ""

    @classmethod
    def from_dict(cls, data):
        return _load(cls, data)


@dataclass
class EmbyUsers:
    items: list[EmbyUser] = field(default_factory=list)
    total_record_count: int = 0

    @classmethod
    def from_dict(cls, data):
        return _load(cls, data, converters={"items": _list_of(EmbyUser.from_dict)})


@dataclass
class UserMediaSource:
    path: str = ""
    default_audio_stream_index: int = 0
    default_subtitle_stream_index: int = 0

    @classmethod
    def from_dict(cls, data):
        return _load(cls, data)


@dataclass
class EmbyVideoInfoByUserId:
    name: str = ""
    original_title: str = ""
    id: str = ""
    date_created: datetime | None = None
    premiere_date: datetime | None = None
    sort_name: str = ""
    path: str = ""
    media_sources: list[UserMediaSource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        return _load(
            cls,
            data,
            converters={
                "date_created": _parse_timestamp,
                "premiere_date": _parse_timestamp,
                "media_sources": _list_of(UserMediaSource.from_dict),
            },
        )

    def default_sub_index(self) -> int:
        """Index of the subtitle stream chosen for this video; 0 means none."""
        return next(
            (s.default_subtitle_stream_index for s in self.media_sources if s.path == self.path),
            0,
        )


@dataclass
class EmbyMixInfo:
    """A video seen by Emby, together with where it lives on disk."""

    video_folder_name: str = ""
    video_file_name: str = ""
    video_file_relative_path: str = ""
    video_file_full_path: str = ""
    ancestors: list[EmbyItemsAncestors] = field(default_factory=list)
    video_info: EmbyVideoInfo = field(default_factory=EmbyVideoInfo)