"""Program settings, per-request parameters and video metadata records."""

from __future__ import annotations

from dataclasses import dataclass, field

from subfinder_types.emby import EmbyConfig


@dataclass
class Config:
    """Settings read from the configuration file."""

    use_proxy: bool = False
    http_proxy: str = ""
    every_time: str = ""
    debug_mode: bool = False
    threads: int = 0
    # 0 is automatic, 1 prefers srt, 2 prefers ass/ssa.
    sub_type_priority: int = 0
    # 0 (or out of range) is the Emby naming style, 1 the plain "zh" style.
    sub_name_formatter: int = 0
    when_sub_supplier_invalid_web_hook: str = ""
    emby_config: EmbyConfig = field(default_factory=EmbyConfig)
    save_multi_sub: bool = False
    save_one_season_sub: bool = False
    # Extra video extensions, comma separated, added to the built-in ones.
    custom_video_exts: str = ""
    run_at_startup: bool = False

    movie_folder: str = ""
    series_folder: str = ""
    anime_folder: str = ""


@dataclass
class HotFixParam:
    """Root folders a hot fix is applied to."""

    movie_root_dir: str = ""
    series_root_dir: str = ""


@dataclass
class ReqParam:
    """Optional parameters passed along with a subtitle search."""

    user_ext_list: list[str] = field(default_factory=list)
    save_multi_sub: bool = False
    debug_mode: bool = False
    threads: int = 2
    sub_type_priority: int = 0
    when_sub_supplier_invalid_web_hook: str = ""
    emby_config: EmbyConfig = field(default_factory=EmbyConfig)
    save_one_season_sub: bool = False

    http_proxy: str = ""
    user_agent: str = ""
    referer: str = ""
    media_type: str = ""
    charset: str = ""
    # Only the top N search results are returned.
    topic: int = 0


@dataclass
class VideoIMDBInfo:
    """Video details read from movie.xml or *.nfo files."""

    imdb_id: str = ""
    tvdb_id: str = ""
    year: str = ""
    title: str = ""
    original_title: str = ""
    release_date: str = ""