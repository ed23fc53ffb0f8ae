"""Records describing a series, its episodes and their subtitles."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from subfinder_types.language import Language


@dataclass
class SubInfo:
    """A subtitle file found next to an episode."""

    title: str = ""
    season: int = 0
    episode: int = 0
    language: Language = Language.UNKNOWN
    dir: str = ""
    file_full_path: str = ""


@dataclass
class EpisodeInfo:
    """One episode of a series on disk."""

    title: str = ""
    season: int = 0
    episode: int = 0
    sub_already_downloaded_list: list[SubInfo] = field(default_factory=list)
    dir: str = ""
    file_full_path: str = ""
    modify_time: datetime | None = None
    aired_time: str = ""


@dataclass
class SeriesInfo:
    """A series folder with its episodes and what still needs subtitles."""

    imdb_id: str = ""
    name: str = ""
    year: int = 0
    release_date: str = ""
    ep_list: list[EpisodeInfo] = field(default_factory=list)
    dir_path: str = ""
    season_dict: dict[int, int] = field(default_factory=dict)
    need_dl_season_dict: dict[int, int] = field(default_factory=dict)
    # Keyed by "SxEx".
    need_dl_eps_key_list: dict[str, EpisodeInfo] = field(default_factory=dict)