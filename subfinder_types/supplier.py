"""A subtitle candidate offered by a subtitle site."""

from __future__ import annotations

import base64
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from subfinder_types.language import Language


@dataclass
class SubInfo:
    """A subtitle found on a site; season and episode are -1 when not known."""

    from_where: str = ""
    top_n: int = 0
    name: str = ""
    language: Language = Language.UNKNOWN
    file_url: str = ""
    score: int = 0
    offset: int = 0
    # Extension with its dot; may be an archive rather than a subtitle.
    ext: str = ""
    data: bytes = b""
    season: int = -1
    episode: int = -1
    is_full_season: bool = False

    def to_dict(self) -> dict[str, Any]:
        """The JSON form, with the data base64 encoded."""
        return {
            "from_where": self.from_where,
            "top_n": self.top_n,
            "name": self.name,
            "language": int(self.language),
            "file-url": self.file_url,
            "score": self.score,
            "offset": self.offset,
            "ext": self.ext,
            "data": base64.b64encode(self.data).decode("ascii") if self.data else None,
            "season": self.season,
            "episode": self.episode,
            "is_full_season": self.is_full_season,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SubInfo:
        """Build from the JSON form; raises ValueError on bad data or language."""
        if not isinstance(data, Mapping):
            raise TypeError(f"SubInfo expects a mapping, got {type(data).__name__}")
        raw = data.get("data")
        try:
            payload = base64.b64decode(raw, validate=True) if raw else b""
        except (ValueError, TypeError) as exc:
            raise ValueError(f"invalid base64 subtitle data: {exc}") from exc
        defaults = cls()
        return cls(
            from_where=data.get("from_where", defaults.from_where),
            top_n=data.get("top_n", defaults.top_n),
            name=data.get("name", defaults.name),
            language=Language(data.get("language", int(defaults.language))),
            file_url=data.get("file-url", defaults.file_url),
            score=data.get("score", defaults.score),
            offset=data.get("offset", defaults.offset),
            ext=data.get("ext", defaults.ext),
            data=payload,
            season=data.get("season", defaults.season),
            episode=data.get("episode", defaults.episode),
            is_full_season=data.get("is_full_season", defaults.is_full_season),
        )