"""Records produced when a subtitle file is parsed."""

from __future__ import annotations

from dataclasses import dataclass, field

from subfinder_types.language import Language


@dataclass
class OneDialogue:
    """One line of dialogue with its timing and style."""

    start_time: str = ""
    end_time: str = ""
    style_name: str = ""
    lines: list[str] = field(default_factory=list)


@dataclass
class OneDialogueEx:
    """One line of dialogue split into its Chinese, English, Korean and Japanese parts."""

    start_time: str = ""
    end_time: str = ""
    ch_line: str = ""
    en_line: str = ""
    kr_line: str = ""
    jp_line: str = ""


@dataclass
class FileInfo:
    """A parsed subtitle file."""

    from_where_site: str = ""
    # Set by the caller; it is not detected.
    name: str = ""
    ext: str = ""
    lang: Language = Language.UNKNOWN
    file_full_path: str = ""
    data: bytes = b""
    dialogues: list[OneDialogue] = field(default_factory=list)
    dialogues_ex: list[OneDialogueEx] = field(default_factory=list)
    ch_lines: list[str] = field(default_factory=list)
    other_lines: list[str] = field(default_factory=list)