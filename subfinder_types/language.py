"""Subtitle language kinds and the naming marks used for subtitle files."""

from __future__ import annotations

from enum import IntEnum

# Used to tell simplified from traditional Chinese subtitles by name.
SUB_NAME_KEYWORD_CHINESE_SIMPLE = "chs"
SUB_NAME_KEYWORD_TRADITIONAL = "cht"

# ISO 639 codes for Chinese.
CHINESE_ABBR_639_1 = "zh"
CHINESE_ABBR_639_2T = "zho"
CHINESE_ABBR_639_2B = "chi"

SUB_EXT_MARK_DEFAULT = ".default"
SUB_EXT_MARK_FORCED = ".forced"

# Marks placed before the subtitle extension, in the form Emby expects.
EMBY_DEFAULT = ".default"
EMBY_UNKNOWN = ".unknow"
EMBY_CHINESE = ".chinese"
EMBY_CHI = ".chi"
EMBY_CHN = ".chn"
EMBY_CHS = ".chs"
EMBY_CHT = ".cht"
EMBY_CHS_EN = ".chs_en"
EMBY_CHT_EN = ".cht_en"
EMBY_EN = ".en"
EMBY_JP = ".jp"
EMBY_CHS_JP = ".chs_jp"
EMBY_CHT_JP = ".cht_jp"
EMBY_KR = ".kr"
EMBY_CHS_KR = ".chs_kr"
EMBY_CHT_KR = ".cht_kr"

MATCH_LANG_UNKNOWN = "未知语言"
MATCH_LANG_DOUBLE = "双语"
MATCH_LANG_CHS = "简"
MATCH_LANG_CHT = "繁"
MATCH_LANG_CHS_EN = "简英"
MATCH_LANG_CHT_EN = "繁英"
MATCH_LANG_EN = "英"
MATCH_LANG_JP = "日"
MATCH_LANG_CHS_JP = "简日"
MATCH_LANG_CHT_JP = "繁日"
MATCH_LANG_KR = "韩"
MATCH_LANG_CHS_KR = "简韩"
MATCH_LANG_CHT_KR = "繁韩"


class Language(IntEnum):
    """Language of a subtitle; the search always targets Chinese subtitles."""

    UNKNOWN = 0
    CHINESE_SIMPLE = 1
    CHINESE_TRADITIONAL = 2
    CHINESE_SIMPLE_ENGLISH = 3
    CHINESE_TRADITIONAL_ENGLISH = 4
    ENGLISH = 5
    JAPANESE = 6
    CHINESE_SIMPLE_JAPANESE = 7
    CHINESE_TRADITIONAL_JAPANESE = 8
    KOREAN = 9
    CHINESE_SIMPLE_KOREAN = 10
    CHINESE_TRADITIONAL_KOREAN = 11

    def __str__(self) -> str:
        return _LABELS.get(self, MATCH_LANG_UNKNOWN)


_LABELS = {
    Language.CHINESE_SIMPLE: MATCH_LANG_CHS,
    Language.CHINESE_TRADITIONAL: MATCH_LANG_CHT,
    Language.CHINESE_SIMPLE_ENGLISH: MATCH_LANG_CHS_EN,
    Language.CHINESE_TRADITIONAL_ENGLISH: MATCH_LANG_CHT_EN,
    Language.ENGLISH: MATCH_LANG_EN,
    Language.JAPANESE: MATCH_LANG_JP,
    Language.CHINESE_SIMPLE_JAPANESE: MATCH_LANG_CHS_JP,
    Language.CHINESE_TRADITIONAL_JAPANESE: MATCH_LANG_CHT_JP,
    Language.KOREAN: MATCH_LANG_KR,
    Language.CHINESE_SIMPLE_KOREAN: MATCH_LANG_CHS_KR,
    Language.CHINESE_TRADITIONAL_KOREAN: MATCH_LANG_CHT_KR,
}