import pytest

from subfinder_types import language
from subfinder_types.language import Language


@pytest.mark.parametrize(
    "lang, label",
    [
        (Language.UNKNOWN, "未知语言"),
        (Language.CHINESE_SIMPLE, "简"),
        (Language.CHINESE_TRADITIONAL, "繁"),
        (Language.CHINESE_SIMPLE_ENGLISH, "简英"),
        (Language.CHINESE_TRADITIONAL_ENGLISH, "繁英"),
        (Language.ENGLISH, "英"),
        (Language.JAPANESE, "日"),
        (Language.CHINESE_SIMPLE_JAPANESE, "简日"),
        (Language.CHINESE_TRADITIONAL_JAPANESE, "繁日"),
        (Language.KOREAN, "韩"),
        (Language.CHINESE_SIMPLE_KOREAN, "简韩"),
        (Language.CHINESE_TRADITIONAL_KOREAN, "繁韩"),
    ],
)
def test_str_labels(lang, label):
    assert str(lang) == label


def test_values_follow_declaration_order():
    assert [int(m) for m in Language] == list(range(len(Language)))
    assert Language(0) is Language.UNKNOWN
    assert Language(11) is Language.CHINESE_TRADITIONAL_KOREAN


def test_unknown_value_rejected():
    with pytest.raises(ValueError):
        Language(12)


def test_labels_are_distinct():
    labels = [Language(value).__str__() for value in range(12)]
    assert len(set(labels)) == 12
    assert labels[0] == "未知语言"


def test_format_uses_label():
    lang = Language(3)
    assert f"{lang}" == language.MATCH_LANG_CHS_EN
    assert f"{lang}" == "简英"