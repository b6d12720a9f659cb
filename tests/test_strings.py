import pytest

from xtoolkit.strings import (
    any_to_string,
    concat,
    filter_emoji,
    sbc_to_dbc,
    str_len,
    uc_first,
)


@pytest.mark.parametrize("text", ["", "Abc", "1abc", "éclair"])
def test_uc_first_leaves_non_lowercase_start(text):
    assert uc_first(text) == text


def test_uc_first_upper_cases_ascii_letter():
    result = uc_first("hello")
    assert result[0] == "H"
    assert result[1:] == "ello"


def test_sbc_to_dbc_folds_full_width():
    assert sbc_to_dbc("１２３＋４") == "123+4"


def test_sbc_to_dbc_keeps_other_characters():
    assert sbc_to_dbc("abc中文") == "abc中文"


def test_concat_joins_in_order():
    assert concat("a", "b", "c") == "abc"
    assert concat() == ""


def test_str_len_counts_characters_not_bytes():
    text = "中文ab"
    assert str_len(text) == len(text)
    assert str_len(text) < len(text.encode("utf-8"))


def test_filter_emoji_removes_four_byte_characters():
    assert filter_emoji("hi\U0001F600中") == "hi中"
    assert filter_emoji("plain") == "plain"


def test_any_to_string_none_is_empty():
    assert any_to_string(None) == ""


def test_any_to_string_is_compact_and_sorted():
    assert any_to_string({"b": 1, "a": [1, 2]}) == '{"a":[1,2],"b":1}'


def test_any_to_string_escapes_html_characters():
    result = any_to_string("<a&b>")
    assert "<" not in result and ">" not in result and "&" not in result
    assert "\\u003c" in result


def test_any_to_string_failure_gives_empty():
    assert any_to_string(float("nan")) == ""
    assert any_to_string(object()) == ""


def test_any_to_string_bytes_are_base64():
    assert any_to_string(b"abc") == '"YWJj"'