import pytest

from barstatus.keyboard import format_indicators, get_layout

SYMBOLS = "pc+us+de:2+inet(evdev)"


def test_all_off_lowercase():
    assert format_indicators("cn", 0) == "cn"


def test_all_on_uppercase():
    assert format_indicators("cn", 3) == "cn".upper()


def test_input_case_ignored_when_toggling():
    assert format_indicators("CN", 0) == "CN".lower()


def test_caps_is_bit_zero():
    assert format_indicators("c", 1) == "c".upper()
    assert format_indicators("n", 1) == "n"


def test_num_is_bit_one():
    assert format_indicators("n", 2) == "n".upper()
    assert format_indicators("c", 2) == "c"


def test_conditional_off_omitted():
    assert format_indicators("c?n?", 0) == ""


def test_conditional_on_keeps_case():
    fmt = "C?n?"
    assert format_indicators(fmt, 3) == fmt.replace("?", "")


def test_only_first_four_characters_used():
    assert format_indicators("xxxxcn", 3) == ""


@pytest.mark.parametrize("mask", range(4))
def test_toggle_output_length_matches_letters(mask):
    assert len(format_indicators("cxn", mask)) == 2


def test_layout_first_group():
    assert get_layout(SYMBOLS, 0) == "us"


def test_layout_second_group():
    assert get_layout(SYMBOLS, 1) == "de"


def test_layout_group_beyond_last_gives_last():
    assert get_layout(SYMBOLS, 5) == get_layout(SYMBOLS, 1)


def test_layout_keeps_variant():
    assert get_layout("pc+us(intl)+inet(evdev)", 0) == "us(intl)"


def test_layout_none_when_only_invalid():
    assert get_layout("pc+evdev+base:3", 0) is None


def test_layout_empty():
    assert get_layout("", 0) is None