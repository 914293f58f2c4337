from __future__ import annotations

import pytest

from tewi_width import WidthCalculator, get_width, get_widths


@pytest.mark.parametrize("text, expected", [
    ("", 0),
    ("Hello", 5),
    ("Hello, World!", 13),
    ("你好", 4),
    ("ab你", 4),
    ("\u00e9", 1),
    ("e\u0301", 1),
    ("┌─┐", 3),
])
def test_plain_width(text: str, expected: int) -> None:
    assert get_width(text) == expected


def test_width_is_sum_of_glyph_widths() -> None:
    glyphs = ["a", "你", "\u0301", "─", "Z"]
    assert get_width("".join(glyphs)) == sum(get_width(g) for g in glyphs)


@pytest.mark.parametrize("text, bare", [
    ("\x1b[31mred\x1b[0m", "red"),
    ("\x1b[1;38;2;255;0;255mbold", "bold"),
    ("before\x1b[0mafter", "beforeafter"),
    ("你\x1b[32m好", "你好"),
])
def test_escape_sequences_are_zero_width(text: str, bare: str) -> None:
    assert get_width(text) == get_width(bare)


def test_unterminated_escape_swallows_rest_of_line() -> None:
    assert get_width("ab\x1b[31") == 2
    assert get_width("ab\x1b[31 more text") == 2


def test_control_characters_count_zero() -> None:
    assert get_width("\x07a\x7f") == 1


def test_get_widths() -> None:
    assert get_widths(["Hello", "World", "你"]) == [5, 5, 2]


def test_cache_keeps_most_recent_lines() -> None:
    calc = WidthCalculator(cache_size=2)
    for text in ("a", "bb", "ccc"):
        calc.get_width(text)
    assert calc.cached_lines() == 2
    # Evicted lines are measured again, not lost
    assert calc.get_width("a") == 1


def test_width_does_not_depend_on_cache_state() -> None:
    calc = WidthCalculator(cache_size=1)
    assert calc.get_width("你好") == 4
    calc.clear_cache()
    assert calc.cached_lines() == 0
    assert calc.get_width("你好") == 4
