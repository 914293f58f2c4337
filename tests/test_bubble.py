from __future__ import annotations

from tewi_config import STYLE_RESET
from tewi_borders import BORDER_STYLES, BorderStyle, list_border_styles
from tewi_bubble import preview_borders, render_bubble, render_row
from tewi_width import get_width


def test_hello_unicode(unicode_style: BorderStyle) -> None:
    assert render_bubble(unicode_style, ["Hello"]) == (
        "┌───────┐\n"
        "│ Hello │\n"
        "└───────┘"
    )


def test_empty_sequence_gives_minimal_frame(unicode_style: BorderStyle) -> None:
    assert render_bubble(unicode_style, []) == "┌──┐\n└──┘"


def test_single_empty_line(unicode_style: BorderStyle) -> None:
    assert render_bubble(unicode_style, [""]) == "┌──┐\n│  │\n└──┘"


def test_lines_padded_to_widest() -> None:
    assert render_bubble(BORDER_STYLES["say"], ["a", "abc"]) == (
        " _____ \n"
        "| a   |\n"
        "| abc |\n"
        " ───── "
    )


def test_wide_glyphs_are_padded_by_columns(unicode_style: BorderStyle) -> None:
    assert render_bubble(unicode_style, ["你好", "ab"]) == (
        "┌──────┐\n"
        "│ 你好 │\n"
        "│ ab   │\n"
        "└──────┘"
    )


def test_rules_match_and_cover_content(unicode_style: BorderStyle) -> None:
    text = "some longer line of text"
    top, row, bottom = render_bubble(unicode_style, [text]).split("\n")
    assert get_width(top) == get_width(bottom)
    assert get_width(top) - 2 >= get_width(text) + 2
    assert get_width(row) == get_width(top)


def test_no_trailing_line_break(unicode_style: BorderStyle) -> None:
    assert not render_bubble(unicode_style, ["x"]).endswith("\n")


def test_open_color_is_carried_to_next_row(unicode_style: BorderStyle) -> None:
    red = "\x1b[31m"
    out = render_bubble(unicode_style, [red + "red", "next"])
    assert out.split("\n") == [
        "┌──────┐",
        "│ " + red + "red  │",
        red + "│ next │" + STYLE_RESET,
        "└──────┘",
    ]


def test_carry_only_affects_following_row(unicode_style: BorderStyle) -> None:
    out = render_bubble(unicode_style, ["plain", "\x1b[32mgreen", "x", "y"])
    rows = out.split("\n")[1:-1]
    assert rows[0].startswith("│")
    assert rows[1].startswith("│")
    assert rows[2].startswith("\x1b[32m│") and rows[2].endswith(STYLE_RESET)
    assert rows[3].startswith("│") and not rows[3].endswith(STYLE_RESET)


def test_render_row_returns_next_carry(unicode_style: BorderStyle) -> None:
    row, carry = render_row(unicode_style, "\x1b[1mbold", 4)
    assert row == "│ \x1b[1mbold │\n"
    assert carry == "\x1b[1m"

    row, carry = render_row(unicode_style, "done", 4, carry)
    assert row == "\x1b[1m│ done │" + STYLE_RESET + "\n"
    assert carry == ""


def test_zero_width_glyphs_terminate() -> None:
    style = BorderStyle("+", "", "+", "|", "", "|", "+", "", "+", ">")
    assert render_bubble(style, ["ab"]) == "++\n|ab|\n++"


def test_wide_fill_glyphs_tile_by_their_width() -> None:
    style = BorderStyle("+", "==", "+", "|", "  ", "|", "+", "==", "+", ">")
    top, row, bottom = render_bubble(style, ["abc"]).split("\n")
    # Interior is 3 + 2*2 = 7 columns, tiled in steps of 2
    assert top == "+" + "==" * 4 + "+"
    assert bottom == top
    assert row == "|  abc  |"


def test_styles_differ_only_in_borders() -> None:
    interiors = set()
    for name in list_border_styles():
        style = BORDER_STYLES[name]
        row = render_bubble(style, ["hi there"]).split("\n")[1]
        assert row.startswith(style.left) and row.endswith(style.right)
        interiors.add(row[len(style.left):-len(style.right)])
    assert interiors == {" hi there "}


def test_preview_borders() -> None:
    samples = preview_borders()
    assert len(samples) == len(BORDER_STYLES)
    assert samples[0] == (
        " ____________ \n"
        "< classicish >\n"
        " ------------ \n"
        "    \\"
    )
    assert samples[-1].endswith("│ unicode │\n└─────────┘\n    ╲")
