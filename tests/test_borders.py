from __future__ import annotations

import dataclasses

import pytest

from tewi_borders import BORDER_STYLES, BorderStyle, get_border_style, list_border_styles
from tewi_errors import TewiError, UnknownStyleError


def test_catalog_names_sorted() -> None:
    assert list_border_styles() == [
        "classicish", "rounded", "say", "thick", "think", "unicode",
    ]


def test_every_style_has_ten_glyphs() -> None:
    for style in BORDER_STYLES.values():
        glyphs = dataclasses.astuple(style)
        assert len(glyphs) == 10
        assert all(isinstance(g, str) and g for g in glyphs)


def test_lookup_by_name() -> None:
    style = get_border_style("unicode")
    assert (style.top_left, style.top, style.top_right) == ("┌", "─", "┐")
    assert (style.left, style.middle, style.right) == ("│", " ", "│")
    assert (style.bottom_left, style.bottom, style.bottom_right) == ("└", "─", "┘")
    assert style.line == "╲"


def test_think_pointer() -> None:
    assert get_border_style("think").line == "o"
    assert get_border_style("say").line == "\\"


def test_unknown_style() -> None:
    with pytest.raises(UnknownStyleError) as exc_info:
        get_border_style("nope")
    assert str(exc_info.value) == "no such border style: nope"
    assert isinstance(exc_info.value, TewiError)
    assert isinstance(exc_info.value, LookupError)


def test_catalog_is_read_only() -> None:
    with pytest.raises(TypeError):
        BORDER_STYLES["new"] = BORDER_STYLES["say"]
    with pytest.raises(dataclasses.FrozenInstanceError):
        BORDER_STYLES["say"].top = "="


def test_border_style_fields_in_frame_order() -> None:
    names = [f.name for f in dataclasses.fields(BorderStyle)]
    assert names == [
        "top_left", "top", "top_right",
        "left", "middle", "right",
        "bottom_left", "bottom", "bottom_right",
        "line",
    ]
