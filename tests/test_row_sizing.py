"""Tests for row height estimation."""

import pytest

from talkrow.core import RowLayoutConfig, MINIMUM_ROW_HEIGHT
from talkrow.gui.row_sizing import estimate_row_height, clamp_row_height


@pytest.mark.parametrize('text', [None, "", "ok"])
def test_short_text_gets_at_least_minimum_height(qapp, text):
    assert estimate_row_height(text, 320) >= MINIMUM_ROW_HEIGHT


def test_long_text_grows_past_minimum(qapp):
    short = estimate_row_height("hi", 320)
    long = estimate_row_height("a rather long message body " * 40, 320)

    assert long > short
    assert long > MINIMUM_ROW_HEIGHT


def test_narrow_width_is_taller(qapp):
    text = "wrapping depends on the width of the row " * 5

    assert estimate_row_height(text, 150) > estimate_row_height(text, 900)


@pytest.mark.parametrize('width', [0, -50, 1])
def test_degenerate_width_is_still_clamped(qapp, width):
    assert estimate_row_height("some text", width) >= MINIMUM_ROW_HEIGHT


def test_empty_text_with_large_font_exceeds_minimum(qapp):
    config = RowLayoutConfig(default_font_size=60.0)

    assert estimate_row_height("", 320, config) > MINIMUM_ROW_HEIGHT


def test_larger_font_is_taller(qapp):
    text = "font size drives the estimate " * 10
    small = estimate_row_height(text, 300, RowLayoutConfig(default_font_size=10.0))
    large = estimate_row_height(text, 300, RowLayoutConfig(default_font_size=28.0))

    assert large > small


def test_clamp_row_height():
    assert clamp_row_height(5) == MINIMUM_ROW_HEIGHT
    assert clamp_row_height(45.5) == 45.5
    assert clamp_row_height(0) == 30.0
