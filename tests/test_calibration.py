"""Pinned calibration constants.

These values were tuned against PowerPoint's rendering rather than derived
from SVG semantics. A failure here means the calibration changed; update
the expected values only together with a re-check against the renderer.
"""

import pytest

from config import defaults


@pytest.mark.parametrize("name,expected", [
    ("STROKE_WIDTH_DIVISOR", 10.0),
    ("VERTICAL_OFFSET_CORRECTION", -1.0),
    ("TEXT_FONT_SCALE", 0.55),
    ("RECT_LABEL_FONT_SCALE", 0.8),
    ("TEXT_WIDTH_DIVISOR", 60.0),
    ("MIN_TEXT_WIDTH", 1.5),
    ("BASELINE_DIVISOR", 50.0),
    ("TEXT_LINE_HEIGHT_FACTOR", 1.4),
    ("RECT_LABEL_INSET", 0.05),
    ("ROUNDING_DIVISOR", 10.0),
    ("MAX_ROUNDING", 0.5),
])
def test_calibration_constant(name, expected):
    assert getattr(defaults, name) == expected


def test_placement_defaults():
    assert defaults.DEFAULT_TARGET_WIDTH == 9.0
    assert defaults.DEFAULT_TARGET_HEIGHT == 6.5
    assert defaults.DEFAULT_SLIDE_WIDTH == 10.0
    assert defaults.DEFAULT_SLIDE_HEIGHT == 5.63
    assert defaults.DEFAULT_VIEWBOX == (0.0, 0.0, 1000.0, 600.0)


def test_named_color_table():
    assert set(defaults.NAMED_COLORS) == {
        "white", "black", "red", "green", "blue", "gray", "grey",
        "yellow", "orange", "pink",
    }
    assert defaults.NAMED_COLORS["green"] == "#00FF00"
