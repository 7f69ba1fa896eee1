"""Tests for attribute lookup and colour normalization."""

import pytest
from pptx.dml.color import RGBColor

from core.attributes import get_property, to_camel_case, to_kebab_case
from core.colors import normalize_color, to_rgb
from core.emitter import stroke_width


# ============================================================
# ATTRIBUTE RESOLVER TESTS
# ============================================================

def test_case_conversions():
    assert to_camel_case("stroke-width") == "strokeWidth"
    assert to_camel_case("marker-end") == "markerEnd"
    assert to_kebab_case("strokeDasharray") == "stroke-dasharray"
    assert to_kebab_case("fill") == "fill"


def test_exact_name_wins():
    props = {"stroke-width": "2", "strokeWidth": "9"}
    assert get_property(props, "stroke-width") == "2"
    assert get_property(props, "strokeWidth") == "9"


@pytest.mark.parametrize("props", [
    {"stroke-width": "3"},
    {"strokeWidth": "3"},
])
@pytest.mark.parametrize("name", ["stroke-width", "strokeWidth"])
def test_hyphenated_and_camel_case_resolve_identically(props, name):
    assert get_property(props, name) == "3"
    assert stroke_width(props) == pytest.approx(0.3)


def test_default_when_missing():
    assert get_property({"fill": "red"}, "stroke", "none") == "none"
    assert get_property(None, "fill") is None
    assert get_property({}, "fill", 0) == 0


def test_zero_value_is_present():
    assert get_property({"x": 0}, "x", 5) == 0


# ============================================================
# COLOR NORMALIZER TESTS
# ============================================================

@pytest.mark.parametrize("token", [None, "", "none"])
def test_unpainted_tokens(token):
    assert normalize_color(token) is None


def test_hex_passthrough():
    assert normalize_color("#FF0000") == "#FF0000"
    assert normalize_color("#abc") == "#abc"


def test_named_colors():
    assert normalize_color("red") == "#FF0000"
    assert normalize_color("Grey") == "#808080"
    assert normalize_color("GRAY") == "#808080"
    assert normalize_color("orange") == "#FFA500"


def test_unknown_token_passthrough():
    assert normalize_color("rgb(10, 20, 30)") == "rgb(10, 20, 30)"
    assert normalize_color("teal") == "teal"


@pytest.mark.parametrize("token", [
    None, "", "none", "#123456", "red", "BLUE", "rgb(1,2,3)", "url(#grad)", "teal",
])
def test_normalize_is_idempotent(token):
    once = normalize_color(token)
    assert normalize_color(once) == once


# ============================================================
# RENDER COLOR TESTS
# ============================================================

def test_to_rgb_formats():
    assert to_rgb("#FF0000") == RGBColor(0xFF, 0x00, 0x00)
    assert to_rgb("#0f0") == RGBColor(0x00, 0xFF, 0x00)
    assert to_rgb("rgb(10, 20, 30)") == RGBColor(10, 20, 30)


def test_to_rgb_unsupported_returns_none():
    assert to_rgb(None) is None
    assert to_rgb("url(#gradient)") is None
    assert to_rgb("teal") is None
