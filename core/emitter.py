"""
Element emitter.

Maps each parsed SVG element onto zero or more slide primitives. Every
element kind has one handler; groups recurse into their children with the
same transform (nested ``transform`` attributes are not composed). Each
call returns its primitives so document order is the output order.
"""
from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Callable, Dict, List, Optional

from svg.path import parse_path

from config.defaults import (
    BASELINE_DIVISOR,
    DEFAULT_LINE_COLOR,
    DEFAULT_LINE_WIDTH_PT,
    DEFAULT_RECT_LABEL_FONT_SIZE,
    DEFAULT_TEXT_COLOR,
    DEFAULT_TEXT_FONT_SIZE,
    MAX_ROUNDING,
    MIN_TEXT_WIDTH,
    RECT_LABEL_FONT_SCALE,
    RECT_LABEL_INSET,
    ROUNDING_DIVISOR,
    STROKE_WIDTH_DIVISOR,
    TEXT_FONT_SCALE,
    TEXT_LINE_HEIGHT_FACTOR,
    TEXT_WIDTH_DIVISOR,
)

from .attributes import get_property
from .colors import normalize_color
from .geometry import ViewTransform, parse_number
from .primitives import (
    DashStyle,
    Ellipse,
    Line,
    LineStyle,
    Primitive,
    Rectangle,
    RoundedRectangle,
    TextAlign,
    TextBox,
    VerticalAnchor,
)
from .svg_parser import SvgElement

logger = logging.getLogger(__name__)

ARROW_MARKER_TOKENS = ("arrowhead", "marker")


class ElementKind(str, Enum):
    """Element kinds the emitter knows about."""
    rect = "rect"
    circle = "circle"
    ellipse = "ellipse"
    line = "line"
    text = "text"
    path = "path"
    polygon = "polygon"
    polyline = "polyline"
    group = "g"
    other = "other"

    @classmethod
    def from_tag(cls, tag: str) -> "ElementKind":
        try:
            return cls(tag)
        except ValueError:
            return cls.other


# ============================================================
# STYLE HELPERS
# ============================================================

def stroke_width(attributes) -> float:
    """``stroke-width`` divided by the calibration divisor, 0 when absent."""
    number = parse_number(get_property(attributes, "stroke-width"))
    if number is None or not math.isfinite(number):
        return 0.0
    return number / STROKE_WIDTH_DIVISOR


def outline_style(attributes) -> Optional[LineStyle]:
    """Outline for closed shapes, or None when the stroke is unpainted."""
    color = normalize_color(get_property(attributes, "stroke", "none"))
    if color is None:
        return None
    return LineStyle(color=color, width=stroke_width(attributes))


def stroke_style(attributes, dash: DashStyle = DashStyle.solid, end_arrow: bool = False) -> LineStyle:
    """Stroke for lines and path segments, which always get drawn."""
    color = normalize_color(get_property(attributes, "stroke", "none"))
    return LineStyle(
        color=color or DEFAULT_LINE_COLOR,
        width=stroke_width(attributes) or DEFAULT_LINE_WIDTH_PT,
        dash=dash,
        end_arrow=end_arrow,
    )


def dash_style(dasharray) -> DashStyle:
    """Classify ``stroke-dasharray`` by substring: "5" dashed, "1" dotted."""
    if not dasharray or not isinstance(dasharray, str):
        return DashStyle.solid
    if "5" in dasharray:
        return DashStyle.dash
    if "1" in dasharray:
        return DashStyle.dot
    return DashStyle.solid


def has_end_arrow(attributes) -> bool:
    marker_end = str(get_property(attributes, "marker-end", ""))
    return any(token in marker_end for token in ARROW_MARKER_TOKENS)


def is_bold(font_weight) -> bool:
    return str(font_weight) in ("bold", "700")


def font_size(attributes, default: float) -> float:
    number = parse_number(get_property(attributes, "font-size"))
    if number is None or not math.isfinite(number) or number <= 0:
        return default
    return number


# ============================================================
# ELEMENT HANDLERS
# ============================================================

def _emit_rect(element: SvgElement, transform: ViewTransform) -> List[Primitive]:
    props = element.attributes
    x = transform.x(get_property(props, "x", 0))
    y = transform.y(get_property(props, "y", 0))
    w = transform.length(get_property(props, "width", 0))
    h = transform.length(get_property(props, "height", 0))
    fill = normalize_color(get_property(props, "fill", "none"))
    outline = outline_style(props)

    radius = transform.length(get_property(props, "rx", 0))
    if radius <= 0:
        radius = transform.length(get_property(props, "ry", 0))
    rounding = min(radius / w / ROUNDING_DIVISOR, MAX_ROUNDING) if radius > 0 and w > 0 else 0.0

    primitives: List[Primitive] = []
    if rounding > 0:
        primitives.append(RoundedRectangle(x, y, w, h, rounding=rounding, fill=fill, line=outline))
    else:
        primitives.append(Rectangle(x, y, w, h, fill=fill, line=outline))

    label = element.find_child("text")
    text = label.text_content() if label is not None else ""
    if text:
        label_props = label.attributes
        size = font_size(label_props, DEFAULT_RECT_LABEL_FONT_SIZE) * RECT_LABEL_FONT_SCALE
        color = normalize_color(get_property(label_props, "fill", DEFAULT_TEXT_COLOR))
        primitives.append(TextBox(
            x=x + RECT_LABEL_INSET,
            y=y + RECT_LABEL_INSET,
            w=max(w - 2 * RECT_LABEL_INSET, 0.0),
            h=max(h - 2 * RECT_LABEL_INSET, 0.0),
            text=text,
            font_size=size,
            color=color or DEFAULT_TEXT_COLOR,
            bold=is_bold(get_property(label_props, "font-weight", "normal")),
            align=TextAlign.center,
            anchor=VerticalAnchor.middle,
        ))
    return primitives


def _emit_circle(element: SvgElement, transform: ViewTransform) -> List[Primitive]:
    props = element.attributes
    cx = transform.x(get_property(props, "cx", 0))
    cy = transform.y(get_property(props, "cy", 0))
    r = transform.length(get_property(props, "r", 0))
    return [Ellipse(
        cx - r, cy - r, 2 * r, 2 * r,
        fill=normalize_color(get_property(props, "fill", "none")),
        line=outline_style(props),
    )]


def _emit_ellipse(element: SvgElement, transform: ViewTransform) -> List[Primitive]:
    props = element.attributes
    cx = transform.x(get_property(props, "cx", 0))
    cy = transform.y(get_property(props, "cy", 0))
    rx = transform.length(get_property(props, "rx", 0))
    ry = transform.length(get_property(props, "ry", 0))
    return [Ellipse(
        cx - rx, cy - ry, 2 * rx, 2 * ry,
        fill=normalize_color(get_property(props, "fill", "none")),
        line=outline_style(props),
    )]


def _emit_line(element: SvgElement, transform: ViewTransform) -> List[Primitive]:
    props = element.attributes
    style = stroke_style(
        props,
        dash=dash_style(get_property(props, "stroke-dasharray")),
        end_arrow=has_end_arrow(props),
    )
    return [Line.between(
        transform.x(get_property(props, "x1", 0)),
        transform.y(get_property(props, "y1", 0)),
        transform.x(get_property(props, "x2", 0)),
        transform.y(get_property(props, "y2", 0)),
        style,
    )]


def _emit_text(element: SvgElement, transform: ViewTransform) -> List[Primitive]:
    props = element.attributes
    text = element.text_content()
    size = font_size(props, DEFAULT_TEXT_FONT_SIZE) * TEXT_FONT_SCALE
    size_inches = size / TEXT_WIDTH_DIVISOR
    # Width counts surrounding whitespace, the displayed label does not
    estimated_width = max(MIN_TEXT_WIDTH, size_inches * len(element.text_content(strip=False)))

    anchor = get_property(props, "text-anchor", "start")
    if anchor == "middle":
        align, shift = TextAlign.center, -estimated_width / 2
    elif anchor == "end":
        align, shift = TextAlign.right, -estimated_width
    else:
        align, shift = TextAlign.left, 0.0

    fill = normalize_color(get_property(props, "fill", "none"))
    return [TextBox(
        x=transform.x(get_property(props, "x", 0)) + shift,
        y=transform.y(get_property(props, "y", 0)) - size / BASELINE_DIVISOR,
        w=estimated_width,
        h=size_inches * TEXT_LINE_HEIGHT_FACTOR,
        text=text,
        font_size=size,
        color=fill or DEFAULT_TEXT_COLOR,
        bold=get_property(props, "font-weight", "normal") == "bold",
        italic=get_property(props, "font-style", "normal") == "italic",
        align=align,
        anchor=VerticalAnchor.top,
    )]


def _emit_path(element: SvgElement, transform: ViewTransform) -> List[Primitive]:
    props = element.attributes
    d = get_property(props, "d")
    if not d:
        return []

    # Curves are reduced to chords between segment endpoints
    try:
        points = [
            (transform.x(segment.end.real), transform.y(segment.end.imag))
            for segment in parse_path(str(d))
        ]
    except Exception as e:
        logger.warning(f"Skipping path with unparsable data {d!r}: {e}")
        return []

    if not all(math.isfinite(px) and math.isfinite(py) for px, py in points):
        logger.warning(f"Skipping path with non-finite coordinates: {d!r}")
        return []

    arrow = has_end_arrow(props)
    last = len(points) - 2
    return [
        Line.between(x1, y1, x2, y2, stroke_style(props, end_arrow=arrow and i == last))
        for i, ((x1, y1), (x2, y2)) in enumerate(zip(points, points[1:]))
    ]


def _emit_nothing(element: SvgElement, transform: ViewTransform) -> List[Primitive]:
    return []


def _emit_polyshape(element: SvgElement, transform: ViewTransform) -> List[Primitive]:
    logger.debug(f"<{element.tag}> is recognized but not rendered")
    return []


def _emit_group(element: SvgElement, transform: ViewTransform) -> List[Primitive]:
    return emit_children(element, transform)


_HANDLERS: Dict[ElementKind, Callable[[SvgElement, ViewTransform], List[Primitive]]] = {
    ElementKind.rect: _emit_rect,
    ElementKind.circle: _emit_circle,
    ElementKind.ellipse: _emit_ellipse,
    ElementKind.line: _emit_line,
    ElementKind.text: _emit_text,
    ElementKind.path: _emit_path,
    ElementKind.polygon: _emit_polyshape,
    ElementKind.polyline: _emit_polyshape,
    ElementKind.group: _emit_group,
    ElementKind.other: _emit_nothing,
}


def emit_element(element: SvgElement, transform: ViewTransform) -> List[Primitive]:
    """
    Emit the primitives for one element (and, for groups, its subtree).

    Args:
        element: Parsed SVG element.
        transform: View transform of the document.

    Returns:
        Primitives in document order.
    """
    return _HANDLERS[ElementKind.from_tag(element.tag)](element, transform)


def emit_children(element: SvgElement, transform: ViewTransform) -> List[Primitive]:
    """Emit the primitives for every child of ``element``, in order."""
    primitives: List[Primitive] = []
    for child in element.children:
        primitives.extend(emit_element(child, transform))
    return primitives
