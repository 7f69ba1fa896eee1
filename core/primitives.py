"""
Slide drawing primitives.

Each primitive is a frozen record in slide inches. The emitter produces
them in document order; the slide builder renders them in that order, so
later primitives stack on top of earlier ones.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from config.defaults import DEFAULT_LINE_COLOR, DEFAULT_LINE_WIDTH_PT


class DashStyle(str, Enum):
    """Line dash pattern."""
    solid = "solid"
    dash = "dash"
    dot = "dot"


class TextAlign(str, Enum):
    """Horizontal paragraph alignment."""
    left = "left"
    center = "center"
    right = "right"


class VerticalAnchor(str, Enum):
    """Vertical text anchoring inside a text box."""
    top = "top"
    middle = "middle"


@dataclass(frozen=True)
class LineStyle:
    """Outline of a shape or stroke of a line. Width is in points."""
    color: Optional[str] = DEFAULT_LINE_COLOR
    width: float = DEFAULT_LINE_WIDTH_PT
    dash: DashStyle = DashStyle.solid
    end_arrow: bool = False


@dataclass(frozen=True)
class Rectangle:
    x: float
    y: float
    w: float
    h: float
    fill: Optional[str] = None
    line: Optional[LineStyle] = None


@dataclass(frozen=True)
class RoundedRectangle:
    x: float
    y: float
    w: float
    h: float
    rounding: float
    fill: Optional[str] = None
    line: Optional[LineStyle] = None


@dataclass(frozen=True)
class Ellipse:
    x: float
    y: float
    w: float
    h: float
    fill: Optional[str] = None
    line: Optional[LineStyle] = None


@dataclass(frozen=True)
class Line:
    """
    Straight line across the bounding box (x, y, w, h).

    Runs top-left to bottom-right unless ``flip_v`` is set, in which case
    it runs bottom-left to top-right.
    """
    x: float
    y: float
    w: float
    h: float
    line: LineStyle
    flip_v: bool = False

    @classmethod
    def between(
        cls,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        line: LineStyle
    ) -> "Line":
        """Build a line from two endpoints, keeping its direction."""
        return cls(
            x=min(x1, x2),
            y=min(y1, y2),
            w=abs(x2 - x1),
            h=abs(y2 - y1),
            line=line,
            flip_v=(y1 > y2 and x1 < x2) or (y1 < y2 and x1 > x2),
        )


@dataclass(frozen=True)
class TextBox:
    x: float
    y: float
    w: float
    h: float
    text: str
    font_size: float
    color: str
    bold: bool = False
    italic: bool = False
    align: TextAlign = TextAlign.left
    anchor: VerticalAnchor = VerticalAnchor.top


Primitive = Union[Rectangle, RoundedRectangle, Ellipse, Line, TextBox]
