"""
Coordinate conversion utilities.

Maps SVG user-space coordinates onto slide-space inches. The view
transform is computed once per document from the root <svg> element and
the placement options, then applied to every coordinate read from the
element tree.
"""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from config.defaults import (
    DEFAULT_SLIDE_HEIGHT,
    DEFAULT_SLIDE_WIDTH,
    DEFAULT_TARGET_HEIGHT,
    DEFAULT_TARGET_WIDTH,
    DEFAULT_USER_SCALE,
    DEFAULT_VIEWBOX,
    VERTICAL_OFFSET_CORRECTION,
)

from .attributes import get_property
from .errors import DegenerateGeometryError

logger = logging.getLogger(__name__)

_NUMBER_PREFIX_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")
_VIEWBOX_SEP_RE = re.compile(r"[\s,]+")


def parse_number(value: Any) -> Optional[float]:
    """
    Parse the leading numeric part of a value.

    Args:
        value: String or number, e.g. ``"200"``, ``"12.5px"`` or ``7``.

    Returns:
        The parsed float, or None when there is no numeric prefix.

    Example:
        >>> parse_number("200px")
        200.0
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    match = _NUMBER_PREFIX_RE.match(str(value))
    if not match:
        return None
    return float(match.group(1))


def convert_coordinate(value: Any, scale: float = 1.0) -> float:
    """
    Convert a raw coordinate or length into scaled units.

    Args:
        value: Attribute value (string, number or None).
        scale: Scale factor applied to the parsed number.

    Returns:
        ``0.0`` for missing or non-numeric input, else ``number * scale``.
    """
    number = parse_number(value)
    if number is None or not math.isfinite(number):
        return 0.0
    return number * scale


def parse_view_box(value: Any) -> Tuple[float, float, float, float]:
    """
    Parse a ``viewBox`` attribute into (min_x, min_y, width, height).

    Falls back to the default viewBox when the value is absent or does
    not hold exactly four finite numbers.
    """
    if value is None:
        return DEFAULT_VIEWBOX

    parts = [p for p in _VIEWBOX_SEP_RE.split(str(value).strip()) if p]
    if len(parts) != 4:
        logger.debug(f"Malformed viewBox {value!r}, using default")
        return DEFAULT_VIEWBOX

    try:
        numbers = tuple(float(p) for p in parts)
    except ValueError:
        logger.debug(f"Malformed viewBox {value!r}, using default")
        return DEFAULT_VIEWBOX

    if not all(math.isfinite(n) for n in numbers):
        return DEFAULT_VIEWBOX
    return numbers


def _explicit_dimension(value: Any) -> Optional[float]:
    """Root width/height, or None unless it is a finite positive length."""
    if value is None or str(value).strip().endswith("%"):
        return None
    number = parse_number(value)
    if number is None or not math.isfinite(number) or number <= 0:
        return None
    return number


@dataclass
class PlacementOptions:
    """
    Where and how large the graphic is drawn on the slide (inches).

    ``x``/``y`` of 0 mean "center on the slide" for that axis.
    """

    x: float = 0.0
    y: float = 0.0
    w: float = DEFAULT_TARGET_WIDTH
    h: float = DEFAULT_TARGET_HEIGHT
    preserve_aspect_ratio: bool = True
    scale: float = DEFAULT_USER_SCALE
    slide_width: float = DEFAULT_SLIDE_WIDTH
    slide_height: float = DEFAULT_SLIDE_HEIGHT

    def __post_init__(self) -> None:
        for name in ("x", "y"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be a finite number")
        for name in ("w", "h", "scale", "slide_width", "slide_height"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be a positive number, got {value}")


@dataclass(frozen=True)
class ViewTransform:
    """Uniform scale plus translation from SVG user space to slide inches."""

    scale: float
    offset_x: float
    offset_y: float

    def x(self, value: Any) -> float:
        """Horizontal SVG coordinate -> slide inches."""
        return self.offset_x + convert_coordinate(value, self.scale)

    def y(self, value: Any) -> float:
        """Vertical SVG coordinate -> slide inches."""
        return self.offset_y + convert_coordinate(value, self.scale)

    def length(self, value: Any) -> float:
        """SVG length -> inches (no translation)."""
        return convert_coordinate(value, self.scale)

    def to_dict(self) -> Dict[str, float]:
        return {
            "scale": self.scale,
            "offset_x": self.offset_x,
            "offset_y": self.offset_y,
        }


def source_dimensions(root_attributes: Mapping[str, Any]) -> Tuple[float, float]:
    """
    Determine the source content size of an <svg> root.

    Explicit ``width``/``height`` win over the viewBox size per axis.
    """
    view_box = parse_view_box(get_property(root_attributes, "viewBox"))
    width = _explicit_dimension(get_property(root_attributes, "width"))
    height = _explicit_dimension(get_property(root_attributes, "height"))
    return (
        width if width is not None else view_box[2],
        height if height is not None else view_box[3],
    )


def compute_view_transform(
    root_attributes: Mapping[str, Any],
    options: Optional[PlacementOptions] = None
) -> ViewTransform:
    """
    Compute the view transform for one document.

    Args:
        root_attributes: Attributes of the root <svg> element.
        options: Placement options (defaults when None).

    Returns:
        The immutable ViewTransform used for every element.

    Raises:
        DegenerateGeometryError: If the source width or height is not a
            positive finite number.
    """
    options = options or PlacementOptions()
    source_width, source_height = source_dimensions(root_attributes)

    for label, value in (("width", source_width), ("height", source_height)):
        if not math.isfinite(value) or value <= 0:
            raise DegenerateGeometryError(
                f"SVG content {label} must be positive, got {value}"
            )

    scale_x = options.w / source_width
    scale_y = options.h / source_height
    base_scale = min(scale_x, scale_y) if options.preserve_aspect_ratio else scale_x
    final_scale = base_scale * options.scale

    center_x = (options.slide_width - source_width * final_scale) / 2
    center_y = (options.slide_height - source_height * final_scale) / 2

    offset_x = options.x if options.x != 0 else center_x
    offset_y = (options.y if options.y != 0 else center_y) + VERTICAL_OFFSET_CORRECTION

    transform = ViewTransform(scale=final_scale, offset_x=offset_x, offset_y=offset_y)
    logger.info(f"SVG dimensions: {source_width}x{source_height} -> {transform.to_dict()}")
    return transform
