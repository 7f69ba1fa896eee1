"""
Core business logic package.

Contains SVG parsing, geometry, primitive emission and PPTX generation.
"""
from .attributes import get_property, to_camel_case, to_kebab_case
from .colors import normalize_color, to_rgb
from .converter import build_output_filename, convert_svg, extract_svgs, svg_to_pptx
from .emitter import ElementKind, emit_children, emit_element
from .errors import (
    ConversionError,
    DegenerateGeometryError,
    PresentationWriteError,
    SvgParseError,
)
from .geometry import (
    PlacementOptions,
    ViewTransform,
    compute_view_transform,
    convert_coordinate,
    parse_number,
    parse_view_box,
)
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
from .slide_builder import SlideBuilder
from .svg_parser import SvgElement, parse_svg

__all__ = [
    # Attributes & colors
    "get_property",
    "to_camel_case",
    "to_kebab_case",
    "normalize_color",
    "to_rgb",
    # Geometry
    "PlacementOptions",
    "ViewTransform",
    "compute_view_transform",
    "convert_coordinate",
    "parse_number",
    "parse_view_box",
    # Parsing
    "SvgElement",
    "parse_svg",
    # Primitives
    "Primitive",
    "Rectangle",
    "RoundedRectangle",
    "Ellipse",
    "Line",
    "LineStyle",
    "TextBox",
    "DashStyle",
    "TextAlign",
    "VerticalAnchor",
    # Emission
    "ElementKind",
    "emit_element",
    "emit_children",
    # Slide Builder
    "SlideBuilder",
    # Pipeline
    "convert_svg",
    "svg_to_pptx",
    "build_output_filename",
    "extract_svgs",
    # Errors
    "ConversionError",
    "SvgParseError",
    "DegenerateGeometryError",
    "PresentationWriteError",
]
