"""
SVG to PPTX conversion pipeline.

parse -> view transform -> emit primitives -> render one slide -> save.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from config.defaults import DEFAULT_OUTPUT_FILENAME

from .emitter import emit_children
from .geometry import PlacementOptions, compute_view_transform
from .primitives import Primitive
from .slide_builder import SlideBuilder
from .svg_parser import parse_svg

logger = logging.getLogger(__name__)

_SVG_BLOCK_RE = re.compile(r"<svg[\s\S]*?</svg>", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")


def convert_svg(
    svg_text: str,
    options: Optional[PlacementOptions] = None
) -> List[Primitive]:
    """
    Convert SVG markup into slide primitives.

    Args:
        svg_text: SVG document text.
        options: Placement options (defaults when None).

    Returns:
        Primitives in document order.

    Raises:
        SvgParseError: If the markup cannot be parsed.
        DegenerateGeometryError: If the content has no usable size.
    """
    root = parse_svg(svg_text)
    transform = compute_view_transform(root.attributes, options)
    primitives = emit_children(root, transform)
    logger.info(f"Emitted {len(primitives)} primitives")
    return primitives


def svg_to_pptx(
    svg_text: str,
    output_path: Union[str, Path] = DEFAULT_OUTPUT_FILENAME,
    options: Optional[PlacementOptions] = None
) -> Path:
    """
    Convert SVG markup into a single-slide PPTX file.

    Args:
        svg_text: SVG document text.
        output_path: Destination ``.pptx`` path.
        options: Placement options (defaults when None).

    Returns:
        Path of the written presentation.

    Raises:
        ConversionError: On parse, geometry or write failure. Nothing is
            left at ``output_path`` when the write fails.
    """
    options = options or PlacementOptions()
    primitives = convert_svg(svg_text, options)

    builder = SlideBuilder()
    builder.create_presentation(options.slide_width, options.slide_height)
    builder.add_slide(primitives)
    return builder.save(Path(output_path))


def build_output_filename(title: str) -> str:
    """
    Derive a ``.pptx`` file name from a title.

    Example:
        >>> build_output_filename("Quarterly  sales chart")
        'Quarterly_sales_chart.pptx'
    """
    name = _WHITESPACE_RE.sub("_", (title or "").strip())
    if not name:
        return DEFAULT_OUTPUT_FILENAME
    return f"{name}.pptx"


def extract_svgs(text: str) -> List[str]:
    """Return every ``<svg>...</svg>`` block found in free text."""
    if not text:
        return []
    return _SVG_BLOCK_RE.findall(text)
