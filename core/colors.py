"""
Paint value handling.

:func:`normalize_color` turns an SVG paint token into the value carried by
drawing primitives; :func:`to_rgb` converts that value into a python-pptx
colour when rendering.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from pptx.dml.color import RGBColor

from config.defaults import NAMED_COLORS

logger = logging.getLogger(__name__)

_RGB_FUNC_RE = re.compile(
    r"^rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$",
    re.IGNORECASE,
)
_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def normalize_color(color: Optional[str]) -> Optional[str]:
    """
    Normalize a raw paint token.

    Args:
        color: Attribute value such as ``"#FF0000"``, ``"red"`` or ``"none"``.

    Returns:
        None when the token is missing or ``"none"`` (no paint), the token
        itself when it is a ``#`` colour, the hex value for a known colour
        name, otherwise the token unchanged.
    """
    if not color or color == "none":
        return None
    color = str(color)
    if color.startswith("#"):
        return color
    return NAMED_COLORS.get(color.lower(), color)


def to_rgb(color: Optional[str]) -> Optional[RGBColor]:
    """
    Convert a normalized colour into an RGBColor.

    Accepts ``#RRGGBB``, ``#RGB`` and ``rgb(r, g, b)``. Anything else is
    logged and returned as None so the caller can omit the paint.
    """
    if color is None:
        return None

    value = color.strip()
    match = _HEX_RE.match(value)
    if match:
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return RGBColor.from_string(digits.upper())

    match = _RGB_FUNC_RE.match(value)
    if match:
        r, g, b = (min(int(part), 255) for part in match.groups())
        return RGBColor(r, g, b)

    logger.warning(f"Unsupported color value, paint omitted: {color!r}")
    return None
