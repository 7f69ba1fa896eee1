"""
Exception types raised by the conversion pipeline.
"""
from __future__ import annotations


class ConversionError(Exception):
    """Base class for errors that abort an SVG to PPTX conversion."""


class SvgParseError(ConversionError):
    """The input is empty, not well-formed XML, or not an <svg> document."""


class DegenerateGeometryError(ConversionError):
    """The source content has no usable area to scale onto the slide."""


class PresentationWriteError(ConversionError, OSError):
    """The presentation could not be serialized or written."""
