"""
PowerPoint slide generation module.

Renders drawing primitives onto slides with python-pptx and writes the
presentation to disk.
"""
from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, Optional

from pptx import Presentation
from pptx.enum.dml import MSO_LINE_DASH_STYLE
from pptx.enum.shapes import MSO_CONNECTOR, MSO_SHAPE
from pptx.enum.text import MSO_ANCHOR, MSO_AUTO_SIZE, PP_ALIGN
from pptx.oxml.ns import qn
from pptx.oxml.xmlchemy import OxmlElement
from pptx.util import Inches, Pt

from config.defaults import DEFAULT_SLIDE_HEIGHT, DEFAULT_SLIDE_WIDTH

from .colors import to_rgb
from .errors import PresentationWriteError
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

logger = logging.getLogger(__name__)

_DASH_STYLES = {
    DashStyle.solid: MSO_LINE_DASH_STYLE.SOLID,
    DashStyle.dash: MSO_LINE_DASH_STYLE.DASH,
    DashStyle.dot: MSO_LINE_DASH_STYLE.ROUND_DOT,
}

_ALIGNMENTS = {
    TextAlign.left: PP_ALIGN.LEFT,
    TextAlign.center: PP_ALIGN.CENTER,
    TextAlign.right: PP_ALIGN.RIGHT,
}

_ANCHORS = {
    VerticalAnchor.top: MSO_ANCHOR.TOP,
    VerticalAnchor.middle: MSO_ANCHOR.MIDDLE,
}


class SlideBuilder:
    """
    Builds PowerPoint presentations from drawing primitives.

    Each primitive becomes one native shape; shapes are added in the
    order given, which is their stacking order on the slide.
    """

    def __init__(self):
        self.prs: Optional[Presentation] = None

    def create_presentation(
        self,
        slide_width: float = DEFAULT_SLIDE_WIDTH,
        slide_height: float = DEFAULT_SLIDE_HEIGHT
    ) -> None:
        """
        Initialize a new presentation.

        Args:
            slide_width: Slide width in inches.
            slide_height: Slide height in inches.
        """
        self.prs = Presentation()
        self.prs.slide_width = Inches(slide_width)
        self.prs.slide_height = Inches(slide_height)
        logger.info(f"Presentation created: {slide_width}x{slide_height} in")

    def add_slide(self, primitives: Iterable[Primitive]) -> None:
        """
        Add a blank slide holding the given primitives.

        Args:
            primitives: Primitives in stacking order (last on top).

        Raises:
            RuntimeError: If presentation not initialized.
        """
        if self.prs is None:
            raise RuntimeError(
                "Presentation not initialized. Call create_presentation() first."
            )

        slide = self.prs.slides.add_slide(self._get_blank_layout())

        count = 0
        for primitive in primitives:
            self._add_primitive(slide, primitive)
            count += 1

        logger.debug(f"Added slide with {count} shapes")

    def _get_blank_layout(self):
        """
        Get a blank slide layout.

        Tries index 6 first (standard blank), falls back to last layout.
        """
        try:
            if len(self.prs.slide_layouts) > 6:
                return self.prs.slide_layouts[6]
            else:
                return self.prs.slide_layouts[-1]
        except IndexError:
            return self.prs.slide_layouts[0]

    def _add_primitive(self, slide, primitive: Primitive) -> None:
        if isinstance(primitive, RoundedRectangle):
            shape = self._add_autoshape(slide, MSO_SHAPE.ROUNDED_RECTANGLE, primitive)
            shape.adjustments[0] = primitive.rounding
        elif isinstance(primitive, Rectangle):
            self._add_autoshape(slide, MSO_SHAPE.RECTANGLE, primitive)
        elif isinstance(primitive, Ellipse):
            self._add_autoshape(slide, MSO_SHAPE.OVAL, primitive)
        elif isinstance(primitive, Line):
            self._add_line(slide, primitive)
        elif isinstance(primitive, TextBox):
            self._add_text_box(slide, primitive)
        else:
            raise TypeError(f"Unknown primitive: {primitive!r}")

    def _add_autoshape(self, slide, shape_type, primitive):
        shape = slide.shapes.add_shape(
            shape_type,
            Inches(primitive.x),
            Inches(primitive.y),
            Inches(max(primitive.w, 0.0)),
            Inches(max(primitive.h, 0.0)),
        )

        fill = to_rgb(primitive.fill)
        if fill is None:
            shape.fill.background()
        else:
            shape.fill.solid()
            shape.fill.fore_color.rgb = fill

        self._apply_line_style(shape.line, primitive.line)
        return shape

    def _apply_line_style(self, line, style: Optional[LineStyle]) -> None:
        color = to_rgb(style.color) if style is not None else None
        if color is None:
            line.fill.background()
            return

        line.color.rgb = color
        if style.width > 0:
            line.width = Pt(style.width)
        line.dash_style = _DASH_STYLES[style.dash]

    def _add_line(self, slide, primitive: Line) -> None:
        """
        Add a straight connector across the primitive's bounding box.

        The diagonal runs from the top-left corner unless flip_v is set.
        """
        left, right = primitive.x, primitive.x + primitive.w
        top, bottom = primitive.y, primitive.y + primitive.h
        begin_y, end_y = (bottom, top) if primitive.flip_v else (top, bottom)

        connector = slide.shapes.add_connector(
            MSO_CONNECTOR.STRAIGHT,
            Inches(left),
            Inches(begin_y),
            Inches(right),
            Inches(end_y),
        )
        self._apply_line_style(connector.line, primitive.line)

        if primitive.line.end_arrow:
            ln = connector._element.spPr.get_or_add_ln()
            for child in list(ln):
                if child.tag == qn("a:tailEnd"):
                    ln.remove(child)
            tail = OxmlElement("a:tailEnd")
            tail.set("type", "triangle")
            ln.append(tail)

    def _add_text_box(self, slide, primitive: TextBox) -> None:
        """
        Add a transparent text box.

        Args:
            slide: Slide object to add text box to.
            primitive: TextBox with text, position and font information.
        """
        textbox = slide.shapes.add_textbox(
            Inches(primitive.x),
            Inches(primitive.y),
            Inches(max(primitive.w, 0.0)),
            Inches(max(primitive.h, 0.0)),
        )

        tf = textbox.text_frame
        tf.word_wrap = True
        tf.auto_size = MSO_AUTO_SIZE.SHAPE_TO_FIT_TEXT
        tf.vertical_anchor = _ANCHORS[primitive.anchor]

        p = tf.paragraphs[0]
        p.alignment = _ALIGNMENTS[primitive.align]
        run = p.add_run()
        run.text = primitive.text
        run.font.size = Pt(primitive.font_size)
        run.font.bold = primitive.bold
        run.font.italic = primitive.italic
        color = to_rgb(primitive.color)
        if color is not None:
            run.font.color.rgb = color

        # Make text box transparent
        textbox.fill.background()
        textbox.line.fill.background()

    def save(self, output_path: Path) -> Path:
        """
        Save the presentation to a file.

        The document is written to a temporary file next to the target and
        moved into place, so a failed write never leaves a partial file at
        ``output_path``.

        Args:
            output_path: Path to save the PPTX file.

        Returns:
            The written path.

        Raises:
            RuntimeError: If no presentation to save.
            PresentationWriteError: If file cannot be written.
        """
        if self.prs is None:
            raise RuntimeError("No presentation to save.")

        output_path = Path(output_path)
        tmp_name = None
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{output_path.stem}-", suffix=".pptx", dir=output_path.parent
            )
            with os.fdopen(fd, "wb") as f:
                self.prs.save(f)
            os.replace(tmp_name, output_path)
            tmp_name = None
            logger.info(f"Presentation saved to: {output_path} ({self.slide_count} slide(s))")
            return output_path
        except Exception as e:
            logger.error(f"Failed to save presentation: {e}")
            raise PresentationWriteError(f"Failed to save presentation: {e}") from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.remove(tmp_name)

    @property
    def slide_count(self) -> int:
        """Get the number of slides in the presentation."""
        if self.prs is None:
            return 0
        return len(self.prs.slides)
