"""
SVG document parsing.

Turns SVG markup into an immutable tree of :class:`SvgElement` nodes using
lxml. Namespaces are dropped from tag and attribute names; character data
is kept as ``#text`` child nodes so labels can be recovered later.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from lxml import etree

from .errors import SvgParseError

logger = logging.getLogger(__name__)

TEXT_NODE = "#text"

# The markup arrives already decoded, so any declared encoding is stale
_XML_DECLARATION_RE = re.compile(r"^\s*<\?xml\b[^>]*\?>")


@dataclass(frozen=True)
class SvgElement:
    """A parsed element: tag, attributes, children and optional text value."""

    tag: str
    attributes: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    children: Tuple["SvgElement", ...] = ()
    value: Optional[str] = None

    @property
    def is_text_node(self) -> bool:
        return self.tag == TEXT_NODE

    def find_child(self, tag: str) -> Optional["SvgElement"]:
        """First direct child with the given tag."""
        for child in self.children:
            if child.tag == tag:
                return child
        return None

    def text_content(self, strip: bool = True) -> str:
        """Concatenated text of all descendant text nodes."""
        parts: List[str] = []
        self._collect_text(parts)
        text = "".join(parts)
        return text.strip() if strip else text

    def _collect_text(self, parts: List[str]) -> None:
        if self.is_text_node:
            parts.append(self.value or "")
            return
        for child in self.children:
            child._collect_text(parts)


def _text_node(text: Optional[str]) -> Optional[SvgElement]:
    if text is None or not text.strip():
        return None
    return SvgElement(tag=TEXT_NODE, value=text)


def _build_element(node) -> SvgElement:
    """Convert an lxml element (and its subtree) into an SvgElement."""
    attributes = {
        etree.QName(key).localname: value for key, value in node.attrib.items()
    }

    children: List[SvgElement] = []
    leading = _text_node(node.text)
    if leading is not None:
        children.append(leading)

    for child in node:
        # Comments and processing instructions carry a non-string tag
        if isinstance(child.tag, str):
            children.append(_build_element(child))
        tail = _text_node(child.tail)
        if tail is not None:
            children.append(tail)

    return SvgElement(
        tag=etree.QName(node).localname,
        attributes=MappingProxyType(attributes),
        children=tuple(children),
    )


def parse_svg(svg_text: str) -> SvgElement:
    """
    Parse SVG markup into an element tree.

    Args:
        svg_text: A single ``<svg>...</svg>`` document. An XML declaration
            and DOCTYPE are allowed.

    Returns:
        The root ``svg`` element.

    Raises:
        SvgParseError: If the text is empty, not well-formed, or its root
            element is not ``svg``.
    """
    if svg_text is None or not str(svg_text).strip():
        raise SvgParseError("SVG content is empty")

    parser = etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        huge_tree=False,
    )
    try:
        markup = _XML_DECLARATION_RE.sub("", str(svg_text).lstrip("\ufeff"), count=1).strip()
        root = etree.fromstring(markup, parser)
    except etree.XMLSyntaxError as e:
        raise SvgParseError(f"Invalid SVG markup: {e}") from e

    tag = etree.QName(root).localname
    if tag != "svg":
        raise SvgParseError(f"Root element must be <svg>, got <{tag}>")

    element = _build_element(root)
    logger.debug(f"Parsed SVG with {len(element.children)} top-level nodes")
    return element
