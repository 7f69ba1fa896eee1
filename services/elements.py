"""
Structured Element Descriptors

Pydantic v2 models for the JSON element array returned by the SVG
structuring request. Coordinates are slide inches.
"""

from typing import Annotated, Any, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class _Descriptor(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class TextDescriptor(_Descriptor):
    type: Literal["text"]
    text: str = ""
    x: float
    y: float
    font_size: float = Field(12, alias="fontSize")
    color: Optional[str] = None


class RectDescriptor(_Descriptor):
    type: Literal["rect"]
    x: float
    y: float
    w: float
    h: float
    fill: Optional[str] = None
    stroke: Optional[str] = None
    stroke_width: Optional[float] = Field(None, alias="strokeWidth")
    text: Optional[str] = None


class CircleDescriptor(_Descriptor):
    type: Literal["circle"]
    x: float
    y: float
    radius: float
    fill: Optional[str] = None
    stroke: Optional[str] = None


class EllipseDescriptor(_Descriptor):
    type: Literal["ellipse"]
    x: float
    y: float
    w: float
    h: float
    fill: Optional[str] = None
    stroke: Optional[str] = None


class LineDescriptor(_Descriptor):
    type: Literal["line"]
    x1: float
    y1: float
    x2: float
    y2: float
    color: Optional[str] = None
    width: Optional[float] = None


class PathDescriptor(_Descriptor):
    type: Literal["path"]
    points: List[Tuple[float, float]] = Field(default_factory=list)
    fill: Optional[str] = None
    stroke: Optional[str] = None


ElementDescriptor = Annotated[
    Union[
        TextDescriptor,
        RectDescriptor,
        CircleDescriptor,
        EllipseDescriptor,
        LineDescriptor,
        PathDescriptor,
    ],
    Field(discriminator="type"),
]

_ELEMENT_LIST = TypeAdapter(List[ElementDescriptor])


def validate_elements(data: Any) -> List[ElementDescriptor]:
    """Validate a decoded JSON array of element descriptors.

    Raises pydantic.ValidationError when the data does not match.
    """
    return _ELEMENT_LIST.validate_python(data)


def elements_to_json(elements: List[ElementDescriptor]) -> List[dict]:
    """Dump descriptors back to plain JSON-ready dicts using the wire names."""
    return _ELEMENT_LIST.dump_python(elements, by_alias=True, exclude_none=True)
