"""
Convention-agnostic attribute lookup.

SVG attributes are hyphenated (``stroke-width``) while hand-written or
tool-generated input sometimes uses camelCase (``strokeWidth``). Lookups
go through :func:`get_property` so both spellings resolve the same way.
"""
from __future__ import annotations

import re
from typing import Any, Mapping, Optional

_HYPHEN_RE = re.compile(r"-([a-z])")
_UPPER_RE = re.compile(r"([A-Z])")


def to_camel_case(name: str) -> str:
    """``stroke-width`` -> ``strokeWidth``."""
    return _HYPHEN_RE.sub(lambda m: m.group(1).upper(), name)


def to_kebab_case(name: str) -> str:
    """``strokeWidth`` -> ``stroke-width``."""
    return _UPPER_RE.sub(r"-\1", name).lower()


def get_property(
    attributes: Optional[Mapping[str, Any]],
    name: str,
    default: Any = None
) -> Any:
    """
    Resolve an attribute by its exact, camelCase or kebab-case name.

    Args:
        attributes: Attribute mapping of a parsed element (may be None).
        name: Logical property name in either convention.
        default: Value returned when no spelling is present.

    Returns:
        The first present value, or ``default``.

    Example:
        >>> get_property({"strokeWidth": "3"}, "stroke-width")
        '3'
    """
    if not attributes:
        return default

    for key in (name, to_camel_case(name), to_kebab_case(name)):
        value = attributes.get(key)
        if value is not None:
            return value
    return default
