"""
Upstream model services.

Image -> SVG and SVG -> structured element requests.
"""
from .claude_client import (
    ClaudeClient,
    MissingCredentialError,
    ServiceError,
    UnsupportedImageError,
    UpstreamResponseError,
    detect_image_type,
)
from .elements import ElementDescriptor, elements_to_json, validate_elements

__all__ = [
    "ClaudeClient",
    "ServiceError",
    "MissingCredentialError",
    "UnsupportedImageError",
    "UpstreamResponseError",
    "detect_image_type",
    "ElementDescriptor",
    "validate_elements",
    "elements_to_json",
]
