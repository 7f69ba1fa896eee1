"""
Vision/structuring model client.

Wraps the two model requests the converter depends on:
image -> SVG markup, and SVG markup -> structured element descriptors.
Requests go through the Anthropic SDK Messages API.
"""
from __future__ import annotations

import base64
import io
import json
import logging
from typing import Any, Dict, List, Optional

import anthropic
from PIL import Image, UnidentifiedImageError
from pydantic import ValidationError

from config.defaults import (
    CLAUDE_MAX_TOKENS,
    CLAUDE_MODEL,
    CLAUDE_TIMEOUT_SECONDS,
    SUPPORTED_IMAGE_FORMATS,
)

from .elements import ElementDescriptor, validate_elements
from .prompts import (
    IMAGE_TO_SVG_SYSTEM_PROMPT,
    IMAGE_TO_SVG_USER_PROMPT,
    SVG_TO_JSON_SYSTEM_PROMPT,
    SVG_TO_JSON_USER_PROMPT,
)

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for model request failures."""


class MissingCredentialError(ServiceError):
    """No API key is configured."""


class UnsupportedImageError(ServiceError):
    """The uploaded bytes are not a PNG or JPEG image."""


class UpstreamResponseError(ServiceError):
    """The model response was unusable; ``raw_response`` holds it for diagnosis."""

    def __init__(self, message: str, raw_response: Optional[str] = None):
        super().__init__(message)
        self.raw_response = raw_response


def detect_image_type(data: bytes) -> str:
    """
    Sniff the MIME type of image bytes from their content.

    Args:
        data: Raw image bytes. The file name is never consulted.

    Returns:
        ``"image/png"`` or ``"image/jpeg"``.

    Raises:
        UnsupportedImageError: For empty data or any other format.
    """
    if not data:
        raise UnsupportedImageError("Only JPG and PNG images are supported (empty upload)")

    try:
        with Image.open(io.BytesIO(data)) as img:
            fmt = img.format
    except (UnidentifiedImageError, OSError) as e:
        raise UnsupportedImageError("Only JPG and PNG images are supported") from e

    if fmt not in SUPPORTED_IMAGE_FORMATS:
        raise UnsupportedImageError(f"Only JPG and PNG images are supported, got {fmt}")
    return Image.MIME[fmt]


class ClaudeClient:
    """
    Client for the image and SVG analysis requests.

    Credentials are checked per request, so a client can be built before
    an API key is configured. The SDK client is created on first use.
    """

    def __init__(
        self,
        api_key: str = "",
        model: str = CLAUDE_MODEL,
        max_tokens: int = CLAUDE_MAX_TOKENS,
        timeout: float = CLAUDE_TIMEOUT_SECONDS,
        client: Optional[anthropic.Anthropic] = None
    ):
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self.timeout = timeout
        self._client = client

    def image_to_svg(self, image: bytes) -> str:
        """
        Ask the model to redraw an image as SVG.

        Args:
            image: PNG or JPEG bytes.

        Returns:
            The model's text reply (expected to be SVG markup).

        Raises:
            MissingCredentialError: If no API key is configured.
            UnsupportedImageError: If the image is not PNG/JPEG.
            UpstreamResponseError: If the request fails or has no text.
        """
        self._require_credential()
        media_type = detect_image_type(image)
        logger.info(f"Detected image MIME type: {media_type}")

        content = [
            {
                "type": "image",
                "source": {
                    "type": "base64",
                    "media_type": media_type,
                    "data": base64.b64encode(image).decode("ascii"),
                },
            },
            {"type": "text", "text": IMAGE_TO_SVG_USER_PROMPT},
        ]
        return self._complete(IMAGE_TO_SVG_SYSTEM_PROMPT, content)

    def svg_to_elements(self, svg_text: str) -> List[ElementDescriptor]:
        """
        Ask the model to describe SVG content as slide-inch elements.

        Raises:
            ValueError: If ``svg_text`` is empty.
            MissingCredentialError: If no API key is configured.
            UpstreamResponseError: If the reply is missing, not JSON, or not
                a valid element array. ``raw_response`` carries the reply.
        """
        if not svg_text or not svg_text.strip():
            raise ValueError("SVG content is required")
        self._require_credential()

        content = [{"type": "text", "text": SVG_TO_JSON_USER_PROMPT.format(svg=svg_text)}]
        text = self._complete(SVG_TO_JSON_SYSTEM_PROMPT, content)

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse model JSON: {e}")
            raise UpstreamResponseError("Failed to parse SVG structure", raw_response=text) from e

        if not isinstance(data, list):
            raise UpstreamResponseError("Expected a JSON array of elements", raw_response=text)

        try:
            return validate_elements(data)
        except ValidationError as e:
            raise UpstreamResponseError(f"Invalid element descriptors: {e}", raw_response=text) from e

    def _require_credential(self) -> None:
        if not self.api_key:
            raise MissingCredentialError("Missing Claude API key")

    def _get_client(self) -> anthropic.Anthropic:
        if self._client is None:
            self._client = anthropic.Anthropic(api_key=self.api_key, timeout=self.timeout)
        return self._client

    def _complete(self, system: str, content: List[Dict[str, Any]]) -> str:
        """Send one user turn and return the first text block of the reply."""
        try:
            message = self._get_client().messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                system=system,
                messages=[{"role": "user", "content": content}],
            )
        except anthropic.APIStatusError as e:
            logger.error(f"Model request failed: {e}")
            raise UpstreamResponseError(
                f"Model request failed: {e}", raw_response=e.response.text
            ) from e
        except anthropic.APIError as e:
            logger.error(f"Model request failed: {e}")
            raise UpstreamResponseError(f"Model request failed: {e}") from e

        for block in message.content:
            if block.type == "text":
                return block.text

        raise UpstreamResponseError(
            "Claude returned no text", raw_response=message.model_dump_json()
        )
