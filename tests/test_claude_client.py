"""Tests for the model client, with the SDK client stubbed out."""

import base64
import io
import json

import anthropic
import httpx
import pytest
from anthropic.types import Message, TextBlock, ToolUseBlock, Usage
from PIL import Image

from services.claude_client import (
    ClaudeClient,
    MissingCredentialError,
    UnsupportedImageError,
    UpstreamResponseError,
    detect_image_type,
)
from services.elements import CircleDescriptor, RectDescriptor, TextDescriptor, elements_to_json

API_REQUEST = httpx.Request("POST", "https://api.anthropic.com/v1/messages")


def image_bytes(fmt):
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), "red").save(buffer, format=fmt)
    return buffer.getvalue()


class FakeMessages:
    def __init__(self, reply):
        self.reply = reply
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if isinstance(self.reply, Exception):
            raise self.reply
        return self.reply


class FakeAnthropic:
    def __init__(self, reply):
        self.messages = FakeMessages(reply)


def message(*blocks):
    return Message(
        id="msg_1",
        type="message",
        role="assistant",
        model="claude-test",
        content=list(blocks),
        stop_reason="end_turn",
        stop_sequence=None,
        usage=Usage(input_tokens=1, output_tokens=1),
    )


def text_reply(text):
    return message(TextBlock(type="text", text=text))


def make_client(reply, api_key="test-key"):
    sdk = FakeAnthropic(reply)
    return ClaudeClient(api_key=api_key, client=sdk), sdk.messages


# ============================================================
# IMAGE SNIFFING TESTS
# ============================================================

def test_detect_png_and_jpeg():
    assert detect_image_type(image_bytes("PNG")) == "image/png"
    assert detect_image_type(image_bytes("JPEG")) == "image/jpeg"


@pytest.mark.parametrize("data", [b"", b"definitely not an image", None])
def test_detect_rejects_non_images(data):
    with pytest.raises(UnsupportedImageError):
        detect_image_type(data)


def test_detect_rejects_other_formats():
    with pytest.raises(UnsupportedImageError, match="GIF"):
        detect_image_type(image_bytes("GIF"))


# ============================================================
# IMAGE -> SVG TESTS
# ============================================================

def test_image_to_svg_request():
    client, messages = make_client(text_reply("<svg width='10'></svg>"))
    png = image_bytes("PNG")

    assert client.image_to_svg(png) == "<svg width='10'></svg>"

    kwargs = messages.calls[0]
    assert kwargs["model"] == client.model
    assert kwargs["max_tokens"] == client.max_tokens
    assert "SVG" in kwargs["system"]
    source = kwargs["messages"][0]["content"][0]["source"]
    assert source["media_type"] == "image/png"
    assert base64.b64decode(source["data"]) == png


def test_image_to_svg_requires_credential():
    client, messages = make_client(text_reply("<svg/>"), api_key="")
    with pytest.raises(MissingCredentialError):
        client.image_to_svg(image_bytes("PNG"))
    assert messages.calls == []


def test_image_to_svg_rejects_unsupported_before_request():
    client, messages = make_client(text_reply("<svg/>"))
    with pytest.raises(UnsupportedImageError):
        client.image_to_svg(image_bytes("GIF"))
    assert messages.calls == []


def test_first_text_block_wins():
    reply = message(
        ToolUseBlock(type="tool_use", id="tu_1", name="draw", input={}),
        TextBlock(type="text", text="<svg/>"),
        TextBlock(type="text", text="ignored"),
    )
    client, _ = make_client(reply)
    assert client.image_to_svg(image_bytes("PNG")) == "<svg/>"


def test_missing_text_block():
    client, _ = make_client(message(ToolUseBlock(type="tool_use", id="tu_1", name="draw", input={})))
    with pytest.raises(UpstreamResponseError) as info:
        client.image_to_svg(image_bytes("JPEG"))
    assert "tool_use" in info.value.raw_response


def test_api_status_error_carries_body():
    error = anthropic.APIStatusError(
        "overloaded",
        response=httpx.Response(529, text="overloaded", request=API_REQUEST),
        body=None,
    )
    client, _ = make_client(error)
    with pytest.raises(UpstreamResponseError) as info:
        client.image_to_svg(image_bytes("PNG"))
    assert info.value.raw_response == "overloaded"


def test_connection_error_is_upstream_failure():
    client, _ = make_client(anthropic.APIConnectionError(request=API_REQUEST))
    with pytest.raises(UpstreamResponseError) as info:
        client.image_to_svg(image_bytes("PNG"))
    assert info.value.raw_response is None


def test_sdk_client_built_with_credential(monkeypatch):
    built = {}

    def fake_anthropic(**kwargs):
        built.update(kwargs)
        return FakeAnthropic(text_reply("<svg/>"))

    monkeypatch.setattr(anthropic, "Anthropic", fake_anthropic)
    client = ClaudeClient(api_key="secret", timeout=30)
    assert client.image_to_svg(image_bytes("PNG")) == "<svg/>"
    assert built == {"api_key": "secret", "timeout": 30}


# ============================================================
# SVG -> ELEMENTS TESTS
# ============================================================

def test_svg_to_elements_parses_descriptors():
    reply = json.dumps([
        {"type": "text", "text": "Title", "x": 5.0, "y": 0.5, "fontSize": 24, "color": "#000000"},
        {"type": "rect", "x": 1, "y": 2, "w": 3, "h": 1.5, "fill": "#4285F4", "strokeWidth": 2},
        {"type": "circle", "x": 7, "y": 3, "radius": 1, "fill": "#FBBC05", "extra": "ignored"},
        {"type": "path", "points": [[0, 0], [1, 1]], "stroke": "#000"},
    ])
    client, messages = make_client(text_reply(reply))

    elements = client.svg_to_elements("<svg><rect/></svg>")

    assert isinstance(elements[0], TextDescriptor)
    assert elements[0].font_size == 24
    assert isinstance(elements[1], RectDescriptor)
    assert elements[1].stroke_width == 2
    assert isinstance(elements[2], CircleDescriptor)
    assert elements[3].points == [(0.0, 0.0), (1.0, 1.0)]
    assert "<svg><rect/></svg>" in messages.calls[0]["messages"][0]["content"][0]["text"]

    dumped = elements_to_json(elements)
    assert dumped[0]["fontSize"] == 24
    assert dumped[1]["strokeWidth"] == 2


@pytest.mark.parametrize("svg", ["", "   ", None])
def test_svg_to_elements_requires_svg(svg):
    client, messages = make_client(text_reply("[]"))
    with pytest.raises(ValueError):
        client.svg_to_elements(svg)
    assert messages.calls == []


def test_svg_to_elements_requires_credential():
    client, _ = make_client(text_reply("[]"), api_key="")
    with pytest.raises(MissingCredentialError):
        client.svg_to_elements("<svg/>")


@pytest.mark.parametrize("reply", [
    "Sure! Here is the JSON you asked for.",
    '{"type": "text"}',
    '[{"type": "hexagon", "x": 1}]',
    '[{"type": "rect", "x": 1}]',
])
def test_svg_to_elements_unusable_reply(reply):
    client, _ = make_client(text_reply(reply))
    with pytest.raises(UpstreamResponseError) as info:
        client.svg_to_elements("<svg/>")
    assert info.value.raw_response == reply
