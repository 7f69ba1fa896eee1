"""Tests for the command line entry point."""

import json

import pytest
from pptx import Presentation

import main
from config.settings_manager import SettingsManager
from services.claude_client import ClaudeClient

SVG = '<svg width="200" height="100"><circle cx="50" cy="50" r="20" fill="red"/></svg>'


@pytest.fixture
def svg_file(tmp_path):
    path = tmp_path / "drawing.svg"
    path.write_text(SVG, encoding="utf-8")
    return path


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    monkeypatch.setattr(main, "SettingsManager", lambda: SettingsManager(tmp_path / "settings.json"))


def test_no_command_prints_help(capsys):
    assert main.main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_convert_to_explicit_output(svg_file, tmp_path, isolated_settings):
    out = tmp_path / "deck.pptx"
    assert main.main(["convert", str(svg_file), "-o", str(out)]) == 0
    prs = Presentation(str(out))
    assert len(prs.slides[0].shapes) == 1


def test_convert_names_output_from_title(svg_file, tmp_path, isolated_settings):
    assert main.main(["convert", str(svg_file), "--title", "Team  Overview"]) == 0
    assert (tmp_path / "Team_Overview.pptx").exists()


def test_convert_records_output_dir(svg_file, tmp_path, isolated_settings):
    out_dir = tmp_path / "decks"
    assert main.main(["convert", str(svg_file), "-o", str(out_dir / "deck.pptx")]) == 0
    saved = json.loads((tmp_path / "settings.json").read_text(encoding="utf-8"))
    assert saved["last_output_dir"] == str(out_dir.resolve())


def test_convert_placement_options(svg_file, tmp_path, isolated_settings):
    out = tmp_path / "placed.pptx"
    args = ["convert", str(svg_file), "-o", str(out), "--x", "1", "--y", "2",
            "--w", "4", "--h", "2", "--slide-width", "13.33", "--slide-height", "7.5"]
    assert main.main(args) == 0
    prs = Presentation(str(out))
    shape = prs.slides[0].shapes[0]
    # scale = min(4/200, 2/100) = 0.02; circle box starts at (30, 30) user units
    assert shape.left / 914400 == pytest.approx(1 + 30 * 0.02, abs=1e-5)
    assert shape.top / 914400 == pytest.approx(2 - 1 + 30 * 0.02, abs=1e-5)


def test_convert_missing_file(tmp_path, capsys):
    assert main.main(["convert", str(tmp_path / "nope.svg")]) == 1
    assert "Error" in capsys.readouterr().out


def test_convert_invalid_svg(tmp_path, capsys):
    bad = tmp_path / "bad.svg"
    bad.write_text("<svg><rect></svg>", encoding="utf-8")
    assert main.main(["convert", str(bad)]) == 1
    assert "Invalid SVG" in capsys.readouterr().out


def test_convert_invalid_placement(svg_file, capsys):
    assert main.main(["convert", str(svg_file), "--w", "0"]) == 1
    assert "w must be a positive number" in capsys.readouterr().out


def test_analyze_without_credential(svg_file, isolated_settings, capsys):
    assert main.main(["analyze", str(svg_file)]) == 1
    assert "Missing Claude API key" in capsys.readouterr().out


def test_analyze_writes_json(svg_file, tmp_path, isolated_settings, monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "k")
    reply = [{"type": "circle", "x": 1, "y": 1, "radius": 0.5, "fill": "#FF0000"}]
    monkeypatch.setattr(
        ClaudeClient, "_complete", lambda self, system, content: json.dumps(reply)
    )
    out = tmp_path / "elements.json"
    assert main.main(["analyze", str(svg_file), "-o", str(out)]) == 0
    assert json.loads(out.read_text(encoding="utf-8")) == [
        {"type": "circle", "x": 1.0, "y": 1.0, "radius": 0.5, "fill": "#FF0000"}
    ]


def test_analyze_reports_raw_response(svg_file, isolated_settings, monkeypatch, capsys):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "k")
    monkeypatch.setattr(ClaudeClient, "_complete", lambda self, system, content: "not json")
    assert main.main(["analyze", str(svg_file)]) == 1
    out = capsys.readouterr().out
    assert "Raw response" in out
    assert "not json" in out


def test_image_to_svg_and_pptx(tmp_path, isolated_settings, monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "k")
    monkeypatch.setattr(ClaudeClient, "image_to_svg", lambda self, data: f"Here you go:\n{SVG}\n")
    image = tmp_path / "photo.png"
    image.write_bytes(b"stub")

    assert main.main(["image", str(image), "--pptx"]) == 0
    assert (tmp_path / "photo.svg").read_text(encoding="utf-8") == SVG
    assert (tmp_path / "photo.pptx").exists()


def test_image_reply_without_svg(tmp_path, isolated_settings, monkeypatch, capsys):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "k")
    monkeypatch.setattr(ClaudeClient, "image_to_svg", lambda self, data: "I cannot draw that.")
    image = tmp_path / "photo.png"
    image.write_bytes(b"stub")

    assert main.main(["image", str(image)]) == 1
    assert "No SVG content found" in capsys.readouterr().out
    assert not (tmp_path / "photo.svg").exists()
