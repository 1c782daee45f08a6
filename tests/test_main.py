"""
Tests for the CLI entry point.
"""

import json

import pytest
from main import main

SAMPLE_SRT = """1
00:00:01,000 --> 00:00:03,000
Hello

2
00:00:04,000 --> 00:00:05,000
World
"""


@pytest.fixture
def srt_file(tmp_path):
    path = tmp_path / "talk.srt"
    path.write_text(SAMPLE_SRT, encoding="utf-8")
    return path


@pytest.fixture
def no_config(tmp_path):
    return ["--config", str(tmp_path / "absent.yaml")]


class TestCLI:
    """Test CLI modes."""

    def test_describe(self, capsys):
        assert main(["--describe"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["manifest"]["name"] == "Subtitle Displayer"
        assert data["parameters"]["fontSize"]["default"] == 48
        assert data["parameters"]["subtitleFile"]["type"] == "filepath"

    def test_json_stdout(self, srt_file, no_config, capsys):
        assert main([str(srt_file), *no_config]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["success"] is True
        assert len(data["effects"]) == 6

    def test_json_file(self, srt_file, no_config, tmp_path):
        output = tmp_path / "out" / "effects.json"
        assert main([str(srt_file), "-o", str(output), *no_config]) == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["effects"][1]["type"] == "ShowText"

    def test_style_flags_render_whole_pixels(self, srt_file, no_config, capsys):
        main([str(srt_file), "--font-size", "36", "--outline-width", "3", *no_config])
        html = json.loads(capsys.readouterr().out)["effects"][1]["html"]
        assert html == (
            '<span style="color: #FFFFFF; font-size: 36px; '
            '-webkit-text-stroke: 3px #222222;">Hello</span>'
        )

    def test_fractional_font_size_kept(self, srt_file, no_config, capsys):
        main([str(srt_file), "--font-size", "20.5", *no_config])
        html = json.loads(capsys.readouterr().out)["effects"][1]["html"]
        assert "font-size: 20.5px;" in html

    def test_no_outline_flag(self, srt_file, no_config, capsys):
        main([str(srt_file), "--no-outline", *no_config])
        data = json.loads(capsys.readouterr().out)
        assert "stroke" not in data["effects"][1]["html"]

    def test_preview(self, srt_file, no_config, capsys):
        assert main([str(srt_file), "--preview", *no_config]) == 0
        out = capsys.readouterr().out
        assert "[00:00:01,000 → 00:00:03,000] Hello" in out

    def test_play(self, srt_file, no_config, capsys, monkeypatch):
        monkeypatch.setattr("overlay.player.time.sleep", lambda d: None)
        assert main([str(srt_file), "--play", *no_config]) == 0
        out = capsys.readouterr().out
        assert ">> Hello" in out
        assert ">> World" in out

    def test_missing_source_fails(self, no_config, capsys):
        assert main(no_config) == 1
        assert "Subtitle file path not set." in capsys.readouterr().err

    def test_unreadable_source_fails(self, tmp_path, no_config, capsys):
        assert main([str(tmp_path / "missing.srt"), *no_config]) == 1
        assert "Failed to process subtitle file." in capsys.readouterr().err

    @pytest.mark.parametrize("speed", ["0", "-2"])
    def test_bad_speed_fails(self, srt_file, tmp_path, capsys, speed):
        config = tmp_path / "config.yaml"
        config.write_text(f"playback:\n  speed: {speed}\n", encoding="utf-8")
        assert main([str(srt_file), "--play", "--config", str(config)]) == 1
        assert "playback speed must be positive" in capsys.readouterr().err
