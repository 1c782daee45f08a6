"""
Tests for instruction types, serialization and preview.
"""

from overlay.instructions import (
    ShowText,
    Wait,
    format_preview,
    to_wire,
    total_duration,
)


def show(text, duration=2.0):
    return ShowText(html=f'<span style="color: #FFFFFF;">{text}</span>',
                    duration_seconds=duration, width_px=1200)


class TestWireFormat:
    """Test the executor-facing dictionaries."""

    def test_wait(self):
        assert Wait(1.5).to_dict() == {"type": "Wait", "delaySeconds": 1.5}

    def test_show_text(self):
        assert show("Hi").to_dict() == {
            "type": "ShowText",
            "html": '<span style="color: #FFFFFF;">Hi</span>',
            "durationSeconds": 2.0,
            "position": "Bottom Middle",
            "widthPx": 1200,
            "dropShadow": False,
        }

    def test_to_wire_keeps_order(self):
        wire = to_wire([Wait(1.0), show("A"), Wait(2.0)])
        assert [w["type"] for w in wire] == ["Wait", "ShowText", "Wait"]


class TestHelpers:
    """Test timeline helpers."""

    def test_plain_text_strips_tags(self):
        assert show("Hello <i>there</i>").plain_text == "Hello there"

    def test_total_duration_counts_waits_only(self):
        assert total_duration([Wait(1.0), show("A"), Wait(2.0)]) == 3.0

    def test_total_duration_empty(self):
        assert total_duration([]) == 0


class TestPreview:
    """Test the preview formatter."""

    def test_absolute_times(self):
        preview = format_preview([Wait(1.0), show("Hello"), Wait(2.0), Wait(1.0), show("World", 1.0)])
        lines = preview.split("\n")
        assert lines[0] == "  [00:00:01,000 → 00:00:03,000] Hello"
        assert lines[1] == "  [00:00:04,000 → 00:00:05,000] World"

    def test_limits_entries(self):
        instructions = []
        for i in range(4):
            instructions += [show(f"Line {i}", 1.0), Wait(1.0)]
        lines = format_preview(instructions, max_entries=2).split("\n")
        assert len(lines) == 3
        assert "2 more" in lines[-1]

    def test_truncates_long_text(self):
        assert "..." in format_preview([show("A" * 100)])

    def test_empty(self):
        assert format_preview([]) == ""
