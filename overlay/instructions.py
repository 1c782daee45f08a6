"""
Overlay Instructions — the output of the cue sequencer.

An instruction is either a Wait (pause before proceeding) or a
ShowText (display a styled block for a duration). A sequential
executor replays them in order:

    Wait(1.0)                     pause until the first cue starts
    ShowText("<span ...>Hello")   show it for 2.0s
    Wait(2.0)                     hold until it ends
"""

import re
from dataclasses import dataclass
from typing import List, Union

from .timestamps import format_timestamp

POSITION_BOTTOM_MIDDLE = "Bottom Middle"

_TAG_RE = re.compile(r"<[^>]+>")


@dataclass(frozen=True)
class Wait:
    """Pause the executor for ``delay_seconds``."""
    delay_seconds: float

    def to_dict(self) -> dict:
        return {"type": "Wait", "delaySeconds": self.delay_seconds}


@dataclass(frozen=True)
class ShowText:
    """Display ``html`` on the overlay for ``duration_seconds``."""
    html: str
    duration_seconds: float
    width_px: int
    position: str = POSITION_BOTTOM_MIDDLE
    drop_shadow: bool = False

    @property
    def plain_text(self) -> str:
        return _TAG_RE.sub("", self.html)

    def to_dict(self) -> dict:
        return {
            "type": "ShowText",
            "html": self.html,
            "durationSeconds": self.duration_seconds,
            "position": self.position,
            "widthPx": self.width_px,
            "dropShadow": self.drop_shadow,
        }


Instruction = Union[Wait, ShowText]


def to_wire(instructions: List[Instruction]) -> List[dict]:
    """Serialize instructions for the executor."""
    return [instruction.to_dict() for instruction in instructions]


def total_duration(instructions: List[Instruction]) -> float:
    """Length of the timeline in seconds (ShowText does not block)."""
    return sum(i.delay_seconds for i in instructions if isinstance(i, Wait))


def format_preview(instructions: List[Instruction], max_entries: int = 10) -> str:
    """
    Generate a text preview of the displayed cues.

    Args:
        instructions: Instruction sequence from the sequencer.
        max_entries: Maximum cues to include in preview.

    Returns:
        One line per ShowText with its absolute start and end time.
    """
    lines = []
    shown = 0
    total_shows = sum(1 for i in instructions if isinstance(i, ShowText))
    clock = 0.0

    for instruction in instructions:
        if isinstance(instruction, Wait):
            clock += instruction.delay_seconds
            continue
        if shown >= max_entries:
            break
        ts_start = format_timestamp(clock)
        ts_end = format_timestamp(clock + instruction.duration_seconds)
        text_preview = " ".join(instruction.plain_text.split())
        if len(text_preview) > 80:
            text_preview = text_preview[:80] + "..."
        lines.append(f"  [{ts_start} → {ts_end}] {text_preview}")
        shown += 1

    if total_shows > shown:
        lines.append(f"  ... and {total_shows - shown} more entries")

    return "\n".join(lines)
