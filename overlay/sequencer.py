"""
Cue Sequencer — turns timed subtitle cues into overlay instructions.

Tracks a running playhead so that a clock-unaware executor can
reproduce absolute SRT timing with relative waits only. Each shown
cue becomes a ShowText followed by a Wait of the same duration, and
any gap before a cue becomes a leading Wait.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from .instructions import Instruction, ShowText, Wait
from .style import StyleParameters
from .timestamps import to_seconds

logger = logging.getLogger(__name__)

# Gaps at or below this (compared at microsecond precision) are treated
# as back-to-back cues
GAP_TOLERANCE_SEC = 0.05


@dataclass(frozen=True)
class Cue:
    """A single parsed SRT cue with textual timestamps."""
    index: int
    start_time: str
    end_time: str
    text: str

    def __repr__(self):
        return (f"Cue#{self.index}({self.start_time}–{self.end_time}, "
                f"'{self.text[:50]}')")


class CueSequencer:
    """
    Converts an ordered cue list into Wait / ShowText instructions.

    Cues are trusted to be in non-decreasing start order; nothing is
    sorted and overlaps are not resolved. Cues with a non-positive
    duration are not shown, but still move the playhead to their end.
    """

    def __init__(self, style: Optional[StyleParameters] = None):
        self.style = style or StyleParameters()

    def iter_instructions(self, cues: Iterable[Cue]) -> Iterator[Instruction]:
        """
        Lazily yield instructions for ``cues``.

        Raises:
            MalformedTimestamp: If a cue timestamp cannot be parsed.
        """
        playhead = 0.0
        width = self.style.resolved_container_width

        for cue in cues:
            start = to_seconds(cue.start_time)
            end = to_seconds(cue.end_time)
            duration = end - start

            gap = start - playhead
            if round(gap, 6) > GAP_TOLERANCE_SEC:
                yield Wait(gap)
            elif gap > 0:
                logger.debug(f"{cue!r}: {gap:.3f}s gap within tolerance, dropped")

            if duration > 0:
                yield ShowText(
                    html=self.style.render(cue.text),
                    duration_seconds=duration,
                    width_px=width,
                )
                yield Wait(duration)
            else:
                logger.debug(f"{cue!r}: non-positive duration {duration:.3f}s, skipped")

            playhead = end

    def sequence(self, cues: Iterable[Cue]) -> List[Instruction]:
        """
        Build the full instruction list for ``cues``.

        Either the whole list is returned or MalformedTimestamp is
        raised; there is no partial output.
        """
        cues = list(cues)
        instructions = list(self.iter_instructions(cues))
        shown = sum(1 for i in instructions if isinstance(i, ShowText))

        logger.info(
            f"Sequenced {len(cues)} cues → {len(instructions)} instructions "
            f"({shown} shown, {len(cues) - shown} skipped)"
        )
        return instructions


def sequence(cues: Iterable[Cue], style: Optional[StyleParameters] = None) -> List[Instruction]:
    """Convenience wrapper around CueSequencer(style).sequence(cues)."""
    return CueSequencer(style).sequence(cues)
