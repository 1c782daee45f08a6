"""
Instruction Player — a strictly sequential reference executor.

Replays an instruction list the way an overlay host does: ShowText
is handed to a display callback without blocking, and Wait blocks for
its delay. No clock is consulted, so timing accuracy comes entirely
from the relative waits the sequencer emitted.
"""

import time
import logging
from typing import Callable, List, Optional

from .instructions import Instruction, ShowText, Wait

logger = logging.getLogger(__name__)

DisplayCallback = Callable[[ShowText], None]


def _log_display(instruction: ShowText) -> None:
    """Default display: log the plain text."""
    logger.info(f"[show {instruction.duration_seconds:.2f}s] {instruction.plain_text}")


class InstructionPlayer:
    """Executes Wait / ShowText instructions in order."""

    def __init__(
        self,
        display: Optional[DisplayCallback] = None,
        sleep: Optional[Callable[[float], None]] = None,
        speed: float = 1.0,
    ):
        """
        Args:
            display: Called for every ShowText. Defaults to logging.
            sleep: Blocking delay function. Defaults to time.sleep.
            speed: Playback rate; 2.0 halves every wait.
        """
        if speed <= 0:
            raise ValueError(f"speed must be positive, got {speed}")
        self.display = display or _log_display
        self.sleep = sleep or time.sleep
        self.speed = speed
        self._shown = 0

    def play(self, instructions: List[Instruction]) -> int:
        """
        Replay ``instructions``. Blocks until the last Wait completes.

        Returns:
            Number of ShowText instructions displayed.
        """
        self._shown = 0
        for instruction in instructions:
            if isinstance(instruction, Wait):
                self.sleep(instruction.delay_seconds / self.speed)
            elif isinstance(instruction, ShowText):
                self.display(instruction)
                self._shown += 1
            else:
                raise TypeError(f"Unknown instruction: {instruction!r}")

        logger.debug(f"Playback finished, {self._shown} cues shown")
        return self._shown
