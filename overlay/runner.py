"""
Run Orchestrator — Coordinates one subtitle-to-overlay run.

Stages:
  1. Validate the configured subtitle source
  2. Read + lex the .srt file (pysrt)
  3. Sequence cues into Wait / ShowText instructions

Failures never produce partial output: the result either carries the
full instruction list or a user-facing error message.
"""

import time
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import ConfigurationError, MalformedTimestamp, OverlayError, SourceReadError
from .instructions import Instruction, format_preview, to_wire, total_duration
from .sequencer import CueSequencer
from .srt_reader import SRTReader

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of a run, in the shape handed to the executor host."""
    success: bool
    effects: List[Instruction] = field(default_factory=list)
    error_message: Optional[str] = None

    @classmethod
    def failure(cls, error: OverlayError) -> "RunResult":
        return cls(success=False, error_message=error.user_message)

    def to_dict(self) -> dict:
        if self.success:
            return {"success": True, "effects": to_wire(self.effects)}
        return {"success": False, "errorMessage": self.error_message}


class SubtitleOverlayRunner:
    """
    Reads a subtitle file and produces overlay instructions.

    Usage:
        config = load_config()
        runner = SubtitleOverlayRunner(config)
        result = runner.run()
    """

    def __init__(self, config):
        self.config = config
        self.reader = SRTReader()
        self.sequencer = CueSequencer(getattr(config, "style", None))

    def run(self, subtitle_file=None) -> RunResult:
        """
        Run the read → sequence pipeline.

        Args:
            subtitle_file: Path to the .srt file. Defaults to the
                configured source.

        Returns:
            RunResult with all instructions, or with an error message.
        """
        if subtitle_file is None:
            subtitle_file = self.config.source.subtitle_file

        start_time = time.monotonic()

        try:
            cues = self.reader.read(subtitle_file)
            instructions = self.sequencer.sequence(cues)
        except ConfigurationError as e:
            logger.error("Subtitle file path is not configured.")
            logger.debug(f"Configuration detail: {e}")
            return RunResult.failure(e)
        except SourceReadError as e:
            logger.error(f"Failed to read or parse subtitle file: {e.cause}")
            return RunResult.failure(e)
        except MalformedTimestamp as e:
            logger.error(f"Failed to read or parse subtitle file: {e}")
            return RunResult.failure(e)

        elapsed = time.monotonic() - start_time
        logger.info(
            f"Run complete in {elapsed:.3f}s: {len(instructions)} instructions, "
            f"{total_duration(instructions):.1f}s timeline"
        )

        preview = format_preview(instructions, max_entries=5)
        if preview:
            logger.info(f"Preview:\n{preview}")

        return RunResult(success=True, effects=instructions)
