"""
SRT Reader — loads a SubRip file into Cue records.

Lexing is done by pysrt; timestamps are handed on as their
HH:MM:SS,mmm text so that the sequencer does its own conversion.
"""

import logging
import os
from pathlib import Path
from typing import List

import pysrt

from .errors import ConfigurationError, SourceReadError
from .sequencer import Cue

logger = logging.getLogger(__name__)


def validate_source(subtitle_file) -> Path:
    """
    Check that a subtitle source reference is usable.

    Raises:
        ConfigurationError: If it is missing, empty, or not a path.
    """
    if not isinstance(subtitle_file, (str, os.PathLike)):
        raise ConfigurationError(f"Subtitle source must be a path, got {subtitle_file!r}")
    if not str(subtitle_file).strip():
        raise ConfigurationError("Subtitle source is empty")
    return Path(subtitle_file)


class SRTReader:
    """Reads UTF-8 .srt files (with or without BOM)."""

    def read(self, subtitle_file) -> List[Cue]:
        """
        Read and lex a subtitle file.

        Args:
            subtitle_file: Path to the .srt file.

        Returns:
            Cues in file order.

        Raises:
            ConfigurationError: If the path reference is unusable.
            SourceReadError: If the file cannot be read or is not valid SRT.
        """
        path = validate_source(subtitle_file)

        try:
            content = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(path, e) from e

        cues = self.parse(content, source=path)
        logger.info(f"Loaded {len(cues)} cues from {path.name}")
        return cues

    @staticmethod
    def parse(content: str, source="<string>") -> List[Cue]:
        """
        Lex SRT text into cues.

        Raises:
            SourceReadError: If any block is malformed.
        """
        try:
            items = pysrt.from_string(
                content.lstrip("\ufeff"), error_handling=pysrt.SubRipFile.ERROR_RAISE
            )
        except (pysrt.Error, ValueError) as e:
            raise SourceReadError(source, e) from e

        return [
            Cue(
                index=item.index,
                start_time=str(item.start),
                end_time=str(item.end),
                text=item.text,
            )
            for item in items
        ]
