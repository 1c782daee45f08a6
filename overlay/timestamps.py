"""
Timestamp Normalizer — SRT timestamp <-> seconds conversion.

Accepts HH:MM:SS,mmm and HH:MM:SS.mmm forms.
"""

import math

from .errors import MalformedTimestamp


def to_seconds(timestamp: str) -> float:
    """
    Convert an SRT timestamp to an offset in seconds.

    Args:
        timestamp: Timestamp text, e.g. "01:02:03,456" or "01:02:03.456".

    Returns:
        hours * 3600 + minutes * 60 + seconds, as a float
        (e.g. 3723.456).

    Raises:
        MalformedTimestamp: If the text does not have exactly three
            fields or a field is not a finite number.
    """
    if not isinstance(timestamp, str):
        raise MalformedTimestamp(repr(timestamp), "expected a string")

    parts = timestamp.strip().replace(",", ".").split(":")
    if len(parts) != 3:
        raise MalformedTimestamp(timestamp, f"expected 3 fields, got {len(parts)}")

    values = []
    for part in parts:
        try:
            value = float(part)
        except ValueError:
            raise MalformedTimestamp(timestamp, f"field {part!r} is not a number")
        if not math.isfinite(value):
            raise MalformedTimestamp(timestamp, f"field {part!r} is not finite")
        values.append(value)

    hours, minutes, seconds = values
    return (hours * 3600) + (minutes * 60) + seconds


def format_timestamp(seconds: float) -> str:
    """
    Convert seconds to SRT timestamp format: HH:MM:SS,mmm

    Args:
        seconds: Time in seconds (e.g., 125.340)

    Returns:
        Formatted timestamp string (e.g., "00:02:05,340")
    """
    if seconds < 0:
        seconds = 0.0

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)
    millis = int(round((seconds % 1) * 1000))

    # Rounding can push to 1000
    if millis >= 1000:
        millis = 999

    return f"{hours:02d}:{minutes:02d}:{secs:02d},{millis:03d}"
