"""
Error types raised by the overlay sequencing pipeline.

The runner converts these into a failed RunResult; library callers
see them directly.
"""


class OverlayError(Exception):
    """Base class for all subtitle overlay errors."""

    #: Message shown to the user instead of the underlying cause.
    user_message = "Failed to process subtitle file."


class ConfigurationError(OverlayError):
    """The subtitle source is missing or not a usable file reference."""

    user_message = "Subtitle file path not set."


class SourceReadError(OverlayError):
    """Reading or lexing the subtitle source failed."""

    def __init__(self, path, cause: Exception):
        super().__init__(f"Could not read subtitles from {path}: {cause}")
        self.path = path
        self.cause = cause


class MalformedTimestamp(OverlayError, ValueError):
    """An SRT timestamp could not be converted to seconds."""

    def __init__(self, timestamp: str, reason: str = "not a valid timestamp"):
        super().__init__(f"Malformed timestamp {timestamp!r}: {reason}")
        self.timestamp = timestamp
        self.reason = reason
