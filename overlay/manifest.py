"""
Script manifest and tunable-parameter schema for overlay hosts.
"""

from .style import (
    DEFAULT_CONTAINER_WIDTH,
    DEFAULT_FONT_SIZE,
    DEFAULT_OUTLINE,
    DEFAULT_OUTLINE_COLOR,
    DEFAULT_OUTLINE_WIDTH,
    DEFAULT_TEXT_COLOR,
)

SCRIPT_MANIFEST = {
    "name": "Subtitle Displayer",
    "description": (
        "Reads an SRT subtitle file and displays it on the overlay "
        "with correct timing and custom styles."
    ),
    "version": "1.3",
}


def default_parameters() -> dict:
    """Describe every user-tunable parameter with its type and default."""
    return {
        "subtitleFile": {
            "type": "filepath",
            "description": "Select the .srt subtitle file to display.",
            "fileOptions": {
                "filters": [{"name": "SubRip Subtitle", "extensions": ["srt"]}],
            },
        },
        "containerWidth": {
            "type": "number",
            "description": "The width of the text container in pixels. "
                           "Adjust if text is wrapping too soon.",
            "default": DEFAULT_CONTAINER_WIDTH,
        },
        "fontSize": {
            "type": "number",
            "description": "Font size for the subtitles in pixels.",
            "default": DEFAULT_FONT_SIZE,
        },
        "textColor": {
            "type": "string",
            "description": "The color of the subtitle text (hex code, e.g., #FFFFFF).",
            "default": DEFAULT_TEXT_COLOR,
        },
        "outline": {
            "type": "boolean",
            "description": "Enable or disable a text outline for better visibility.",
            "default": DEFAULT_OUTLINE,
        },
        "outlineWidth": {
            "type": "number",
            "description": "The width of the text outline in pixels.",
            "default": DEFAULT_OUTLINE_WIDTH,
        },
        "outlineColor": {
            "type": "string",
            "description": "The color of the text outline (hex code, e.g., #222222).",
            "default": DEFAULT_OUTLINE_COLOR,
        },
    }
