"""
Style parameters and inline styled-text generation for overlay cues.
"""

from dataclasses import dataclass
from typing import Optional

DEFAULT_FONT_SIZE = 48
DEFAULT_TEXT_COLOR = "#FFFFFF"
DEFAULT_OUTLINE = True
DEFAULT_OUTLINE_WIDTH = 2
DEFAULT_OUTLINE_COLOR = "#222222"
DEFAULT_CONTAINER_WIDTH = 1200


def _or_default(value, default):
    # None, 0 and "" all mean "not configured"
    return value if value else default


def _px(value):
    # 36.0 -> 36 so CLI floats render like YAML ints
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


@dataclass(frozen=True)
class StyleParameters:
    """
    User-tunable styling for the overlay text.

    Every field is optional; None means "not configured". Values are
    resolved to their defaults when used, so an explicit 0 or empty
    string behaves the same as leaving the field out. ``outline`` is
    the exception: only None falls back, False turns the stroke off.
    """
    font_size: Optional[float] = None
    text_color: Optional[str] = None
    outline: Optional[bool] = None
    outline_width: Optional[float] = None
    outline_color: Optional[str] = None
    container_width: Optional[int] = None

    @property
    def resolved_font_size(self):
        return _or_default(self.font_size, DEFAULT_FONT_SIZE)

    @property
    def resolved_text_color(self) -> str:
        return _or_default(self.text_color, DEFAULT_TEXT_COLOR)

    @property
    def resolved_outline(self) -> bool:
        if self.outline is None:
            return DEFAULT_OUTLINE
        return bool(self.outline)

    @property
    def resolved_outline_width(self):
        return _or_default(self.outline_width, DEFAULT_OUTLINE_WIDTH)

    @property
    def resolved_outline_color(self) -> str:
        return _or_default(self.outline_color, DEFAULT_OUTLINE_COLOR)

    @property
    def resolved_container_width(self):
        return _or_default(self.container_width, DEFAULT_CONTAINER_WIDTH)

    def declarations(self) -> list:
        """CSS declarations in emission order: color, font size, stroke."""
        styles = [
            f"color: {self.resolved_text_color};",
            f"font-size: {_px(self.resolved_font_size)}px;",
        ]
        if self.resolved_outline:
            styles.append(
                f"-webkit-text-stroke: {_px(self.resolved_outline_width)}px "
                f"{self.resolved_outline_color};"
            )
        return styles

    def render(self, text: str) -> str:
        """Wrap raw cue text in an inline-styled span."""
        return f'<span style="{" ".join(self.declarations())}">{text}</span>'
