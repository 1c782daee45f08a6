"""
Tests for style parameters and styled text rendering.
"""

import pytest
from overlay.style import StyleParameters


class TestDefaults:
    """Test fallback of unset and falsy parameters."""

    def test_default_render(self):
        html = StyleParameters().render("Hello")
        assert html == (
            '<span style="color: #FFFFFF; font-size: 48px; '
            '-webkit-text-stroke: 2px #222222;">Hello</span>'
        )

    def test_zero_font_size_uses_default(self):
        html = StyleParameters(font_size=0).render("Hi")
        assert "font-size: 48px;" in html
        assert "font-size: 0px" not in html

    def test_empty_colors_use_defaults(self):
        style = StyleParameters(text_color="", outline_color="")
        assert style.resolved_text_color == "#FFFFFF"
        assert style.resolved_outline_color == "#222222"

    def test_zero_outline_width_uses_default(self):
        assert StyleParameters(outline_width=0).resolved_outline_width == 2

    def test_zero_container_width_uses_default(self):
        assert StyleParameters(container_width=0).resolved_container_width == 1200

    def test_outline_unset_is_enabled(self):
        assert StyleParameters().resolved_outline is True


class TestCustomStyle:
    """Test configured values flowing into the styled block."""

    def test_float_pixels_render_as_int(self):
        html = StyleParameters(font_size=36.0, outline_width=3.0).render("X")
        assert "font-size: 36px;" in html
        assert "-webkit-text-stroke: 3px #222222;" in html

    def test_custom_values(self):
        style = StyleParameters(
            font_size=36,
            text_color="#FFFF00",
            outline_width=3,
            outline_color="#000000",
        )
        html = style.render("Custom")
        assert html == (
            '<span style="color: #FFFF00; font-size: 36px; '
            '-webkit-text-stroke: 3px #000000;">Custom</span>'
        )

    def test_declaration_order(self):
        decls = StyleParameters().declarations()
        assert decls[0].startswith("color:")
        assert decls[1].startswith("font-size:")
        assert decls[2].startswith("-webkit-text-stroke:")

    def test_outline_disabled(self):
        style = StyleParameters(outline=False, outline_width=5, outline_color="#FF0000")
        html = style.render("Plain")
        assert "stroke" not in html
        assert "#FF0000" not in html
        assert html == '<span style="color: #FFFFFF; font-size: 48px;">Plain</span>'

    def test_frozen(self):
        style = StyleParameters()
        with pytest.raises(Exception):
            style.font_size = 12
