"""Tests for render/config.py: GlyphSet and RenderConfig validation."""

import pytest

from spanreport.constants import DEFAULT_TAB_WIDTH, MAX_TAB_WIDTH
from spanreport.render.config import GlyphSet, RenderConfig


class TestGlyphSet:
    """Test glyph presets and validation."""

    def test_unicode_is_default(self):
        assert GlyphSet.unicode() == GlyphSet()
        assert GlyphSet().top_left == "╭"

    def test_ascii_preset_is_ascii(self):
        glyphs = GlyphSet.ascii()
        for value in (
            glyphs.top_left,
            glyphs.branch,
            glyphs.corner,
            glyphs.close,
            glyphs.horizontal,
            glyphs.vertical,
            glyphs.continuation,
            glyphs.underline,
            glyphs.anchor,
        ):
            assert value.isascii()

    @pytest.mark.parametrize("bad", ["", "--"])
    def test_multi_character_glyph_rejected(self, bad: str):
        with pytest.raises(ValueError, match="Glyph 'underline' must be a single character"):
            GlyphSet(underline=bad)


class TestRenderConfig:
    """Test RenderConfig defaults and validation."""

    def test_defaults(self):
        config = RenderConfig()

        assert config.glyphs == GlyphSet()
        assert config.color is False
        assert config.tab_width == DEFAULT_TAB_WIDTH

    @pytest.mark.parametrize("tab_width", [0, -1, MAX_TAB_WIDTH + 1])
    def test_invalid_tab_width(self, tab_width: int):
        with pytest.raises(ValueError, match="tab_width must be between 1 and"):
            RenderConfig(tab_width=tab_width)

    @pytest.mark.parametrize("tab_width", [1, MAX_TAB_WIDTH])
    def test_tab_width_bounds_accepted(self, tab_width: int):
        assert RenderConfig(tab_width=tab_width).tab_width == tab_width

    def test_frozen(self):
        config = RenderConfig()
        with pytest.raises(AttributeError):
            config.color = True  # type: ignore[misc]
