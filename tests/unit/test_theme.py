"""Unit tests for theme palettes."""

import pytest
import pytest_check as check

from chatbot.models.schemas import ThemeName
from chatbot.ui.theme import DARK_PALETTE, LIGHT_PALETTE, THEME_OPTIONS, palette_for


class TestPaletteFor:
    """Tests for palette_for."""

    def test_light_palette(self) -> None:
        palette = palette_for("light")

        check.equal(palette.primary, "#ffffff")
        check.equal(palette.secondary, "#f0f0f0")
        check.equal(palette.accent, "#2196f3")
        check.equal(palette.text, "#333333")

    def test_dark_palette(self) -> None:
        palette = palette_for("dark")

        check.equal(palette.primary, "#121212")
        check.equal(palette.secondary, "#1e1e1e")
        check.equal(palette.accent, "#ffeb3b")
        check.equal(palette.text, "#e0e0e0")

    def test_palettes_are_distinct(self) -> None:
        assert palette_for(ThemeName.LIGHT) != palette_for(ThemeName.DARK)

    def test_enum_and_string_agree(self) -> None:
        assert palette_for(ThemeName.DARK) is palette_for("dark")

    @pytest.mark.parametrize("name", ["", "Dark", "solarized", None, 3])
    def test_unknown_theme_falls_back_to_light(self, name: object) -> None:
        """Anything outside the enum gets the light palette."""
        assert palette_for(name) is LIGHT_PALETTE

    def test_every_option_has_a_palette(self) -> None:
        assert set(THEME_OPTIONS) == {"light", "dark"}
        assert palette_for("dark") is DARK_PALETTE
