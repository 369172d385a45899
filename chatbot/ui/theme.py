"""Theme palettes for the chat page."""

from chatbot.models.schemas import Palette, ThemeName

LIGHT_PALETTE = Palette(
    primary="#ffffff",
    secondary="#f0f0f0",
    accent="#2196f3",
    text="#333333",
)

DARK_PALETTE = Palette(
    primary="#121212",
    secondary="#1e1e1e",
    accent="#ffeb3b",
    text="#e0e0e0",
)

THEME_OPTIONS = {ThemeName.LIGHT.value: "Light", ThemeName.DARK.value: "Dark"}


def palette_for(theme: ThemeName | str) -> Palette:
    """Return the palette for a theme.

    Unknown names fall back to the light palette.
    """
    if theme == ThemeName.LIGHT:
        return LIGHT_PALETTE
    if theme == ThemeName.DARK:
        return DARK_PALETTE
    return LIGHT_PALETTE
