"""Pydantic models shared by the conversation store and the UI.

Provides type safety and immutability for conversation turns.

Models:
    - Message: One turn, authored by the user or the bot
    - Role: Closed set of message authors
    - ThemeName: Closed set of page themes
    - Palette: Four-color set for a theme
"""

from chatbot.models.schemas import Message, Palette, Role, ThemeName

__all__ = ["Message", "Palette", "Role", "ThemeName"]
