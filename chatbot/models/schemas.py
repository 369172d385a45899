from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Author of a conversation turn."""

    USER = "user"
    BOT = "bot"


class ThemeName(str, Enum):
    """Themes offered by the page selector."""

    LIGHT = "light"
    DARK = "dark"


class Message(BaseModel):
    """A single turn in the conversation.

    Messages are frozen once created; the store only ever appends them.

    Attributes:
        text: The message text as typed or as returned by the model.
        role: Who authored the turn (user or bot).
        timestamp: Local time the turn was appended.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    role: Role
    timestamp: datetime = Field(default_factory=datetime.now)

    @property
    def is_user(self) -> bool:
        return self.role is Role.USER

    @property
    def author_label(self) -> str:
        """Caption prefix shown under the bubble."""
        return "You" if self.is_user else "Bot"

    @property
    def time_label(self) -> str:
        return self.timestamp.strftime("%I:%M:%S %p")


class Palette(BaseModel):
    """Four-color set applied to the page for a theme.

    Attributes:
        primary: Page and bot bubble background.
        secondary: Message list background.
        accent: User bubble and send button color.
        text: Foreground text color.
    """

    model_config = ConfigDict(frozen=True)

    primary: str
    secondary: str
    accent: str
    text: str
