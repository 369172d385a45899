"""Agno agent logic for the Gemini chat session.

Responsibilities:
    - Session initialization with the Gemini model and safety settings
    - Forwarding the running conversation on every send
    - Translating SDK failures into the chat error taxonomy

Keeps the page free of any direct SDK calls.
"""

from chatbot.agent.chat_session import ChatSessionAdapter
from chatbot.agent.config import ChatConfig, get_chat_config
from chatbot.agent.errors import (
    ChatError,
    InitializationError,
    SendError,
    SessionUnavailableError,
)

__all__ = [
    "ChatConfig",
    "ChatError",
    "ChatSessionAdapter",
    "InitializationError",
    "SendError",
    "SessionUnavailableError",
    "get_chat_config",
]
