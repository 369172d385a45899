"""Conversation state and request lifecycle.

Responsibilities:
    - Append-only message history and the composer draft
    - Sending user turns through the chat session
    - The single active error shown to the user
"""

from chatbot.conversation.controller import ChatController
from chatbot.conversation.store import ConversationStore

__all__ = ["ChatController", "ConversationStore"]
