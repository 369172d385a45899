"""Request lifecycle between the composer, the store and the chat session.

The controller holds all state the page renders: the conversation, the
single active error, the in-flight flag and the selected theme. The page
only forwards input events and redraws.
"""

import logging
from collections.abc import Callable

from chatbot.agent.chat_session import ChatSessionAdapter
from chatbot.agent.errors import ChatError, InitializationError, SessionUnavailableError
from chatbot.conversation.store import ConversationStore
from chatbot.models.schemas import Palette, ThemeName
from chatbot.ui.theme import palette_for

logger = logging.getLogger(__name__)


class ChatController:
    """Drives one page's conversation.

    Attributes:
        adapter: The Gemini session used for replies.
        store: The append-only conversation.
        error: The active error, or None. A new error replaces the old one.
        is_pending: True while a send is awaiting its reply.
        theme: The selected theme.
    """

    def __init__(
        self,
        adapter: ChatSessionAdapter,
        store: ConversationStore | None = None,
    ) -> None:
        self.adapter = adapter
        self.store = store or ConversationStore()
        self.error: ChatError | None = None
        self.is_pending: bool = False
        self.theme: ThemeName = ThemeName.LIGHT
        self._error_listeners: list[Callable[[ChatError], None]] = []

    def on_error(self, listener: Callable[[ChatError], None]) -> None:
        self._error_listeners.append(listener)

    def _set_error(self, error: ChatError) -> None:
        self.error = error
        for listener in self._error_listeners:
            listener(error)

    def dismiss_error(self, error: ChatError | None = None) -> None:
        """Clear the active error.

        When ``error`` is given, only that error is cleared; dismissing a
        banner for an error that has since been replaced leaves the newer
        one active.
        """
        if error is None or self.error is error:
            self.error = None

    def start(self) -> bool:
        """Initialize the chat session with the current history.

        Returns:
            True if the session is ready, False if initialization failed
            and the error state was set.
        """
        try:
            self.adapter.initialize(self.store.messages)
        except InitializationError as e:
            logger.warning(f"Chat unavailable: {e}")
            self._set_error(e)
            return False
        return True

    async def submit(self, text: str | None = None) -> None:
        """Send the draft (or ``text``) and append the reply.

        Blank text and submissions made while a reply is pending are
        ignored. Otherwise the user turn is appended and the draft cleared
        before the request goes out; failures set the error state and leave
        the user turn in place.
        """
        text = (self.store.draft if text is None else text).strip()
        if not text or self.is_pending:
            return

        history = self.store.messages
        self.store.append_user_message(text)

        if not self.adapter.is_ready:
            logger.warning("Send attempted without an initialized session")
            self._set_error(SessionUnavailableError())
            return

        self.is_pending = True
        try:
            reply = await self.adapter.send(text, history)
        except ChatError as e:
            self._set_error(e)
            return
        finally:
            self.is_pending = False

        self.store.append_bot_message(reply)

    async def handle_key(self, key: str) -> None:
        """Treat Enter in the composer like a click on the send button."""
        if key == "Enter":
            await self.submit()

    def set_theme(self, name: ThemeName | str) -> None:
        self.theme = ThemeName(name)

    @property
    def palette(self) -> Palette:
        return palette_for(self.theme)
