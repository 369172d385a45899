"""Append-only conversation store."""

from collections.abc import Callable, Iterator

from chatbot.models.schemas import Message, Role


class ConversationStore:
    """Ordered chat history plus the composer draft.

    Messages are only ever appended. Listeners registered with
    ``on_change`` run after every append.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._listeners: list[Callable[[], None]] = []
        self.draft: str = ""

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self.messages)

    def on_change(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def append_user_message(self, text: str) -> Message:
        """Append a user turn and clear the draft."""
        message = Message(text=text, role=Role.USER)
        self.draft = ""
        self._append(message)
        return message

    def append_bot_message(self, text: str) -> Message:
        message = Message(text=text, role=Role.BOT)
        self._append(message)
        return message

    def _append(self, message: Message) -> None:
        self._messages.append(message)
        for listener in self._listeners:
            listener()
