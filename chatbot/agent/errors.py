"""Error taxonomy for the chat session lifecycle.

Each error carries the short message shown to the user in the
notification banner; the underlying cause stays on ``__cause__``.
"""


class ChatError(Exception):
    """Base class for errors surfaced to the chat page."""

    user_message = "Something went wrong. Please try again."

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.user_message)
        self.detail = detail


class InitializationError(ChatError):
    """Raised when the Gemini session cannot be set up."""

    user_message = "Failed to initialize chat. Please try again."


class SendError(ChatError):
    """Raised when a single send fails or returns no usable text."""

    user_message = "Failed to send message. Please try again."


class SessionUnavailableError(ChatError):
    """Raised when a send is attempted without an initialized session."""

    user_message = "Chat session is not available. Reload the page to try again."
