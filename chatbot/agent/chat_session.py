"""Gemini chat session adapter built on Agno.

Wraps Agno's Agent over the Gemini model with:
- A fixed model identifier and generation configuration
- Content-safety thresholds for every harm category
- The full running history passed on every send
- Error translation into the chat error taxonomy

The Agent is created without storage and keeps no memory of its own;
every send carries the conversation explicitly.
"""

import asyncio
import logging
from collections.abc import Sequence

from agno.agent import Agent
from agno.models.google import Gemini
from agno.models.message import Message as AgnoMessage
from google.genai import types

from chatbot.agent.config import ChatConfig
from chatbot.agent.errors import InitializationError, SendError, SessionUnavailableError
from chatbot.models.schemas import Message, Role

logger = logging.getLogger(__name__)

# Agno uses "assistant" for model turns and maps it to Gemini's "model" role
_AGNO_ROLES = {Role.USER: "user", Role.BOT: "assistant"}


class ChatSessionAdapter:
    """Stateful handle to the Gemini chat service.

    Created once per page load with an explicit configuration. Call
    ``initialize`` before ``send``; a failed initialization leaves the
    adapter unset.
    """

    def __init__(self, config: ChatConfig) -> None:
        self._config = config
        self._agent: Agent | None = None
        self._preamble: list[Message] = []

    @property
    def config(self) -> ChatConfig:
        return self._config

    @property
    def is_ready(self) -> bool:
        """Whether a session has been initialized successfully."""
        return self._agent is not None

    def initialize(self, history: Sequence[Message] = ()) -> None:
        """Set up the Gemini session.

        Args:
            history: Turns that precede everything sent later. Usually
                empty, since the page initializes before any message exists.

        Raises:
            InitializationError: If no API key is configured or the model
                cannot be constructed.
        """
        self._agent = None

        if not self._config.has_api_key:
            logger.error("Chat initialization failed: no API key configured")
            raise InitializationError("API key required. Set GOOGLE_API_KEY in .env")

        try:
            agent = self._create_agent()
        except Exception as e:
            logger.error(f"Chat initialization failed: {e}")
            raise InitializationError(str(e)) from e

        self._preamble = list(history)
        self._agent = agent
        logger.info(f"Chat session initialized with model {self._config.model_name}")

    def _create_model(self) -> Gemini:
        """Create the Gemini model with generation and safety settings.

        Returns:
            Configured Gemini model instance.
        """
        safety_settings = [
            types.SafetySetting(category=s["category"], threshold=s["threshold"])
            for s in self._config.safety_settings()
        ]

        return Gemini(
            id=self._config.model_name,
            api_key=self._config.api_key,
            temperature=self._config.temperature,
            top_p=self._config.top_p,
            max_output_tokens=self._config.max_output_tokens,
            safety_settings=safety_settings,
            generation_config={"response_mime_type": self._config.response_mime_type},
        )

    def _create_agent(self) -> Agent:
        return Agent(
            model=self._create_model(),
            description="A friendly virtual assistant.",
            instructions=[
                "Answer the user's questions helpfully and accurately.",
                "Be concise yet thorough.",
            ],
            markdown=True,
        )

    def _build_messages(self, text: str, history: Sequence[Message]) -> list[AgnoMessage]:
        messages = [
            AgnoMessage(role=_AGNO_ROLES[msg.role], content=msg.text)
            for msg in (*self._preamble, *history)
        ]
        messages.append(AgnoMessage(role="user", content=text))
        return messages

    async def send(self, text: str, history: Sequence[Message] = ()) -> str:
        """Send a user turn and return the model's reply.

        Args:
            text: The new user message.
            history: Turns already in the conversation, oldest first,
                not including ``text``.

        Returns:
            The reply text.

        Raises:
            SessionUnavailableError: If the session was never initialized.
            SendError: On network failure, safety or quota rejection,
                timeout, or an empty reply.
        """
        if self._agent is None:
            raise SessionUnavailableError()

        messages = self._build_messages(text, history)

        try:
            response = await asyncio.wait_for(
                self._agent.arun(messages),
                timeout=self._config.request_timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"Send timed out after {self._config.request_timeout}s")
            raise SendError("Timed out waiting for a reply") from e
        except Exception as e:
            logger.error(f"Send failed: {e}")
            raise SendError(str(e)) from e

        content = getattr(response, "content", None)
        status = getattr(response, "status", None)
        if str(getattr(status, "value", status)).lower() == "error":
            logger.error(f"Model run ended in error: {content}")
            raise SendError(str(content))
        if not isinstance(content, str) or not content.strip():
            logger.error("Model returned an empty reply")
            raise SendError("Empty reply from model")

        return content
