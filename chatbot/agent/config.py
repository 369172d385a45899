"""Chat session configuration with environment variable loading.

Pydantic-based configuration for the Gemini chat session. The credential
is read once here and handed to the session adapter explicitly.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

HARM_CATEGORIES = (
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
)


class ChatConfig(BaseModel):
    """Configuration for the Gemini chat session.

    An empty API key is accepted here so the page can still render; the
    session adapter refuses to initialize without one.

    Attributes:
        api_key: Google AI Studio key for Gemini access.
        model_name: Gemini model identifier.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        top_p: Nucleus-sampling threshold.
        max_output_tokens: Maximum tokens in generated response.
        response_mime_type: MIME type requested for completions.
        safety_threshold: Block threshold applied to every harm category.
        request_timeout: Seconds to wait for a single reply.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GOOGLE_API_KEY", os.getenv("GEMINI_API_KEY", "")),
        description="API key for Gemini",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-2.0-flash"),
        description="Model to use",
    )
    temperature: float = Field(
        default=0.9,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    top_p: float = Field(
        default=1.0,
        ge=0.0,
        le=1.0,
        description="Nucleus-sampling threshold",
    )
    max_output_tokens: int = Field(
        default=2048,
        ge=1,
        le=8192,
        description="Maximum tokens in generated response",
    )
    response_mime_type: str = Field(default="text/plain")
    safety_threshold: str = Field(
        default="BLOCK_MEDIUM_AND_ABOVE",
        description="Block threshold applied to all harm categories",
    )
    request_timeout: float = Field(
        default=60.0,
        gt=0.0,
        description="Seconds to wait for a reply before failing the send",
    )

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Strip surrounding whitespace from the API key."""
        return v.strip()

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    def safety_settings(self) -> list[dict[str, str]]:
        """Return one category/threshold pair per harm category."""
        return [
            {"category": category, "threshold": self.safety_threshold}
            for category in HARM_CATEGORIES
        ]


def get_chat_config() -> ChatConfig:
    """Create chat configuration from environment.

    Returns:
        Configured ChatConfig instance.
    """
    return ChatConfig()
