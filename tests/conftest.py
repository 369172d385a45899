"""Pytest fixtures and shared test configuration.

Fixtures:
    - chat_config: ChatConfig with a test API key
    - fake_adapter: Ready chat session adapter whose send is an AsyncMock
    - controller: ChatController wired to fake_adapter
    - async_client: HTTPX client for API testing
"""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from chatbot.agent.chat_session import ChatSessionAdapter
from chatbot.agent.config import ChatConfig
from chatbot.api.app import create_app
from chatbot.conversation.controller import ChatController


@pytest.fixture
def chat_config() -> ChatConfig:
    """Return a configuration with a non-empty API key."""
    return ChatConfig(api_key="test-google-key", model_name="gemini-test")


@pytest.fixture
def fake_adapter() -> MagicMock:
    """Return an initialized adapter stand-in that replies "Hi there!".

    Returns:
        MagicMock shaped like ChatSessionAdapter.
    """
    adapter = MagicMock(spec=ChatSessionAdapter)
    adapter.is_ready = True
    adapter.send = AsyncMock(return_value="Hi there!")
    return adapter


@pytest.fixture
def controller(fake_adapter: MagicMock) -> ChatController:
    return ChatController(fake_adapter)


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
