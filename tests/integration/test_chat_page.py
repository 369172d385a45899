"""Integration tests for the NiceGUI chat page.

Runs the real page in NiceGUI's simulated user environment with a mocked
chat session.
"""

from unittest.mock import MagicMock

from nicegui import ui
from nicegui.testing import User

from chatbot.agent.errors import InitializationError, SessionUnavailableError
from chatbot.conversation.controller import ChatController
from chatbot.models.schemas import Role, ThemeName
from chatbot.ui.chat_page import render_chat_page


def _register(controller: ChatController) -> None:
    @ui.page("/")
    def page() -> None:
        render_chat_page(controller)


class TestComposer:
    """Tests for sending from the composer."""

    async def test_enter_sends_draft(
        self, user: User, controller: ChatController, fake_adapter: MagicMock
    ) -> None:
        """Enter in the input appends the user turn and the reply."""
        _register(controller)
        await user.open("/")

        user.find(kind=ui.input).type("Hello").trigger("keydown.enter")
        await user.should_see("Hi there!")

        assert [(m.role, m.text) for m in controller.store] == [
            (Role.USER, "Hello"),
            (Role.BOT, "Hi there!"),
        ]
        assert controller.store.draft == ""

    async def test_send_button_sends_draft(
        self, user: User, controller: ChatController, fake_adapter: MagicMock
    ) -> None:
        _register(controller)
        await user.open("/")

        user.find(kind=ui.input).type("Hello")
        user.find("Send").click()
        await user.should_see("Hi there!")

        fake_adapter.send.assert_awaited_once_with("Hello", ())


class TestThemeSelect:
    """Tests for the theme selector."""

    async def test_selecting_dark_updates_controller(
        self, user: User, controller: ChatController
    ) -> None:
        _register(controller)
        await user.open("/")

        select = next(iter(user.find(kind=ui.select).elements))
        select.set_value("dark")

        assert controller.theme is ThemeName.DARK


class TestErrorBanner:
    """Tests for the error banner."""

    async def test_newer_error_survives_banner_replacement(
        self, user: User, controller: ChatController, fake_adapter: MagicMock
    ) -> None:
        """Replacing the start-up banner keeps the send error active."""
        fake_adapter.initialize.side_effect = InitializationError("bad key")
        fake_adapter.is_ready = False
        _register(controller)
        await user.open("/")
        assert isinstance(controller.error, InitializationError)

        user.find(kind=ui.input).type("Hello").trigger("keydown.enter")
        await user.should_see("Hello", kind=ui.label)

        assert isinstance(controller.error, SessionUnavailableError)
