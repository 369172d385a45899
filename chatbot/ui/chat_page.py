"""NiceGUI chat page with a light/dark theme selector."""

import logging

from nicegui import events, ui

from chatbot.agent.chat_session import ChatSessionAdapter
from chatbot.agent.config import ChatConfig
from chatbot.agent.errors import ChatError
from chatbot.conversation.controller import ChatController
from chatbot.models.schemas import Message
from chatbot.ui.theme import THEME_OPTIONS

logger = logging.getLogger(__name__)

PAGE_TITLE = "Virtual Assistant ChatBot"
ERROR_TIMEOUT = 6.0  # seconds

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }
    body { margin: 0; }
    .bubble { border-radius: 8px; max-width: 75%; word-break: break-word; }
    .bubble p { margin: 0; }
    .bubble pre { margin: 0.5rem 0; overflow-x: auto; }
</style>
"""


def render_chat_page(controller: ChatController) -> None:
    """Build the chat page for one client around its controller."""
    ui.add_head_html(CUSTOM_CSS)
    store = controller.store

    page: ui.column
    title_label: ui.label
    theme_label: ui.label
    message_list: ui.scroll_area
    messages_container: ui.column
    send_btn: ui.button

    def render_message(msg: Message) -> None:
        palette = controller.palette
        direction = "row-reverse" if msg.is_user else "row"
        background = palette.accent if msg.is_user else palette.primary
        color = "#ffffff" if msg.is_user else palette.text

        with ui.row().classes("w-full items-end gap-2 no-wrap").style(
            f"flex-direction: {direction}"
        ):
            with ui.element("div").classes("bubble p-4").style(
                f"background-color: {background}; color: {color}"
            ):
                # Replies come back as markdown; user text is shown verbatim
                if msg.is_user:
                    ui.label(msg.text).classes("whitespace-pre-wrap")
                else:
                    ui.markdown(msg.text)
            ui.label(f"{msg.author_label} - {msg.time_label}").classes("text-xs").style(
                f"color: {palette.text}"
            )

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            for msg in store:
                render_message(msg)
        message_list.scroll_to(percent=1.0)

    def apply_theme() -> None:
        palette = controller.palette
        page.style(replace=f"background-color: {palette.primary}; height: 100vh")
        title_label.style(replace=f"color: {palette.text}")
        theme_label.style(replace=f"color: {palette.text}; margin-right: 8px")
        message_list.style(
            replace=f"background-color: {palette.secondary}; border-radius: 4px"
        )
        send_btn.style(replace=f"background-color: {palette.accent} !important; color: #ffffff")
        refresh_messages()

    def change_theme(e: events.ValueChangeEventArguments) -> None:
        controller.set_theme(e.value)
        apply_theme()

    banner: ui.notification | None = None

    def show_error(error: ChatError) -> None:
        """Replace the current banner with one for ``error``."""
        nonlocal banner
        if banner is not None:
            banner.dismiss()

        def on_dismiss() -> None:
            nonlocal banner
            if banner is notification:
                banner = None
            controller.dismiss_error(error)

        notification = ui.notification(
            error.user_message,
            type="negative",
            position="bottom",
            close_button=True,
            timeout=ERROR_TIMEOUT,
            on_dismiss=on_dismiss,
        )
        banner = notification

    async def send_message() -> None:
        await controller.submit()

    async def on_enter() -> None:
        await controller.handle_key("Enter")

    # === UI Layout ===
    with ui.column().classes("w-full max-w-4xl mx-auto p-4 no-wrap") as page:
        # Header
        with ui.row().classes("w-full p-2 items-center justify-between"):
            title_label = ui.label(PAGE_TITLE).classes("text-2xl font-medium")
            with ui.row().classes("items-center"):
                theme_label = ui.label("Theme:").classes("text-sm")
                ui.select(
                    THEME_OPTIONS,
                    value=controller.theme.value,
                    on_change=change_theme,
                ).props("outlined dense")

        # Messages
        with ui.scroll_area().classes("w-full flex-grow") as message_list:
            messages_container = ui.column().classes("w-full gap-4 p-2")

        # Input
        with ui.row().classes("w-full items-center gap-2 no-wrap"):
            (
                ui.input(placeholder="Type your message...")
                .bind_value(store, "draft")
                .props("outlined")
                .classes("flex-grow")
                .on("keydown.enter", on_enter)
            )
            send_btn = (
                ui.button("Send", on_click=send_message)
                .props("unelevated")
                .bind_enabled_from(controller, "is_pending", backward=lambda pending: not pending)
            )

    store.on_change(refresh_messages)
    controller.on_error(show_error)
    apply_theme()
    controller.start()


def register_chat_page(config: ChatConfig) -> None:
    """Register the chat page at ``/``.

    Each page load gets its own conversation and its own chat session,
    built from the shared configuration.
    """

    @ui.page("/", title=PAGE_TITLE)
    def chat_page() -> None:
        controller = ChatController(ChatSessionAdapter(config))
        render_chat_page(controller)
