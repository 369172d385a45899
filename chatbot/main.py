"""Main application entry point.

Runs FastAPI with the NiceGUI chat page mounted on the same server.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Application entry point.

    Builds the chat configuration once and hands it to the chat page, then
    serves everything with uvicorn.
    """
    import uvicorn
    from nicegui import ui

    from chatbot.agent.config import get_chat_config
    from chatbot.api.app import create_app
    from chatbot.ui.chat_page import PAGE_TITLE, register_chat_page

    config = get_chat_config()
    if not config.has_api_key:
        logger.warning("GOOGLE_API_KEY is not set; chat sessions will fail to initialize")

    register_chat_page(config)
    app = create_app()

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        app,
        title=PAGE_TITLE,
        favicon="🤖",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "gemini-chatbot-secret"),
    )

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Chat UI available at http://localhost:{port}/")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
