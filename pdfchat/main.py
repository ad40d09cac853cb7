"""Main application entry point.

Serves the NiceGUI chat interface. The backend it talks to is configured
through API_BASE_URL. Environment variables are loaded from .env file.
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

    Serves the chat page as the root of the NiceGUI server.
    """
    from nicegui import ui

    from pdfchat.client.config import get_client_config
    from pdfchat.ui.chat_page import chat_page

    config = get_client_config()
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))

    logger.info(f"Starting PDF Chat UI on http://{host}:{port}")
    logger.info(f"Using backend at {config.api_base_url}")

    ui.run(
        chat_page,
        title="PDF Chat",
        favicon="📄",
        host=host,
        port=port,
        reload=False,
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "pdf-chat-secret"),
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
