"""NiceGUI page for uploading PDFs and asking questions about them."""

import html

from nicegui import events, ui

from pdfchat.client.api import PDFChatClient
from pdfchat.client.config import ClientConfig, get_client_config
from pdfchat.controllers.ask import AskController
from pdfchat.controllers.upload import UploadController
from pdfchat.models.schemas import Author, ChatEntry
from pdfchat.models.session import ChatSession
from pdfchat.ui.events import is_submit_keystroke, read_selected_files

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; min-height: 100vh; }

    .upload-pane { background: #f9fafb; }

    .message-user {
        background: #dbeafe;
        color: #1f2937;
        border-radius: 12px 12px 4px 12px;
    }

    .message-bot {
        background: #dcfce7;
        color: #1f2937;
        border-radius: 12px 12px 12px 4px;
    }

    .input-box {
        background: #f9fafb;
        border: 1px solid #e5e7eb;
        border-radius: 8px;
        transition: border-color 0.2s;
    }
    .input-box:focus-within { border-color: #2563eb; }
</style>
"""

# Prevents the newline and emits only for a bare Enter; Shift+Enter falls through.
SUBMIT_ON_ENTER_JS = """(e) => {
    if (e.key === 'Enter' && !e.shiftKey && !e.ctrlKey && !e.altKey && !e.metaKey) {
        e.preventDefault();
        emit({key: e.key, shiftKey: e.shiftKey, ctrlKey: e.ctrlKey,
              altKey: e.altKey, metaKey: e.metaKey});
    }
}"""


def entry_html(text: str) -> str:
    """Escape entry text for display, keeping its line breaks."""
    return html.escape(text).replace("\n", "<br>")


def chat_page() -> None:
    """Root page served by ui.run."""
    build_chat_page()


def build_chat_page(api: PDFChatClient | None = None, config: ClientConfig | None = None) -> None:
    """Build the page: upload pane on the left, chat on the right.

    Args:
        api: Backend client. Built from config if not provided.
        config: Client configuration. Loads from environment if not provided.
    """
    ui.add_head_html(CUSTOM_CSS)
    session = ChatSession()
    config = config or get_client_config()
    api = api or PDFChatClient(config)

    messages_container: ui.column
    files_container: ui.column
    scroll_area: ui.scroll_area

    def render_message(entry: ChatEntry) -> None:
        is_user = entry.author is Author.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-bot"
        marker = "user-message" if is_user else "bot-message"

        with ui.row().classes(f"w-full {align}"):
            with ui.element("div").classes(f"px-3 py-2 max-w-md {bubble}"):
                (
                    ui.html(entry_html(entry.text), sanitize=False)
                    .classes("text-sm leading-relaxed")
                    .mark(marker)
                )

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            for entry in session.transcript:
                render_message(entry)
        scroll_area.scroll_to(percent=1.0)

    def refresh_files() -> None:
        files_container.clear()
        with files_container:
            for name in session.files:
                ui.label(f"• {name}").classes("text-sm truncate w-full").mark("file-name")

    def refresh() -> None:
        refresh_messages()
        refresh_files()

    uploader = UploadController(session, api, on_change=refresh)
    asker = AskController(session, api, on_change=refresh, serialize=config.serialize_asks)

    async def handle_upload(e: events.MultiUploadEventArguments) -> None:
        files = await read_selected_files(e.files)
        e.sender.reset()
        await uploader.handle_selection(files)

    async def handle_keydown(e: events.GenericEventArguments) -> None:
        if is_submit_keystroke(e.args):
            await asker.submit()

    # === UI Layout ===
    with ui.row().classes("w-full min-h-screen gap-0 no-wrap flex-col md:flex-row"):
        # Upload pane
        with ui.column().classes("w-full md:w-1/3 p-4 upload-pane border-r"):
            ui.label("Upload PDFs").classes("text-xl font-semibold")
            (
                ui.upload(
                    on_multi_upload=handle_upload,
                    multiple=True,
                    auto_upload=True,
                )
                .props('accept=".pdf,application/pdf" flat bordered')
                .classes("w-full")
                .mark("pdf-picker")
            )
            (
                ui.label("Uploading...")
                .classes("text-sm text-gray-500")
                .mark("uploading")
                .bind_visibility_from(session, "uploading")
            )
            files_container = ui.column().classes("w-full gap-1")

        # Chat pane
        with ui.column().classes("w-full md:w-2/3 p-4 flex-grow").style("height: 100vh"):
            ui.label("Ask Questions").classes("text-xl font-semibold")

            with (
                ui.scroll_area().classes("flex-grow w-full bg-white border rounded") as scroll_area,
                ui.column().classes("w-full p-2"),
            ):
                messages_container = ui.column().classes("w-full gap-3")

            with ui.row().classes("w-full gap-2 items-end no-wrap"):
                with ui.element("div").classes("flex-grow input-box px-3 py-1"):
                    (
                        ui.textarea(placeholder="Type your question...")
                        .props("borderless dense rows=2")
                        .classes("w-full")
                        .mark("question")
                        .bind_value(session, "pending_question")
                        .on("keydown", handle_keydown, js_handler=SUBMIT_ON_ENTER_JS)
                    )
                ui.button("Ask", icon="send", on_click=asker.submit).props("unelevated").mark(
                    "ask-button"
                )

    refresh()
