"""Upload flow: file selection to backend upload."""

import logging
from collections.abc import Callable

from pdfchat.client.api import APIRequestError, PDFChatClient
from pdfchat.models.schemas import Author, SelectedFile
from pdfchat.models.session import ChatSession

logger = logging.getLogger(__name__)

UPLOAD_FAILED_MESSAGE = "Failed to upload files."


class UploadController:
    """Sends newly selected files to the backend and tracks upload state."""

    def __init__(
        self,
        session: ChatSession,
        client: PDFChatClient,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._session = session
        self._client = client
        self._on_change = on_change

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()

    async def handle_selection(self, files: list[SelectedFile]) -> None:
        """Upload a new selection of files.

        The names of the selection are appended to the session's upload set
        before the request goes out; the file contents are only held for the
        request itself. Success is silent; any failure adds a single bot
        entry to the transcript. An empty selection does nothing.

        Args:
            files: Files picked in one file dialog interaction.
        """
        if not files:
            return

        self._session.add_files([f.name for f in files])
        self._session.begin_upload()
        self._notify()

        try:
            await self._client.upload(files)
            logger.info(f"Uploaded {len(files)} file(s): {', '.join(f.name for f in files)}")
        except APIRequestError as e:
            logger.error(f"Error uploading files: {e}")
            self._session.add_entry(Author.BOT, UPLOAD_FAILED_MESSAGE)
        finally:
            self._session.end_upload()
            self._notify()
