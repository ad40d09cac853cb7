"""Per-page chat state.

One ChatSession exists per browser page. It is the only place the upload set,
the transcript, the pending question and the upload flag live; the upload and
ask controllers are its only writers. The upload set keeps file names only;
file contents belong to the upload request and are dropped once it settles.
"""

from pdfchat.models.schemas import Author, ChatEntry


class ChatSession:
    """Manages chat state for a page session."""

    def __init__(self) -> None:
        self.files: list[str] = []
        self.transcript: list[ChatEntry] = []
        self.pending_question: str = ""
        self._uploads_in_flight: int = 0

    @property
    def uploading(self) -> bool:
        """True while at least one upload request is in flight."""
        return self._uploads_in_flight > 0

    def add_files(self, names: list[str]) -> None:
        """Append a selection to the upload set, keeping earlier selections."""
        self.files.extend(names)

    def add_entry(self, author: Author, text: str) -> ChatEntry:
        entry = ChatEntry(author=author, text=text)
        self.transcript.append(entry)
        return entry

    def begin_upload(self) -> None:
        self._uploads_in_flight += 1

    def end_upload(self) -> None:
        self._uploads_in_flight = max(0, self._uploads_in_flight - 1)
