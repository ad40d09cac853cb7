from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Author(str, Enum):
    """Who produced a transcript entry."""

    USER = "user"
    BOT = "bot"


class ChatEntry(BaseModel):
    """A single entry in the chat transcript.

    Attributes:
        author: Whether the user or the bot wrote the entry.
        text: Display text. Line breaks are kept as-is.
    """

    model_config = ConfigDict(frozen=True)

    author: Author
    text: str


class SelectedFile(BaseModel):
    """A file picked by the user for upload.

    Attributes:
        name: File name shown in the upload list and sent with the form part.
        content: Raw file bytes.
        content_type: MIME type of the form part.
    """

    name: str
    content: bytes = Field(repr=False)
    content_type: str = "application/pdf"


class AskRequest(BaseModel):
    """Request payload for the ask endpoint."""

    question: str


class AskResponse(BaseModel):
    """Response payload from the ask endpoint.

    Attributes:
        answer: The backend's answer. May be missing, null or empty. Any
                other JSON type (a number, a list) fails validation and
                the ask counts as failed rather than showing its text.
    """

    answer: str | None = None
