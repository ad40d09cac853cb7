"""Pydantic models and view-state for the chat client.

Models:
    - Author: Who wrote a chat entry (user or bot)
    - ChatEntry: Immutable transcript entry
    - SelectedFile: A file picked for upload
    - AskRequest / AskResponse: Payloads of the ask endpoint
    - ChatSession: Mutable per-page state owned by the UI
"""

from pdfchat.models.schemas import AskRequest, AskResponse, Author, ChatEntry, SelectedFile
from pdfchat.models.session import ChatSession

__all__ = ["AskRequest", "AskResponse", "Author", "ChatEntry", "ChatSession", "SelectedFile"]
