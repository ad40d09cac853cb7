"""Ask flow: pending question to transcript answer."""

import asyncio
import logging
from collections.abc import Callable

from pdfchat.client.api import APIRequestError, PDFChatClient
from pdfchat.models.schemas import Author
from pdfchat.models.session import ChatSession

logger = logging.getLogger(__name__)

NO_ANSWER_MESSAGE = "No answer received."
ASK_FAILED_MESSAGE = "Failed to get an answer."


class AskController:
    """Submits the pending question and records the answer.

    With ``serialize`` enabled only one question is with the backend at a
    time and answers land in the order questions were asked. Without it,
    answers are appended in whatever order their requests finish.
    """

    def __init__(
        self,
        session: ChatSession,
        client: PDFChatClient,
        on_change: Callable[[], None] | None = None,
        serialize: bool = True,
    ) -> None:
        self._session = session
        self._client = client
        self._on_change = on_change
        self._lock = asyncio.Lock() if serialize else None

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()

    async def submit(self) -> None:
        """Submit the session's pending question.

        Blank questions are ignored. Otherwise the question is appended as a
        user entry and the input cleared before any network I/O; exactly one
        bot entry (answer, fallback or error) follows.
        """
        question = self._session.pending_question
        if not question.strip():
            return

        self._session.add_entry(Author.USER, question)
        self._session.pending_question = ""
        self._notify()

        if self._lock is None:
            await self._answer(question)
        else:
            async with self._lock:
                await self._answer(question)

    async def _answer(self, question: str) -> None:
        answer = await self._fetch_answer(question)
        self._session.add_entry(Author.BOT, answer)
        self._notify()

    async def _fetch_answer(self, question: str) -> str:
        try:
            answer = await self._client.ask(question)
        except APIRequestError as e:
            logger.error(f"Error asking question: {e}")
            return ASK_FAILED_MESSAGE

        if not answer:
            logger.info("Backend returned no answer")
            return NO_ANSWER_MESSAGE
        return answer
