"""HTTPX client for the document Q&A backend.

Two calls only: POST /upload (multipart, every file under ``pdfs``) and
POST /ask (JSON ``{"question": ...}``). Every way a call can fail, whether
transport error, non-2xx status or malformed body, is raised as APIRequestError.
"""

import logging

import httpx

from pdfchat.client.config import ClientConfig, get_client_config
from pdfchat.models.schemas import AskRequest, AskResponse, SelectedFile

logger = logging.getLogger(__name__)

UPLOAD_FIELD = "pdfs"


class APIRequestError(Exception):
    """Raised when a backend request fails for any reason."""

    pass


class PDFChatClient:
    """Async client for the upload and ask endpoints."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            transport: Optional HTTPX transport, used to route requests
                       somewhere other than the network.
        """
        self._config = config or get_client_config()
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        kwargs: dict = {"base_url": self._config.api_base_url}
        if self._config.request_timeout is not None:
            kwargs["timeout"] = self._config.request_timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)

    async def upload(self, files: list[SelectedFile]) -> None:
        """Upload files to the backend for indexing.

        Args:
            files: Files to send, each as a ``pdfs`` form part.

        Raises:
            APIRequestError: On transport failure or non-2xx status.
        """
        form = [(UPLOAD_FIELD, (f.name, f.content, f.content_type)) for f in files]
        async with self._client() as client:
            try:
                response = await client.post("/upload", files=form)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise APIRequestError(f"Upload failed: HTTP {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise APIRequestError(f"Upload failed: {e!r}") from e

    async def ask(self, question: str) -> str | None:
        """Ask the backend a question about the uploaded documents.

        Args:
            question: The question text, sent as-is.

        Returns:
            The answer text, or None if the backend sent none.

        Raises:
            APIRequestError: On transport failure, non-2xx status or a body
                that is not a JSON object matching AskResponse.
        """
        payload = AskRequest(question=question)
        async with self._client() as client:
            try:
                response = await client.post(
                    "/ask",
                    json=payload.model_dump(),
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
                data = AskResponse.model_validate(response.json())
            except httpx.HTTPStatusError as e:
                raise APIRequestError(f"Ask failed: HTTP {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise APIRequestError(f"Ask failed: {e!r}") from e
            except ValueError as e:
                # json.JSONDecodeError and pydantic.ValidationError
                raise APIRequestError(f"Ask failed: malformed response: {e}") from e
        return data.answer
