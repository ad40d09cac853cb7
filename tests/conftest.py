"""Pytest fixtures and shared test configuration.

Fixtures:
    - session: Fresh ChatSession
    - make_pdf: Factory for SelectedFile test doubles
    - backend: Stub FastAPI backend for the upload and ask endpoints
    - backend_client: PDFChatClient wired to the stub backend
    - offline_client: PDFChatClient whose every request fails to connect
"""

import asyncio
from collections.abc import Callable
from typing import Annotated, Any

import httpx
import pytest
from fastapi import FastAPI, File, Request, UploadFile
from fastapi.responses import JSONResponse, Response

from pdfchat.client.api import PDFChatClient
from pdfchat.client.config import ClientConfig
from pdfchat.models.schemas import SelectedFile
from pdfchat.models.session import ChatSession

TEST_BASE_URL = "http://backend.test"


class StubBackend:
    """In-process stand-in for the document Q&A service.

    Records every request it receives. By default uploads succeed and each
    question is answered with ``"Answer to <question>"``.

    Attributes:
        upload_status: Status code returned by POST /upload.
        ask_status: Status code returned by POST /ask.
        ask_body: JSON body for POST /ask (None echoes an answer, a str is
                  sent as a raw text body).
        ask_delays: Seconds to wait before answering a given question.
        upload_gate: When set, POST /upload waits for this event before
                     answering.
        uploads: Received uploads as lists of (filename, content) pairs.
        asks: Received asks as (content type, JSON body) pairs.
    """

    def __init__(self) -> None:
        self.upload_status: int = 200
        self.ask_status: int = 200
        self.ask_body: Any = None
        self.ask_delays: dict[str, float] = {}
        self.upload_gate: asyncio.Event | None = None
        self.uploads: list[list[tuple[str, bytes]]] = []
        self.asks: list[tuple[str | None, Any]] = []
        self.app = self._create_app()

    def _create_app(self) -> FastAPI:
        app = FastAPI()

        @app.post("/upload")
        async def upload(pdfs: Annotated[list[UploadFile], File()]) -> JSONResponse:
            self.uploads.append([(f.filename, await f.read()) for f in pdfs])
            if self.upload_gate is not None:
                await self.upload_gate.wait()
            return JSONResponse({"uploaded": len(pdfs)}, status_code=self.upload_status)

        @app.post("/ask")
        async def ask(request: Request) -> Response:
            body = await request.json()
            self.asks.append((request.headers.get("content-type"), body))

            delay = self.ask_delays.get(body.get("question", ""), 0)
            if delay:
                await asyncio.sleep(delay)

            if isinstance(self.ask_body, str):
                return Response(self.ask_body, status_code=self.ask_status, media_type="text/plain")
            content = self.ask_body
            if content is None:
                content = {"answer": f"Answer to {body['question']}"}
            return JSONResponse(content, status_code=self.ask_status)

        return app


@pytest.fixture
def session() -> ChatSession:
    """Return an empty chat session."""
    return ChatSession()


@pytest.fixture
def make_pdf() -> Callable[[str], SelectedFile]:
    """Return a factory for small PDF-like SelectedFile objects."""

    def _make(name: str) -> SelectedFile:
        return SelectedFile(name=name, content=b"%PDF-1.4\n% " + name.encode())

    return _make


@pytest.fixture
def backend() -> StubBackend:
    """Return a stub backend with default (successful) behavior."""
    return StubBackend()


@pytest.fixture
def backend_client(backend: StubBackend) -> PDFChatClient:
    """Return a client that talks to the stub backend in-process."""
    return PDFChatClient(
        ClientConfig(api_base_url=TEST_BASE_URL),
        transport=httpx.ASGITransport(app=backend.app),
    )


@pytest.fixture
def offline_client() -> PDFChatClient:
    """Return a client whose requests all fail with a connection error."""

    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return PDFChatClient(
        ClientConfig(api_base_url=TEST_BASE_URL),
        transport=httpx.MockTransport(refuse),
    )
