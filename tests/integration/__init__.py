"""Integration tests for the client and controllers working together.

No mocks for the HTTP layer - requests go through PDFChatClient and HTTPX
into a stub FastAPI backend mounted with ASGITransport.

Coverage:
    - Multipart upload with every file under the ``pdfs`` field
    - JSON ask round trip and answer fallbacks
    - Failure statuses and transport errors surfaced as transcript entries
    - Answer ordering for overlapping questions
"""
