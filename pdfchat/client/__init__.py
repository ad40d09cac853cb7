"""Backend client for the document Q&A service.

Responsibilities:
    - Multipart upload of selected PDFs
    - JSON question/answer round trip
    - Collapsing transport and HTTP status failures into APIRequestError
    - Loading the backend origin and timeout from the environment
"""

from pdfchat.client.api import APIRequestError, PDFChatClient
from pdfchat.client.config import ClientConfig, get_client_config

__all__ = ["APIRequestError", "ClientConfig", "PDFChatClient", "get_client_config"]
