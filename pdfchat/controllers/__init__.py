"""Controllers that turn user actions into session state changes.

Responsibilities:
    - Upload flow: accumulate selected files, track the in-flight flag,
      report failures in the transcript
    - Ask flow: record the question, clear the input, append exactly one
      answer or error entry

Both controllers recover from every backend failure locally. Nothing
they do can leave the page unusable.
"""

from pdfchat.controllers.ask import ASK_FAILED_MESSAGE, NO_ANSWER_MESSAGE, AskController
from pdfchat.controllers.upload import UPLOAD_FAILED_MESSAGE, UploadController

__all__ = [
    "ASK_FAILED_MESSAGE",
    "NO_ANSWER_MESSAGE",
    "UPLOAD_FAILED_MESSAGE",
    "AskController",
    "UploadController",
]
