"""NiceGUI interface - thin presentation layer over the chat session.

Responsibilities:
    - PDF picker with upload-in-progress indicator and accumulated file list
    - Transcript display with user and bot entries told apart
    - Question input with submit-on-Enter and Shift+Enter for new lines

Contains no business logic. Routes events to the upload and ask controllers.
"""
