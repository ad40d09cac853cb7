"""Unit tests for individual components in isolation.

Coverage:
    - models/: Chat entries, payloads and session state
    - client/: Configuration validation
    - controllers/: Upload and ask flows with a mocked backend client
    - ui/: Keystroke and file-selection helpers

Uses unittest.mock for the backend client. Leverages pytest-check for
multiple assertions per test.
"""
