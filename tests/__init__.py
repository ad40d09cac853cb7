"""Test package for the PDF chat client.

Unit tests cover state, payloads, configuration and controllers in
isolation. Integration tests drive the controllers through the real HTTP
client against a stub backend.

Structure:
    - unit/: Individual function and class tests
    - integration/: Controller + client + stub backend workflows

Leverages pytest with pytest-asyncio and pytest-check for soft assertions.
"""
