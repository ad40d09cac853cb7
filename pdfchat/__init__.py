"""PDF Chat - browser client for asking questions about uploaded PDF documents.

Combines NiceGUI for the interface, HTTPX for backend calls,
and Pydantic for state and payload validation.

Components:
    - models: Chat entries, wire payloads and per-page session state
    - client: Backend HTTP client and configuration
    - controllers: Upload and ask flows that mutate session state
    - ui: Web interface wiring user events to the controllers
"""

__version__ = "0.1.0"
