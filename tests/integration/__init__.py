"""Integration tests for the HTTP shell and the chat page.

Uses httpx AsyncClient with ASGITransport against the real FastAPI app,
and NiceGUI's simulated user for the page.
"""
