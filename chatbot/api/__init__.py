"""HTTP shell for the chatbot.

Endpoints:
    - GET /health: Service health status
    - GET /: Chat page (mounted by NiceGUI)
"""

from chatbot.api.app import create_app

__all__ = ["create_app"]
