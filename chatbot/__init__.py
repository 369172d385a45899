"""Gemini Chatbot - single-page virtual assistant backed by Google Gemini.

Combines NiceGUI for the chat page, Agno for model orchestration,
FastAPI for the serving shell, and Pydantic for data validation.

Components:
    - agent: Gemini session adapter, configuration, and error taxonomy
    - conversation: Append-only message store and request lifecycle
    - models: Message and palette schemas
    - ui: Chat page and theme palettes
    - api: Application factory and health endpoint
"""

__version__ = "0.1.0"
