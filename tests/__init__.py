"""Test package for Gemini Chatbot.

Structure:
    - unit/: Configuration, session adapter, store, controller, and theme tests
    - integration/: HTTP tests and simulated-user tests of the chat page

No test reaches the real Gemini API; the Agno classes are patched.
Leverages pytest with pytest-check for soft assertions.
"""
