"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Chat message display with author and time captions
    - Composer with Enter-to-send and a send button
    - Dismissible error notifications
    - Light/dark theme palettes

Contains no request logic. Delegates every action to the chat controller.
"""
