"""Unit tests for individual components in isolation.

Coverage:
    - agent/: Configuration validation and session adapter behavior
    - conversation/: Store ordering and the send lifecycle
    - ui/: Theme palettes

Uses mocks for the chat session and the Agno agent.
"""
