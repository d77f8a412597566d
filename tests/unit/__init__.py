"""Unit tests for individual components in isolation.

Coverage:
    - models/: Turn invariants and backend reply parsing
    - session/: MessageLog and the state transition table
    - client/: Configuration and BackendClient error mapping
"""
