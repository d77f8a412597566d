"""Test package for Onboarding Chat.

Structure:
    - unit/: Models, transcript, state machine, config and backend client
    - integration/: Controller flows end to end and the hosting app

The backend is faked at the transport level with httpx.MockTransport, so
every layer above the socket runs for real. Uses pytest-check for soft
assertions.
"""
