"""Conversation state and the two request pipelines.

Responsibilities:
    - Append-only transcript with a single placeholder replacement
    - Explicit session state machine (idle, sending, uploading, complete)
    - Text turns with optimistic append
    - Upload-then-text turns with a hidden document payload

The controller is the only public entry point for user actions.
"""

from onboarding_chat.session.controller import SessionController
from onboarding_chat.session.message_log import MessageLog, MessageLogError
from onboarding_chat.session.state import (
    InvalidTransitionError,
    SessionEvent,
    SessionState,
    transition,
)
from onboarding_chat.session.submitter import TurnSubmitter
from onboarding_chat.session.upload import UploadPipeline

__all__ = [
    "InvalidTransitionError",
    "MessageLog",
    "MessageLogError",
    "SessionController",
    "SessionEvent",
    "SessionState",
    "TurnSubmitter",
    "UploadPipeline",
    "transition",
]
