"""Session state machine.

A session is always in exactly one state. Text turns run
IDLE -> SENDING -> IDLE, file turns run IDLE -> UPLOADING -> SENDING -> IDLE,
and a redirect from the backend ends the session in COMPLETE, which accepts
no further events.
"""

from enum import Enum


class SessionState(str, Enum):
    """Finite state machine for the conversation lifecycle."""

    IDLE = "idle"
    SENDING = "sending"
    UPLOADING = "uploading"
    COMPLETE = "complete"


class SessionEvent(str, Enum):
    """Things that move a session between states."""

    SEND = "send"
    UPLOAD = "upload"
    EXTRACTED = "extracted"
    REPLIED = "replied"
    REDIRECTED = "redirected"
    FAILED = "failed"


class InvalidTransitionError(Exception):
    """Raised when an event is not valid from the current state."""

    def __init__(self, state: SessionState, event: SessionEvent) -> None:
        super().__init__(f"Cannot handle {event.value!r} while {state.value!r}")
        self.state = state
        self.event = event


_TRANSITIONS: dict[tuple[SessionState, SessionEvent], SessionState] = {
    (SessionState.IDLE, SessionEvent.SEND): SessionState.SENDING,
    (SessionState.IDLE, SessionEvent.UPLOAD): SessionState.UPLOADING,
    (SessionState.UPLOADING, SessionEvent.EXTRACTED): SessionState.SENDING,
    (SessionState.UPLOADING, SessionEvent.FAILED): SessionState.IDLE,
    (SessionState.SENDING, SessionEvent.REPLIED): SessionState.IDLE,
    (SessionState.SENDING, SessionEvent.FAILED): SessionState.IDLE,
    (SessionState.SENDING, SessionEvent.REDIRECTED): SessionState.COMPLETE,
}


def transition(state: SessionState, event: SessionEvent) -> SessionState:
    """Return the state that follows `state` on `event`.

    Raises:
        InvalidTransitionError: If the pair is not in the transition table.
    """
    try:
        return _TRANSITIONS[(state, event)]
    except KeyError:
        raise InvalidTransitionError(state, event) from None


def accepts_input(state: SessionState) -> bool:
    """Return True when a new text or file turn may start."""
    return state == SessionState.IDLE
