"""Session controller: the single entry point for user actions.

Owns the MessageLog and the SessionState, decides whether an action is
admissible, and composes the upload pipeline and turn submitter. It is the
only code that moves the session between states. Backend failures never
reach it; they arrive as turns appended to the log.
"""

import logging
from collections.abc import Callable

from onboarding_chat.client.backend import BackendClient
from onboarding_chat.models.schemas import Turn, UploadedFile
from onboarding_chat.session.message_log import MessageLog
from onboarding_chat.session.state import (
    SessionEvent,
    SessionState,
    accepts_input,
    transition,
)
from onboarding_chat.session.submitter import TurnSubmitter
from onboarding_chat.session.upload import UploadPipeline

logger = logging.getLogger(__name__)


class SessionController:
    """Manages one onboarding conversation.

    Exposes two actions, submit_text and submit_file. Both return False
    without touching anything when the session is busy or complete, or when
    there is nothing to submit.
    """

    def __init__(
        self,
        backend: BackendClient,
        on_change: Callable[[], None] | None = None,
        on_selection_reset: Callable[[], None] | None = None,
    ) -> None:
        """Initialize a session seeded with the greeting.

        Args:
            backend: Client for the chat and upload endpoints.
            on_change: Called after every transcript or state change.
            on_selection_reset: Called once an upload settles, so the file
                picker can accept the same file again.
        """
        self._backend = backend
        self._on_change = on_change
        self._on_selection_reset = on_selection_reset
        self._state = SessionState.IDLE
        self.draft: str = ""
        self._log = MessageLog(
            Turn.assistant(backend.config.greeting), on_change=self._notify
        )
        self._submitter = TurnSubmitter(self._log, backend)
        self._uploader = UploadPipeline(self._log, backend)

    @property
    def turns(self) -> list[Turn]:
        return self._log.turns

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def sending(self) -> bool:
        return self._state == SessionState.SENDING

    @property
    def uploading(self) -> bool:
        return self._state == SessionState.UPLOADING

    @property
    def is_complete(self) -> bool:
        return self._state == SessionState.COMPLETE

    @property
    def action_link(self) -> str | None:
        """Redirect destination once the session is complete."""
        return self._log.last.action_link if self.is_complete else None

    async def submit_text(self, text: str | None = None) -> bool:
        """Send a typed message.

        Args:
            text: Message to send. Defaults to the current draft.

        Returns:
            True if the message was accepted.
        """
        if text is None:
            text = self.draft
        if not text.strip() or not accepts_input(self._state):
            return False

        self.draft = ""
        self._fire(SessionEvent.SEND)
        answer: Turn | None = None
        try:
            answer = await self._submitter.submit(
                Turn.user(text), self._backend.config.completion_message
            )
        finally:
            self._settle(answer)
        return True

    async def submit_file(self, upload: UploadedFile | None) -> bool:
        """Upload a resume and let the assistant respond to its contents.

        Args:
            upload: The picked file, or None when the picker was dismissed.

        Returns:
            True if the upload was accepted.
        """
        if upload is None or not accepts_input(self._state):
            return False

        logger.info(f"Uploading {upload.name} ({len(upload.content)} bytes)")
        self._fire(SessionEvent.UPLOAD)
        answer: Turn | None = None
        try:
            confirmed = await self._uploader.upload(upload)
            if confirmed is None:
                self._fire(SessionEvent.FAILED)
                return True

            self._fire(SessionEvent.EXTRACTED)
            answer = await self._submitter.respond(
                self._backend.config.upload_completion_message,
                error_message=self._backend.config.upload_error_message,
            )
        finally:
            if self._state != SessionState.IDLE:
                self._settle(answer)
            if self._on_selection_reset is not None:
                self._on_selection_reset()
        return True

    def _settle(self, answer: Turn | None) -> None:
        if answer is None:
            # Only reached when an unexpected exception escaped a pipeline.
            self._fire(SessionEvent.FAILED)
        elif answer.action_link is not None:
            self._fire(SessionEvent.REDIRECTED)
        else:
            self._fire(SessionEvent.REPLIED)

    def _fire(self, event: SessionEvent) -> None:
        previous = self._state
        self._state = transition(previous, event)
        logger.debug(f"Session {previous.value} -> {self._state.value} on {event.value}")
        self._notify()

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()
