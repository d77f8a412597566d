"""Chat turn submission.

Sends the transcript to the chat endpoint and appends whatever comes back.
The user's turn is appended before the request goes out so it renders while
the call is pending. A failed call never removes it; the failure is reported
as one more assistant turn.
"""

import logging

from onboarding_chat.client.backend import BackendClient, BackendError
from onboarding_chat.models.schemas import Turn
from onboarding_chat.session.message_log import MessageLog

logger = logging.getLogger(__name__)


class TurnSubmitter:
    """Runs the request half of a conversation turn against a MessageLog."""

    def __init__(self, log: MessageLog, backend: BackendClient) -> None:
        self._log = log
        self._backend = backend

    async def submit(self, turn: Turn, completion_message: str) -> Turn:
        """Append a user turn, then request and append the assistant reply.

        Args:
            turn: The new user turn, not yet in the log.
            completion_message: Text shown alongside a redirect link.

        Returns:
            The assistant turn appended to the log.
        """
        self._log.append(turn)
        return await self.respond(completion_message)

    async def respond(self, completion_message: str, error_message: str | None = None) -> Turn:
        """Send the current log and append the assistant reply.

        Never raises on backend failure; the fixed error turn is appended instead.

        Args:
            completion_message: Text shown alongside a redirect link.
            error_message: Text shown if the call fails. Defaults to the
                configured chat error message.

        Returns:
            The assistant turn appended to the log.
        """
        try:
            reply = await self._backend.complete(self._log.payload())
        except BackendError as e:
            logger.error(f"Error sending message: {e}")
            answer = Turn.assistant(error_message or self._backend.config.error_message)
        else:
            if reply.is_redirect:
                logger.info(f"Onboarding complete, redirecting to {reply.redirect_url}")
                answer = Turn.assistant(completion_message, action_link=reply.redirect_url)
            else:
                answer = Turn.assistant(reply.content or "")

        self._log.append(answer)
        return answer
