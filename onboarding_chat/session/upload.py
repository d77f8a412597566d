"""Resume upload pipeline.

Two stages, strictly in order:

1. Append a placeholder user turn naming the file, before any network call.
2. Send the file to the extraction endpoint. On success the placeholder is
   replaced by a confirmation turn whose backend text embeds the whole
   extracted document; on failure an error turn is appended and the
   placeholder stays as it was.

Handing the confirmed turn to the chat endpoint is the caller's job, since
only the session controller may move the session into SENDING.
"""

import logging

from onboarding_chat.client.backend import (
    BackendClient,
    BackendError,
    ExtractionError,
)
from onboarding_chat.models.schemas import Role, Turn, UploadedFile
from onboarding_chat.session.message_log import MessageLog

logger = logging.getLogger(__name__)


def placeholder_turn(filename: str) -> Turn:
    return Turn(role=Role.USER, display_content=f"[Uploading {filename}...]", placeholder=True)


def confirmation_turn(filename: str, extracted_text: str) -> Turn:
    """Build the turn that stands in for an uploaded document.

    The user sees a short confirmation; the backend receives the filename and
    the full extracted text.
    """
    return Turn.user(
        f"Uploaded resume: {filename}",
        backend_content=(
            f"[User uploaded resume {filename}. Extracted content: {extracted_text}]"
        ),
    )


class UploadPipeline:
    """Turns a picked file into a confirmation turn in the MessageLog."""

    def __init__(self, log: MessageLog, backend: BackendClient) -> None:
        self._log = log
        self._backend = backend

    async def upload(self, upload: UploadedFile) -> Turn | None:
        """Run placeholder and extraction stages for one file.

        Args:
            upload: The picked file.

        Returns:
            The confirmation turn now at the end of the log, or None if the
            upload failed and an error turn was appended instead.
        """
        self._log.append(placeholder_turn(upload.name))

        try:
            text = await self._backend.extract_text(upload)
        except ExtractionError as e:
            logger.warning(f"Upload error: {e}")
            self._log.append(Turn.assistant(self._backend.config.upload_error_message))
            return None
        except BackendError as e:
            logger.error(f"Upload error for {upload.name}: {e}")
            self._log.append(Turn.assistant(self._backend.config.upload_error_message))
            return None

        confirmed = confirmation_turn(upload.name, text)
        self._log.replace_last(confirmed)
        return confirmed
