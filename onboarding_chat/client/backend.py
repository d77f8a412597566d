"""httpx client for the onboarding backend.

Talks to the two endpoints the conversation depends on: chat completion and
document extraction. Every failure surfaces as a BackendError subclass so the
pipelines can handle them uniformly:

- BackendTransportError: connection problems, timeouts, non-2xx statuses
- BackendDecodeError: a body that is not JSON or not the expected shape
- ExtractionError: the extraction endpoint answered but produced no text
"""

import logging
from collections.abc import Sequence

import httpx
from pydantic import ValidationError

from onboarding_chat.client.config import ClientConfig, get_client_config
from onboarding_chat.models.schemas import (
    ChatReply,
    ChatRequest,
    ExtractionReply,
    UploadedFile,
    WireTurn,
)

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """Raised when a backend call does not yield a usable result."""

    pass


class BackendTransportError(BackendError):
    """Network failure, timeout, or non-2xx status."""

    pass


class BackendDecodeError(BackendError):
    """Response body does not match the expected shape."""

    pass


class ExtractionError(BackendError):
    """Extraction endpoint returned no usable text."""

    pass


class BackendClient:
    """Stateless client for the chat and upload endpoints.

    Opens a short-lived httpx.AsyncClient per call. The backend keeps no
    conversation state, so every chat call carries the full transcript.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the backend client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport, used to fake the backend in tests.
        """
        self._config = config or get_client_config()
        self._transport = transport

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._config.api_base_url,
            timeout=self._config.request_timeout,
            transport=self._transport,
        )

    async def complete(self, messages: Sequence[WireTurn]) -> ChatReply:
        """Send the transcript to the chat endpoint.

        Args:
            messages: Full transcript, oldest first.

        Returns:
            The parsed reply, either content or a redirect.

        Raises:
            BackendTransportError: On connection failure or non-2xx status.
            BackendDecodeError: If the body is not a valid reply.
        """
        payload = ChatRequest(messages=list(messages))
        async with self._client() as client:
            try:
                response = await client.post(
                    self._config.chat_path,
                    json=payload.model_dump(mode="json"),
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise BackendTransportError(
                    f"Chat endpoint returned HTTP {e.response.status_code}"
                ) from e
            except httpx.RequestError as e:
                raise BackendTransportError(f"Connection failed: {e}") from e

        try:
            return ChatReply.model_validate_json(response.content)
        except ValidationError as e:
            raise BackendDecodeError(f"Unexpected chat reply: {e}") from e

    async def extract_text(self, upload: UploadedFile) -> str:
        """Send a file to the extraction endpoint and return its text.

        Args:
            upload: The picked file.

        Returns:
            Non-empty extracted text.

        Raises:
            BackendTransportError: On connection failure or non-2xx status.
            BackendDecodeError: If the body is not JSON.
            ExtractionError: If the reply has no text or empty text.
        """
        files = {
            self._config.upload_field: (upload.name, upload.content, upload.content_type)
        }
        async with self._client() as client:
            try:
                response = await client.post(self._config.upload_path, files=files)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise BackendTransportError(
                    f"Upload endpoint returned HTTP {e.response.status_code}"
                ) from e
            except httpx.RequestError as e:
                raise BackendTransportError(f"Connection failed: {e}") from e

        try:
            reply = ExtractionReply.model_validate_json(response.content)
        except ValidationError as e:
            raise BackendDecodeError(f"Unexpected upload reply: {e}") from e

        if not reply.text:
            raise ExtractionError(f"No text extracted from {upload.name}")

        logger.info(f"Extracted {len(reply.text)} characters from {upload.name}")
        return reply.text


# Module-level singleton instance
_backend_client: BackendClient | None = None


def get_backend_client() -> BackendClient:
    """Get or create the global backend client.

    Returns:
        The BackendClient instance.
    """
    global _backend_client
    if _backend_client is None:
        _backend_client = BackendClient()
    return _backend_client
