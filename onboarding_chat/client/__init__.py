"""HTTP access to the onboarding backend.

Handles the request/response contracts of the chat-completion and
document-extraction endpoints.

Responsibilities:
    - Environment-driven configuration of endpoints, timeouts and fixed texts
    - Serializing the transcript for the chat endpoint
    - Multipart file upload for text extraction
    - Mapping transport, decode and empty-extraction failures to typed errors

Holds no conversation state. The session layer owns the transcript.
"""

from onboarding_chat.client.backend import (
    BackendClient,
    BackendDecodeError,
    BackendError,
    BackendTransportError,
    ExtractionError,
    get_backend_client,
)
from onboarding_chat.client.config import ClientConfig, get_client_config

__all__ = [
    "BackendClient",
    "BackendDecodeError",
    "BackendError",
    "BackendTransportError",
    "ClientConfig",
    "ExtractionError",
    "get_backend_client",
    "get_client_config",
]
