"""Pydantic models for the conversation and the backend contracts.

Provides type safety and validation at the edges of the client.

Models:
    - Role: Author of a turn
    - Turn: One transcript entry, with separate display and backend text
    - WireTurn: A turn as serialized for the chat endpoint
    - ChatRequest: Outgoing chat payload
    - ChatReply: Chat endpoint response (content or redirect)
    - ExtractionReply: Upload endpoint response
    - UploadedFile: A picked file awaiting upload
"""

from onboarding_chat.models.schemas import (
    ChatReply,
    ChatRequest,
    ExtractionReply,
    Role,
    Turn,
    UploadedFile,
    WireTurn,
)

__all__ = [
    "ChatReply",
    "ChatRequest",
    "ExtractionReply",
    "Role",
    "Turn",
    "UploadedFile",
    "WireTurn",
]
