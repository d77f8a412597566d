from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Role(str, Enum):
    """Author of a turn."""

    USER = "user"
    ASSISTANT = "assistant"


class WireTurn(BaseModel):
    """A turn as the chat endpoint sees it.

    Attributes:
        role: The speaker identifier.
        content: The text sent to the backend.
    """

    role: Role
    content: str


class Turn(BaseModel):
    """One entry in the conversation transcript.

    Attributes:
        role: Who produced the turn.
        display_content: Text rendered to the user.
        backend_content: Text sent to the chat endpoint. Defaults to
            display_content; differs only for upload-derived turns.
        action_link: Follow-up URL. Only set on the terminal assistant turn.
        placeholder: Marks the provisional upload notice that is later replaced.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    display_content: str
    backend_content: str
    action_link: str | None = None
    placeholder: bool = False

    @model_validator(mode="before")
    @classmethod
    def default_backend_content(cls, data: object) -> object:
        """Send the displayed text unless a separate backend text is given."""
        if isinstance(data, dict) and data.get("backend_content") is None:
            data = {**data, "backend_content": data.get("display_content")}
        return data

    @model_validator(mode="after")
    def check_action_link(self) -> "Turn":
        if self.action_link is not None and self.role != Role.ASSISTANT:
            raise ValueError("action_link is only allowed on assistant turns")
        return self

    @property
    def content(self) -> str:
        return self.display_content

    def to_wire(self) -> WireTurn:
        return WireTurn(role=self.role, content=self.backend_content)

    @classmethod
    def user(cls, text: str, backend_content: str | None = None) -> "Turn":
        return cls(role=Role.USER, display_content=text, backend_content=backend_content)

    @classmethod
    def assistant(cls, text: str, action_link: str | None = None) -> "Turn":
        return cls(role=Role.ASSISTANT, display_content=text, action_link=action_link)


class ChatRequest(BaseModel):
    """Request payload for the chat endpoint.

    Attributes:
        messages: The full transcript, oldest first.
    """

    messages: list[WireTurn] = Field(..., min_length=1)


class ChatReply(BaseModel):
    """Response from the chat endpoint.

    Exactly one of two shapes is expected: prose to append, or a redirect
    marking the onboarding flow as finished. A redirect wins when both are
    present.

    Attributes:
        content: Assistant prose.
        redirect_url: Destination once onboarding is complete.
    """

    model_config = ConfigDict(populate_by_name=True)

    content: str | None = None
    redirect_url: str | None = Field(None, alias="redirectUrl")

    @field_validator("redirect_url", mode="before")
    @classmethod
    def blank_redirect_is_absent(cls, v: object) -> object:
        """Treat an empty redirect as no redirect."""
        if v == "":
            return None
        return v

    @model_validator(mode="after")
    def require_content_or_redirect(self) -> "ChatReply":
        if self.redirect_url is None and self.content is None:
            raise ValueError("reply carries neither content nor redirectUrl")
        return self

    @property
    def is_redirect(self) -> bool:
        return self.redirect_url is not None


class ExtractionReply(BaseModel):
    """Response from the document extraction endpoint.

    Attributes:
        text: Extracted document text. Missing or empty means extraction failed.
    """

    text: str | None = None


class UploadedFile(BaseModel):
    """A file picked by the user, held in memory until it is sent.

    Attributes:
        name: Original filename.
        content: Raw file bytes.
        content_type: MIME type reported by the picker.
    """

    name: str = Field(..., min_length=1)
    content: bytes
    content_type: str = "application/octet-stream"
