"""Client configuration with environment variable loading.

Pydantic-based configuration for the onboarding chat client.
Points the client at any backend that honours the chat and upload contracts.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()


def _env_timeout() -> float:
    return float(os.getenv("ONBOARDING_REQUEST_TIMEOUT", "120"))


class ClientConfig(BaseModel):
    """Configuration for the onboarding chat client.

    Attributes:
        api_base_url: Base URL of the onboarding backend.
        chat_path: Path of the chat-completion endpoint.
        upload_path: Path of the document-extraction endpoint.
        upload_field: Multipart field name the upload endpoint reads the file from.
        request_timeout: Seconds before a backend call counts as failed.
        accepted_file_types: File-picker hint. Not enforced.
        greeting: Seed assistant turn that opens every session.
        completion_message: Shown with the redirect link after a text turn.
        upload_completion_message: Shown with the redirect link after an upload.
        error_message: Shown when a chat call fails.
        upload_error_message: Shown when an upload or extraction fails.
    """

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("ONBOARDING_API_URL", "http://localhost:3000"),
        description="Onboarding backend base URL",
    )
    chat_path: str = Field(
        default_factory=lambda: os.getenv("ONBOARDING_CHAT_PATH", "/api/chat"),
    )
    upload_path: str = Field(
        default_factory=lambda: os.getenv("ONBOARDING_UPLOAD_PATH", "/api/upload"),
    )
    upload_field: str = Field(
        default_factory=lambda: os.getenv("ONBOARDING_UPLOAD_FIELD", "file"),
        min_length=1,
    )
    request_timeout: float = Field(
        default_factory=_env_timeout,
        gt=0.0,
        description="Per-request timeout in seconds",
    )
    accepted_file_types: str = Field(
        default_factory=lambda: os.getenv(
            "ONBOARDING_ACCEPTED_FILE_TYPES", ".pdf,.doc,.docx,image/*"
        ),
    )
    greeting: str = (
        "Hi! I'm your onboarding assistant. I'm here to get you set up for your "
        "mock interview. To start, could you please tell me your full name?"
    )
    completion_message: str = (
        "Great! I've collected everything. Click below to start your interview."
    )
    upload_completion_message: str = "Received your resume! I have everything now."
    error_message: str = "Sorry, I encountered an error. Please try again."
    upload_error_message: str = "Failed to process the file. Please try uploading again."

    @field_validator("api_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require a base URL and drop any trailing slash."""
        if not v or not v.strip():
            raise ValueError("Backend URL required. Set ONBOARDING_API_URL in .env")
        return v.strip().rstrip("/")

    @field_validator("chat_path", "upload_path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Endpoint paths are joined to the base URL and must be absolute."""
        v = v.strip()
        if not v.startswith("/"):
            v = f"/{v}"
        return v


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValidationError: If an environment value is invalid.
    """
    return ClientConfig()
