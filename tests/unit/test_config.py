"""Unit tests for ClientConfig.

Tests environment loading and validation.
"""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from onboarding_chat.client.config import ClientConfig, get_client_config


class TestClientConfig:
    """Tests for ClientConfig validation."""

    def test_valid_config_with_all_fields(self) -> None:
        """Config accepts valid values for all endpoint fields."""
        config = ClientConfig(
            api_base_url="https://onboarding.example.com",
            chat_path="/v1/chat",
            upload_path="/v1/ocr",
            upload_field="document",
            request_timeout=30.0,
        )

        assert config.api_base_url == "https://onboarding.example.com"
        assert config.chat_path == "/v1/chat"
        assert config.upload_path == "/v1/ocr"
        assert config.upload_field == "document"
        assert config.request_timeout == 30.0

    def test_config_with_default_values(self) -> None:
        """Config uses the standard endpoint layout when nothing is set."""
        with patch.dict("os.environ", {}, clear=True):
            config = ClientConfig()

        assert config.api_base_url == "http://localhost:3000"
        assert config.chat_path == "/api/chat"
        assert config.upload_path == "/api/upload"
        assert config.upload_field == "file"
        assert config.request_timeout == 120.0
        assert config.accepted_file_types == ".pdf,.doc,.docx,image/*"

    def test_default_texts(self) -> None:
        config = ClientConfig()

        assert config.greeting.startswith("Hi! I'm your onboarding assistant.")
        assert config.error_message == "Sorry, I encountered an error. Please try again."
        assert config.upload_error_message.startswith("Failed to process the file")

    def test_config_strips_trailing_slash(self) -> None:
        config = ClientConfig(api_base_url="  http://backend.test/  ")

        assert config.api_base_url == "http://backend.test"

    def test_config_prefixes_relative_paths(self) -> None:
        config = ClientConfig(chat_path="api/chat")

        assert config.chat_path == "/api/chat"

    def test_config_fails_with_blank_base_url(self) -> None:
        """Config raises when the backend URL is whitespace-only."""
        with pytest.raises(ValidationError) as exc_info:
            ClientConfig(api_base_url="   ")

        assert "ONBOARDING_API_URL" in str(exc_info.value)

    @pytest.mark.parametrize("timeout", [0.0, -1.0])
    def test_config_rejects_non_positive_timeout(self, timeout: float) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ClientConfig(request_timeout=timeout)

        assert "request_timeout" in str(exc_info.value)


class TestGetClientConfig:
    """Tests for get_client_config factory function."""

    def test_get_config_from_environment(self) -> None:
        env = {
            "ONBOARDING_API_URL": "https://env.example.com/",
            "ONBOARDING_UPLOAD_FIELD": "resume",
            "ONBOARDING_REQUEST_TIMEOUT": "15",
        }
        with patch.dict("os.environ", env):
            config = get_client_config()

        assert config.api_base_url == "https://env.example.com"
        assert config.upload_field == "resume"
        assert config.request_timeout == 15.0

    def test_get_config_fails_with_bad_timeout(self) -> None:
        with (
            patch.dict("os.environ", {"ONBOARDING_REQUEST_TIMEOUT": "0"}),
            pytest.raises(ValidationError),
        ):
            get_client_config()
