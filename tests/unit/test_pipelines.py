"""Unit tests for TurnSubmitter and UploadPipeline on a bare MessageLog."""

import httpx
import pytest_check as check

from onboarding_chat.client.backend import BackendClient
from onboarding_chat.models.schemas import Turn, UploadedFile
from onboarding_chat.session.message_log import MessageLog
from onboarding_chat.session.submitter import TurnSubmitter
from onboarding_chat.session.upload import UploadPipeline, confirmation_turn, placeholder_turn
from tests.conftest import FakeBackend

GREETING = Turn.assistant("Hi!")


class TestTurnSubmitter:
    """Tests for the chat request pipeline."""

    async def test_submit_returns_appended_reply(
        self, backend: BackendClient, fake_backend: FakeBackend
    ) -> None:
        log = MessageLog(GREETING)
        fake_backend.chat_replies.append({"content": "Hello"})

        answer = await TurnSubmitter(log, backend).submit(Turn.user("Alice"), "done")

        check.equal(answer, Turn.assistant("Hello"))
        check.equal(log.last, answer)

    async def test_respond_uses_given_error_message(
        self, backend: BackendClient, fake_backend: FakeBackend
    ) -> None:
        log = MessageLog(GREETING)
        fake_backend.chat_replies.append(httpx.Response(503))

        answer = await TurnSubmitter(log, backend).respond("done", error_message="upload broke")

        check.equal(answer.content, "upload broke")
        check.equal(len(log), 2)


class TestUploadPipeline:
    """Tests for the placeholder and extraction stages."""

    async def test_success_replaces_placeholder(
        self, backend: BackendClient, fake_backend: FakeBackend, resume: UploadedFile
    ) -> None:
        log = MessageLog(GREETING)
        fake_backend.upload_replies.append({"text": "T"})

        confirmed = await UploadPipeline(log, backend).upload(resume)

        check.equal(confirmed, confirmation_turn("resume.pdf", "T"))
        check.equal(log.turns, [GREETING, confirmed])
        check.equal(fake_backend.chat_requests, [])

    async def test_failure_keeps_placeholder(
        self, backend: BackendClient, fake_backend: FakeBackend, resume: UploadedFile
    ) -> None:
        log = MessageLog(GREETING)
        fake_backend.upload_replies.append({"text": ""})

        confirmed = await UploadPipeline(log, backend).upload(resume)

        check.is_none(confirmed)
        check.equal(log.turns[1], placeholder_turn("resume.pdf"))
        check.equal(log.last, Turn.assistant(backend.config.upload_error_message))
