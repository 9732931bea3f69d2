"""Tests for the anonymize and correction actions."""

import pytest

from conftest import FakeGateway
from transcriber.errors import ServiceError, SessionBusyError, ValidationError
from transcriber.progress import ProgressReporter
from transcriber.services.post_processing import PostProcessingService

TRANSCRIPT = (
    "João da Silva – Autor – Moro na Rua das Flores, 10, e cobro R$ 5.000,00 "
    "da empresa Alfa Ltda."
)


@pytest.fixture
def transcribed_session(session):
    session.transcript.append(TRANSCRIPT)
    return session


class TestAnonymize:
    """Scenario C."""

    @pytest.mark.asyncio
    async def test_single_call_replaces_buffer(self, transcribed_session, record_progress, progress_log):
        anonymized = "J. S. – Autor – Moro na R. F., 10, e cobro x da empresa A. L."
        gateway = FakeGateway(once_responses=[anonymized])
        service = PostProcessingService(
            transcribed_session, gateway, ProgressReporter(callback=record_progress)
        )

        result = await service.anonymize()

        assert result == anonymized
        assert transcribed_session.transcript.text == anonymized
        assert len(gateway.once_calls) == 1
        assert gateway.stream_calls == []
        (prompt,) = gateway.once_calls[0]
        assert TRANSCRIPT in prompt
        assert "iniciais" in prompt
        assert '"x"' in prompt
        assert progress_log == [(0.0, "Anonimizando o texto..."), (100.0, "Texto anonimizado!")]
        assert transcribed_session.processing is False

    @pytest.mark.asyncio
    async def test_empty_transcript_is_rejected(self, session):
        gateway = FakeGateway()

        with pytest.raises(ValidationError):
            await PostProcessingService(session, gateway).anonymize()

        assert gateway.once_calls == []
        assert session.processing is False

    @pytest.mark.asyncio
    async def test_failure_leaves_buffer_unchanged(self, transcribed_session):
        gateway = FakeGateway(once_error=ServiceError("indisponível"))

        with pytest.raises(ServiceError):
            await PostProcessingService(transcribed_session, gateway).anonymize()

        assert transcribed_session.transcript.text == TRANSCRIPT
        assert transcribed_session.processing is False

    @pytest.mark.asyncio
    async def test_busy_session_is_rejected(self, transcribed_session):
        transcribed_session.processing = True
        gateway = FakeGateway()

        with pytest.raises(SessionBusyError):
            await PostProcessingService(transcribed_session, gateway).anonymize()

        assert gateway.once_calls == []


class TestApplyCorrection:
    @pytest.mark.asyncio
    async def test_correction_replaces_buffer_and_clears_input(self, transcribed_session):
        transcribed_session.correction = "O nome correto é João da Silva Filho"
        corrected = TRANSCRIPT.replace("João da Silva", "João da Silva Filho")
        gateway = FakeGateway(once_responses=[corrected])

        result = await PostProcessingService(transcribed_session, gateway).apply_correction()

        assert result == corrected
        assert transcribed_session.transcript.text == corrected
        assert transcribed_session.correction == ""
        (prompt,) = gateway.once_calls[0]
        assert '"O nome correto é João da Silva Filho"' in prompt
        assert TRANSCRIPT in prompt
        assert "sem comentários adicionais" in prompt

    @pytest.mark.asyncio
    async def test_empty_correction_is_rejected(self, transcribed_session):
        transcribed_session.correction = ""
        gateway = FakeGateway()

        with pytest.raises(ValidationError):
            await PostProcessingService(transcribed_session, gateway).apply_correction()

        assert gateway.once_calls == []
        assert transcribed_session.transcript.text == TRANSCRIPT

    @pytest.mark.asyncio
    async def test_whitespace_correction_is_sent_as_is(self, transcribed_session):
        transcribed_session.correction = "   "
        gateway = FakeGateway(once_responses=[TRANSCRIPT])

        await PostProcessingService(transcribed_session, gateway).apply_correction()

        (prompt,) = gateway.once_calls[0]
        assert '"   "' in prompt

    @pytest.mark.asyncio
    async def test_empty_transcript_is_rejected(self, session):
        session.correction = "trocar nome"
        gateway = FakeGateway()

        with pytest.raises(ValidationError):
            await PostProcessingService(session, gateway).apply_correction()

        assert gateway.once_calls == []
        assert session.correction == "trocar nome"

    @pytest.mark.asyncio
    async def test_failure_keeps_text_and_correction(self, transcribed_session):
        transcribed_session.correction = "trocar nome"
        gateway = FakeGateway(once_error=RuntimeError("timeout"))

        with pytest.raises(ServiceError):
            await PostProcessingService(transcribed_session, gateway).apply_correction()

        assert transcribed_session.transcript.text == TRANSCRIPT
        assert transcribed_session.correction == "trocar nome"
        assert transcribed_session.processing is False
