"""Shared test configuration and fixtures for all tests."""

from collections.abc import AsyncIterator, Sequence
import os

import pytest

# Mock environment variables for testing (before settings are imported)
os.environ["GOOGLE_API_KEY"] = "test-key-123"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from pydantic_ai import models  # noqa: E402

from transcriber.errors import ServiceError  # noqa: E402
from transcriber.models import MediaFile  # noqa: E402
from transcriber.session import SessionState  # noqa: E402

# Block real model requests during testing
models.ALLOW_MODEL_REQUESTS = False


class FakeGateway:
    """Scripted stand-in for GenerativeGateway that records every call.

    ``streams`` holds the fragments returned per streaming call, in call order.
    ``stream_failures`` maps a streaming call index to the number of fragments
    delivered before the stream breaks.
    """

    def __init__(
        self,
        participants: str = "Dr. Carlos Souza – Juiz\nDra. Ana Lima – Promotora",
        streams: Sequence[Sequence[str]] = (),
        once_responses: Sequence[str] = (),
        once_error: Exception | None = None,
        stream_failures: dict[int, int] | None = None,
    ):
        self.participants = participants
        self.streams = [list(s) for s in streams]
        self.once_responses = list(once_responses)
        self.once_error = once_error
        self.stream_failures = stream_failures or {}
        self.once_calls: list[list] = []
        self.stream_calls: list[list] = []

    async def complete_once(self, parts) -> str:
        self.once_calls.append(list(parts))
        if self.once_error is not None:
            raise self.once_error
        if self.once_responses:
            return self.once_responses.pop(0)
        return self.participants

    async def complete_streaming(self, parts) -> AsyncIterator[str]:
        call_index = len(self.stream_calls)
        self.stream_calls.append(list(parts))
        fragments = self.streams[call_index] if call_index < len(self.streams) else []
        fail_after = self.stream_failures.get(call_index)

        for delivered, fragment in enumerate(fragments):
            if fail_after is not None and delivered == fail_after:
                raise ServiceError("stream interrupted")
            yield fragment
        if fail_after is not None and fail_after >= len(fragments):
            raise ServiceError("stream interrupted")


@pytest.fixture
def pdf_file() -> MediaFile:
    """Minutes document."""
    return MediaFile(name="ata_audiencia.pdf", media_type="application/pdf", data=b"%PDF-1.4 ata")


@pytest.fixture
def video_files() -> list[MediaFile]:
    """Two hearing recordings in arrival order."""
    return [
        MediaFile(name="parte1.mp4", media_type="video/mp4", data=b"\x00video-1"),
        MediaFile(name="parte2.webm", media_type="video/webm", data=b"\x00video-2"),
    ]


@pytest.fixture
def other_file() -> MediaFile:
    """A file the intake must ignore."""
    return MediaFile(name="notas.txt", media_type="text/plain", data=b"notas")


@pytest.fixture
def session() -> SessionState:
    return SessionState()


@pytest.fixture
def ready_session(session, pdf_file, video_files) -> SessionState:
    """Session with a document and two videos, ready to start."""
    session.document = pdf_file
    session.videos = list(video_files)
    return session


@pytest.fixture
def progress_log() -> list[tuple[float, str]]:
    return []


@pytest.fixture
def record_progress(progress_log):
    """Synchronous progress callback appending (percentage, label)."""

    def callback(percentage: float, label: str) -> None:
        progress_log.append((percentage, label))

    return callback
