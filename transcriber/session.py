"""Volatile session state and file intake.

A single ``SessionState`` is the source of truth for what the UI may enable.
Nothing here is persisted; reloading the page starts a new session.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

import structlog

from shared.config import ERROR_MESSAGES
from transcriber.errors import SessionBusyError
from transcriber.models import MediaFile
from transcriber.prompts import SEGMENT_BEGIN_PATTERN, SEGMENT_END_PATTERN

logger = structlog.get_logger(__name__)


class TranscriptBuffer:
    """Mutable text accumulator for the transcript."""

    def __init__(self, text: str = "") -> None:
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def append(self, fragment: str) -> None:
        self._text += fragment

    def replace(self, text: str) -> None:
        self._text = text

    def clear(self) -> None:
        self._text = ""

    def segments(self) -> list[tuple[str, str]]:
        """Return (video name, body) pairs for every begun segment, in order.

        A segment whose end marker is missing (failed mid-stream) runs to the
        end of the buffer.
        """
        result: list[tuple[str, str]] = []
        current_name: str | None = None
        body: list[str] = []

        for line in self._text.splitlines():
            begin = SEGMENT_BEGIN_PATTERN.fullmatch(line.strip())
            if begin:
                if current_name is not None:
                    result.append((current_name, "\n".join(body).strip()))
                current_name, body = begin.group("name"), []
                continue
            end = SEGMENT_END_PATTERN.fullmatch(line.strip())
            if end and current_name is not None:
                result.append((current_name, "\n".join(body).strip()))
                current_name, body = None, []
                continue
            if current_name is not None:
                body.append(line)

        if current_name is not None:
            result.append((current_name, "\n".join(body).strip()))
        return result

    def __bool__(self) -> bool:
        return bool(self._text)

    def __len__(self) -> int:
        return len(self._text)


@dataclass
class SessionState:
    """Everything one browser session holds."""

    document: MediaFile | None = None
    videos: list[MediaFile] = field(default_factory=list)
    notes: str = ""
    correction: str = ""
    transcript: TranscriptBuffer = field(default_factory=TranscriptBuffer)
    processing: bool = False
    transcript_editable: bool = True

    @property
    def can_start(self) -> bool:
        """Start is enabled only with a document, a video and no running workflow."""
        return self.document is not None and bool(self.videos) and not self.processing

    def ensure_idle(self) -> None:
        """Reentrancy guard checked by every mutating entry point."""
        if self.processing:
            raise SessionBusyError(ERROR_MESSAGES["session_busy"])


def submit_files(session: SessionState, files: Iterable[MediaFile]) -> list[MediaFile]:
    """Classify incoming files into the session.

    The first PDF wins while no document is held, videos are appended in
    arrival order and anything else is dropped. Returns the accepted files.
    """
    session.ensure_idle()

    accepted: list[MediaFile] = []
    ignored: list[str] = []
    for media in files:
        if media.is_document and session.document is None:
            session.document = media
            accepted.append(media)
        elif media.is_video:
            session.videos.append(media)
            accepted.append(media)
        else:
            ignored.append(media.name)

    logger.info(
        "Files submitted",
        accepted=[m.name for m in accepted],
        ignored=ignored,
        video_count=len(session.videos),
        has_document=session.document is not None,
        can_start=session.can_start,
    )
    return accepted


def reset_session(session: SessionState) -> None:
    """Clear document, videos, notes, transcript and correction together."""
    session.ensure_idle()

    session.document = None
    session.videos = []
    session.notes = ""
    session.correction = ""
    session.transcript.clear()
    session.transcript_editable = True
    logger.info("Session reset")


def file_list_lines(session: SessionState) -> list[str]:
    """Display lines: the minutes document, then each video 1-indexed."""
    lines: list[str] = []
    if session.document is not None:
        lines.append(f"Ata: {session.document.name}")
    for index, video in enumerate(session.videos, start=1):
        lines.append(f"Vídeo {index}: {video.name}")
    return lines
