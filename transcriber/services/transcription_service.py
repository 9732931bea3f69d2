"""Transcription orchestrator - participants once, then every video in order."""

import time

import structlog

from shared.config import ERROR_MESSAGES, STATUS_LABELS
from shared.services.runtime import maybe_await
from shared.types import TextCallback
from transcriber.errors import ServiceError, ValidationError
from transcriber.gateway import GenerativeGateway
from transcriber.models import RunState
from transcriber.progress import COMPLETE, PARTICIPANTS_DONE, ProgressReporter, video_progress
from transcriber.prompts import (
    PARTICIPANTS_PROMPT,
    begin_marker,
    build_transcription_prompt,
    end_marker,
)
from transcriber.session import SessionState

logger = structlog.get_logger(__name__)


class TranscriptionOrchestrator:
    """Run the sequential transcription workflow against one session.

    States: IDLE -> EXTRACTING_PARTICIPANTS -> TRANSCRIBING_VIDEO(i) -> DONE,
    with ERROR reachable from any non-idle state. Videos are never processed
    concurrently; video i+1 starts only after video i's stream has ended.
    """

    def __init__(
        self,
        session: SessionState,
        gateway: GenerativeGateway,
        progress: ProgressReporter | None = None,
    ):
        self.session = session
        self.gateway = gateway
        self.progress = progress or ProgressReporter()
        self.state = RunState.IDLE
        self.current_video: int | None = None

    def _check_inputs(self) -> None:
        self.session.ensure_idle()
        if self.session.document is None or not self.session.videos:
            raise ValidationError(ERROR_MESSAGES["missing_inputs"])

    async def run(self, on_text: TextCallback | None = None) -> str:
        """
        Transcribe every video of the session into its transcript buffer.

        Args:
            on_text: Called with the full transcript text after every append

        Returns:
            The participants summary used for this run

        Raises:
            ValidationError: Document or videos missing (nothing changed)
            SessionBusyError: Another workflow holds the session
            ServiceError: A gateway call failed; partial text is kept
        """
        self._check_inputs()

        session = self.session
        document = session.document
        videos = list(session.videos)
        total = len(videos)

        session.processing = True
        session.transcript_editable = False
        session.transcript.clear()
        self.current_video = None
        start_time = time.time()

        async def append(text: str) -> None:
            session.transcript.append(text)
            await maybe_await(on_text, session.transcript.text)

        logger.info(
            "Starting transcription run",
            phase="run_start",
            document=document.name,
            videos=[v.name for v in videos],
        )

        try:
            # Phase 1: participants
            self.state = RunState.EXTRACTING_PARTICIPANTS
            await self.progress.start(STATUS_LABELS["analyzing_document"])
            participants = await self.gateway.complete_once([document, PARTICIPANTS_PROMPT])
            await self.progress.update(
                PARTICIPANTS_DONE,
                STATUS_LABELS["participants_identified"].format(total=total),
            )
            logger.info(
                "Participants identified",
                phase="participants",
                summary_chars=len(participants),
            )

            # Phase 2: one streamed transcription per video
            prompt = build_transcription_prompt(participants, session.notes)
            for index, video in enumerate(videos):
                self.state = RunState.TRANSCRIBING_VIDEO
                self.current_video = index
                await self.progress.update(
                    video_progress(index, total),
                    STATUS_LABELS["transcribing_video"].format(
                        index=index + 1, total=total, name=video.name
                    ),
                )
                logger.info(
                    "Transcribing video",
                    phase="transcription",
                    video_index=index + 1,
                    total_videos=total,
                    video=video.name,
                )

                await append(begin_marker(video.name))
                async for fragment in self.gateway.complete_streaming([video, prompt]):
                    await append(fragment)
                await append(end_marker(video.name))

            await self.progress.update(COMPLETE, STATUS_LABELS["completed"])
            session.transcript_editable = True
            self.state = RunState.DONE
            self.current_video = None

            logger.info(
                "Transcription run completed",
                phase="run_complete",
                total_videos=total,
                transcript_chars=len(session.transcript),
                processing_time_seconds=round(time.time() - start_time, 2),
            )
            return participants

        except Exception as e:
            self.state = RunState.ERROR
            logger.error(
                "Transcription run failed",
                phase="run_error",
                video_index=None if self.current_video is None else self.current_video + 1,
                transcript_chars=len(session.transcript),
                error=str(e),
                exc_info=True,
            )
            try:
                await self.progress.fail(STATUS_LABELS["failed"])
            except Exception as progress_error:
                logger.warning(
                    "Progress callback failed while reporting error",
                    phase="run_error",
                    error=str(progress_error),
                )
            if isinstance(e, ServiceError):
                raise
            raise ServiceError(f"Transcription run failed: {e}") from e

        finally:
            session.processing = False
