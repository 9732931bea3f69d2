"""One-shot transformations applied to the whole transcript."""

import structlog

from shared.config import ERROR_MESSAGES, STATUS_LABELS
from transcriber.errors import ServiceError, ValidationError
from transcriber.gateway import GenerativeGateway
from transcriber.progress import COMPLETE, ProgressReporter
from transcriber.prompts import build_anonymize_prompt, build_correction_prompt
from transcriber.session import SessionState

logger = structlog.get_logger(__name__)


class PostProcessingService:
    """Anonymize or correct the transcript with a single completion each.

    On success the buffer is replaced wholesale; on failure it is left as it was.
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

    async def anonymize(self) -> str:
        """Replace names and addresses with initials and money values with 'x'."""
        self.session.ensure_idle()
        if not self.session.transcript:
            raise ValidationError(ERROR_MESSAGES["missing_transcript"])

        prompt = build_anonymize_prompt(self.session.transcript.text)
        return await self._transform(
            action="anonymize",
            prompt=prompt,
            running_label=STATUS_LABELS["anonymizing"],
            done_label=STATUS_LABELS["anonymized"],
        )

    async def apply_correction(self) -> str:
        """Apply the session's free-text correction and clear it on success."""
        self.session.ensure_idle()
        correction = self.session.correction
        if not self.session.transcript:
            raise ValidationError(ERROR_MESSAGES["missing_transcript"])
        if not correction:
            raise ValidationError(ERROR_MESSAGES["missing_correction"])

        prompt = build_correction_prompt(correction, self.session.transcript.text)
        text = await self._transform(
            action="correction",
            prompt=prompt,
            running_label=STATUS_LABELS["correcting"],
            done_label=STATUS_LABELS["corrected"],
        )
        self.session.correction = ""
        return text

    async def _transform(
        self, action: str, prompt: str, running_label: str, done_label: str
    ) -> str:
        session = self.session
        session.processing = True
        try:
            await self.progress.start(running_label)
            logger.info(
                "Post-processing started",
                phase=action,
                transcript_chars=len(session.transcript),
            )

            text = await self.gateway.complete_once([prompt])
            session.transcript.replace(text)

            await self.progress.update(COMPLETE, done_label)
            logger.info(
                "Post-processing completed",
                phase=action,
                transcript_chars=len(text),
            )
            return text

        except Exception as e:
            logger.error(
                "Post-processing failed",
                phase=action,
                error=str(e),
                exc_info=True,
            )
            if isinstance(e, ServiceError):
                raise
            raise ServiceError(f"{action} failed: {e}") from e

        finally:
            session.processing = False
