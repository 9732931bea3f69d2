"""Generative request gateway - the only boundary with the hosted model.

Two call shapes over one pydantic-ai agent: a single-shot completion and a
streamed completion. Each call is a single attempt; failures surface as
``ServiceError`` and the caller decides what to show.
"""

from collections.abc import AsyncIterator, Sequence
import time

from pydantic_ai import Agent, BinaryContent
from pydantic_ai.models import Model
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.providers.google import GoogleProvider
import structlog

from transcriber.config import settings
from transcriber.errors import ServiceError
from transcriber.models import MediaFile

logger = structlog.get_logger(__name__)

ContentPart = str | MediaFile


def build_default_model() -> GoogleModel:
    """Gemini model configured from settings (falls back to GOOGLE_API_KEY)."""
    provider = GoogleProvider(api_key=settings.google_api_key or None)
    return GoogleModel(settings.gemini_model, provider=provider)


def to_user_content(parts: Sequence[ContentPart]) -> list[str | BinaryContent]:
    """Encode media files as self-describing binary payloads (bytes + media type)."""
    content: list[str | BinaryContent] = []
    for part in parts:
        if isinstance(part, MediaFile):
            content.append(BinaryContent(data=part.data, media_type=part.media_type))
        else:
            content.append(part)
    return content


def _describe(parts: Sequence[ContentPart]) -> list[str]:
    return [
        f"{p.media_type}:{p.name}" if isinstance(p, MediaFile) else f"text:{len(p)}"
        for p in parts
    ]


class GenerativeGateway:
    """Single-shot and streaming text completions over multimodal content."""

    def __init__(self, model: Model | None = None) -> None:
        self.model = model or build_default_model()
        self.agent: Agent[None, str] = Agent(self.model, output_type=str)

        logger.info("Generative gateway configured", model=self.model.model_name)

    async def complete_once(self, parts: Sequence[ContentPart]) -> str:
        """Send the content parts and return the full text response."""
        start_time = time.time()
        try:
            result = await self.agent.run(to_user_content(parts))
        except Exception as e:
            logger.error(
                "Completion failed",
                parts=_describe(parts),
                error=str(e),
                processing_time_ms=int((time.time() - start_time) * 1000),
            )
            raise ServiceError(f"Generative service call failed: {e}") from e

        logger.info(
            "Completion received",
            parts=_describe(parts),
            output_chars=len(result.output),
            processing_time_ms=int((time.time() - start_time) * 1000),
        )
        return result.output

    async def complete_streaming(
        self, parts: Sequence[ContentPart]
    ) -> AsyncIterator[str]:
        """Yield text fragments in order as the service produces them.

        The iterator is single-use. Fragments already yielded before a failure
        belong to the caller; the failure itself is raised as ``ServiceError``.
        """
        start_time = time.time()
        fragments = 0
        try:
            async with self.agent.run_stream(to_user_content(parts)) as result:
                async for fragment in result.stream_text(delta=True, debounce_by=None):
                    fragments += 1
                    yield fragment
        except Exception as e:
            logger.error(
                "Streaming completion failed",
                parts=_describe(parts),
                fragments_delivered=fragments,
                error=str(e),
                processing_time_ms=int((time.time() - start_time) * 1000),
            )
            raise ServiceError(f"Generative service stream failed: {e}") from e

        logger.info(
            "Streaming completion finished",
            parts=_describe(parts),
            fragments_delivered=fragments,
            processing_time_ms=int((time.time() - start_time) * 1000),
        )
