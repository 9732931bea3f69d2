"""Session data models - uploaded media, progress and run states."""

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, Field

from shared.utils.files import is_document_type, is_video_type


@dataclass(frozen=True)
class MediaFile:
    """One uploaded file exactly as received from the browser."""

    name: str  # original file name, e.g. "audiencia_parte1.mp4"
    media_type: str  # e.g. "application/pdf", "video/mp4"
    data: bytes = field(repr=False)

    @property
    def is_document(self) -> bool:
        return is_document_type(self.media_type)

    @property
    def is_video(self) -> bool:
        return is_video_type(self.media_type)

    @property
    def size(self) -> int:
        return len(self.data)


class Progress(BaseModel):
    """Current milestone of a workflow run."""

    percentage: float = Field(default=0.0, ge=0.0, le=100.0)
    label: str = ""


class RunState(str, Enum):
    """Transcription workflow states."""

    IDLE = "idle"
    EXTRACTING_PARTICIPANTS = "extracting_participants"
    TRANSCRIBING_VIDEO = "transcribing_video"
    DONE = "done"
    ERROR = "error"
