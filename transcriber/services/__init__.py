"""Workflows that run against a session: transcription and post-processing."""

from transcriber.services.post_processing import PostProcessingService
from transcriber.services.transcription_service import TranscriptionOrchestrator

__all__ = ["PostProcessingService", "TranscriptionOrchestrator"]
