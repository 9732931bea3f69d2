"""Hearing video transcription core: gateway, session state and workflows."""
