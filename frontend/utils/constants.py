"""Application constants and configuration values (Streamlit-only)."""

from typing import Any


# Session State Keys
class STATE_KEYS:
    SESSION = "transcriber_session"
    GATEWAY = "generative_gateway"
    PENDING_ACTION = "pending_action"
    UPLOADER_VERSION = "uploader_version"
    FLASH_MESSAGES = "flash_messages"
    NOTES_INPUT = "notes_input"
    CORRECTION_INPUT = "correction_input"
    TRANSCRIPT_INPUT = "transcript_input"


# Actions a button can queue for the next script run
class ACTIONS:
    START = "start"
    ANONYMIZE = "anonymize"
    CORRECT = "correct"


# Default Values
DEFAULT_VALUES: dict[str, Any] = {
    STATE_KEYS.PENDING_ACTION: None,
    STATE_KEYS.UPLOADER_VERSION: 0,
    STATE_KEYS.FLASH_MESSAGES: [],
    STATE_KEYS.NOTES_INPUT: "",
    STATE_KEYS.CORRECTION_INPUT: "",
    STATE_KEYS.TRANSCRIPT_INPUT: "",
}


# UI Configuration
class UI_CONFIG:
    PAGE_TITLE = "Degravação de Audiências"
    PAGE_ICON = "⚖️"
    TRANSCRIPT_HEIGHT = 480
    NOTES_HEIGHT = 120
    DOWNLOAD_BASENAME = "degravacao"
