"""Centralized state management service."""

from typing import Any

import streamlit as st

from frontend.utils.constants import DEFAULT_VALUES, STATE_KEYS
from transcriber.gateway import GenerativeGateway
from transcriber.session import SessionState


class StateService:
    """Manages Streamlit session state for the app."""

    @staticmethod
    def initialize_page_state(required_keys: dict[str, Any] | None = None) -> None:
        """Initialize session state with required keys.

        Logic:
        1. Check each required key exists in session state
        2. Set default value if missing (lists are copied per browser session)
        """
        for key, default_value in (required_keys or DEFAULT_VALUES).items():
            if key not in st.session_state:
                st.session_state[key] = (
                    list(default_value) if isinstance(default_value, list) else default_value
                )

        if STATE_KEYS.SESSION not in st.session_state:
            st.session_state[STATE_KEYS.SESSION] = SessionState()

    @staticmethod
    def get_session() -> SessionState:
        return st.session_state[STATE_KEYS.SESSION]

    @staticmethod
    def get_gateway() -> GenerativeGateway:
        """Build the gateway on first use so the page renders without an API key."""
        if st.session_state.get(STATE_KEYS.GATEWAY) is None:
            st.session_state[STATE_KEYS.GATEWAY] = GenerativeGateway()
        return st.session_state[STATE_KEYS.GATEWAY]

    @staticmethod
    def is_busy() -> bool:
        """Inputs are locked while an action is queued or running."""
        return (
            StateService.get_session().processing
            or st.session_state.get(STATE_KEYS.PENDING_ACTION) is not None
        )

    @staticmethod
    def request_action(action: str) -> None:
        """Button callback: queue an action and copy widget values into the session."""
        StateService.sync_inputs()
        st.session_state[STATE_KEYS.PENDING_ACTION] = action

    @staticmethod
    def pop_action() -> str | None:
        action = st.session_state.get(STATE_KEYS.PENDING_ACTION)
        st.session_state[STATE_KEYS.PENDING_ACTION] = None
        return action

    @staticmethod
    def sync_inputs() -> None:
        """Copy free-text widget values into the session (widgets -> session)."""
        session = StateService.get_session()
        session.notes = st.session_state.get(STATE_KEYS.NOTES_INPUT, "")
        session.correction = st.session_state.get(STATE_KEYS.CORRECTION_INPUT, "")
        if session.transcript_editable and not session.processing:
            edited = st.session_state.get(STATE_KEYS.TRANSCRIPT_INPUT)
            if edited is not None:
                session.transcript.replace(edited)

    @staticmethod
    def load_inputs() -> None:
        """Copy session values into the widgets before they are drawn (session -> widgets)."""
        session = StateService.get_session()
        st.session_state[STATE_KEYS.NOTES_INPUT] = session.notes
        st.session_state[STATE_KEYS.CORRECTION_INPUT] = session.correction
        st.session_state[STATE_KEYS.TRANSCRIPT_INPUT] = session.transcript.text

    @staticmethod
    def flash(level: str, message: str) -> None:
        """Keep a message across st.rerun() (levels: success, info, warning, error)."""
        st.session_state[STATE_KEYS.FLASH_MESSAGES].append((level, message))

    @staticmethod
    def pop_flash_messages() -> list[tuple[str, str]]:
        messages = list(st.session_state[STATE_KEYS.FLASH_MESSAGES])
        st.session_state[STATE_KEYS.FLASH_MESSAGES] = []
        return messages

    @staticmethod
    def bump_uploader() -> None:
        """Give the uploader a fresh key so the next batch starts empty."""
        st.session_state[STATE_KEYS.UPLOADER_VERSION] += 1

    @staticmethod
    def uploader_key() -> str:
        return f"uploader_{st.session_state[STATE_KEYS.UPLOADER_VERSION]}"
