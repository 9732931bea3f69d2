"""Live progress bar and transcript preview used while a workflow runs."""

import streamlit as st

from frontend.utils.constants import UI_CONFIG


class LiveProgress:
    """Placeholders redrawn in place from workflow callbacks.

    The script thread stays inside the workflow coroutine, so every callback
    repaints immediately between awaited gateway responses.
    """

    def __init__(self):
        self.status_placeholder = st.empty()
        self.transcript_placeholder = st.container(height=UI_CONFIG.TRANSCRIPT_HEIGHT).empty()

    def update_progress(self, percentage: float, label: str) -> None:
        """ProgressReporter callback: percentage 0-100 plus label."""
        self.status_placeholder.progress(int(round(percentage)), text=label)

    def update_transcript(self, text: str) -> None:
        """Orchestrator callback: full transcript text after each fragment."""
        self.transcript_placeholder.text(text)
