"""Transcript output: editable text area, clipboard copy and downloads."""

import json

import streamlit as st

from frontend.services.state_service import StateService
from frontend.utils.constants import STATE_KEYS, UI_CONFIG
from shared.config import ERROR_MESSAGES, EXPORT_FORMATS
from shared.utils.exports import generate_export_content
from shared.utils.files import generate_download_filename
from transcriber.session import SessionState

COPY_BUTTON_HTML = """
<button id="copy-btn" style="width:100%;padding:0.45rem;border-radius:0.5rem;
  border:1px solid rgba(49,51,63,0.2);background:white;cursor:pointer;">📋 Copiar texto</button>
<script>
const transcript = {text};
document.getElementById("copy-btn").addEventListener("click", () => {{
  navigator.clipboard.writeText(transcript)
    .then(() => alert({succeeded}))
    .catch(() => alert({failed}));
}});
</script>
"""


def _js_string(value: str) -> str:
    """JSON-encode for inline <script>, keeping '</script>' inside strings inert."""
    return json.dumps(value).replace("</", "<\\/")


def render_transcript_editor(session: SessionState, disabled: bool) -> None:
    """Text area bound to the transcript buffer; read-only until a run succeeds."""
    st.text_area(
        "Degravação",
        key=STATE_KEYS.TRANSCRIPT_INPUT,
        height=UI_CONFIG.TRANSCRIPT_HEIGHT,
        disabled=disabled or not session.transcript_editable,
        on_change=StateService.sync_inputs,
        placeholder="A transcrição aparecerá aqui.",
    )

    segments = session.transcript.segments()
    if segments:
        st.caption(f"{len(segments)} vídeo(s) degravado(s) · {len(session.transcript):,} caracteres")


def build_copy_button_html(text: str) -> str:
    return COPY_BUTTON_HTML.format(
        text=_js_string(text),
        succeeded=_js_string(ERROR_MESSAGES["copy_succeeded"]),
        failed=_js_string(ERROR_MESSAGES["copy_failed"]),
    )


def render_copy_button(text: str) -> None:
    """Copy to the browser clipboard, confirming success or failure with an alert."""
    st.iframe(build_copy_button_html(text), height=48)


def render_export_section(text: str) -> None:
    """Direct download buttons for every export format."""
    columns = st.columns(len(EXPORT_FORMATS))
    for column, fmt in zip(columns, EXPORT_FORMATS):
        content, mime_type = generate_export_content(text, fmt)
        with column:
            st.download_button(
                label=f"📥 {fmt.upper()}",
                data=content,
                file_name=generate_download_filename(UI_CONFIG.DOWNLOAD_BASENAME, "audiencia", fmt),
                mime=mime_type,
                width="stretch",
            )
