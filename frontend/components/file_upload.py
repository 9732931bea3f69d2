"""File intake panel: drag-and-drop or browse, then the current selection."""

import streamlit as st
from streamlit.runtime.uploaded_file_manager import UploadedFile

from frontend.services.state_service import StateService
from shared.config import ERROR_MESSAGES
from shared.utils.files import format_file_size, resolve_media_type
from transcriber.errors import SessionBusyError
from transcriber.models import MediaFile
from transcriber.session import SessionState, file_list_lines, submit_files


def to_media_file(uploaded_file: UploadedFile) -> MediaFile:
    """Read an uploaded file into memory with its resolved media type."""
    return MediaFile(
        name=uploaded_file.name,
        media_type=resolve_media_type(uploaded_file.name, uploaded_file.type),
        data=uploaded_file.getvalue(),
    )


def _on_files_uploaded() -> None:
    """Uploader callback: submit the batch once, then clear the uploader."""
    uploaded = st.session_state.get(StateService.uploader_key()) or []
    try:
        submit_files(StateService.get_session(), [to_media_file(f) for f in uploaded])
    except SessionBusyError:
        StateService.flash("warning", ERROR_MESSAGES["session_busy"])
    StateService.bump_uploader()


def render_file_intake(disabled: bool) -> None:
    """Uploader accepting the minutes PDF and any number of videos."""
    st.file_uploader(
        "Arraste a ata (PDF) e os vídeos da audiência, ou clique para selecionar",
        accept_multiple_files=True,
        key=StateService.uploader_key(),
        on_change=_on_files_uploaded,
        disabled=disabled,
    )


def render_file_list(session: SessionState) -> None:
    """Document line first, then one line per video in arrival order."""
    lines = file_list_lines(session)
    if not lines:
        st.caption("Nenhum arquivo selecionado.")
        return

    media = ([session.document] if session.document else []) + session.videos
    for line, item in zip(lines, media):
        icon = "📄" if item.is_document else "🎬"
        st.markdown(f"{icon} {line} · {format_file_size(item.size)}")
