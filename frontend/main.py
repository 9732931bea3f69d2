"""Hearing Transcriber - single-page Streamlit interface.

Buttons only queue an action; the queued action runs at the end of the next
script run, after every input has been redrawn disabled. When it finishes the
page reruns with the inputs enabled again.
"""

import streamlit as st
import structlog

from frontend.components import (
    LiveProgress,
    display_flash_messages,
    display_missing_api_key,
    render_copy_button,
    render_export_section,
    render_file_intake,
    render_file_list,
    render_transcript_editor,
)
from frontend.services.state_service import StateService
from frontend.utils.constants import ACTIONS, STATE_KEYS, UI_CONFIG
from shared.config import ERROR_MESSAGES
from shared.services.runtime import run_async
from transcriber.config import settings
from transcriber.errors import ServiceError, ValidationError
from transcriber.progress import ProgressReporter
from transcriber.services import PostProcessingService, TranscriptionOrchestrator
from transcriber.session import reset_session

logger = structlog.get_logger(__name__)

FAILURE_MESSAGES = {
    ACTIONS.START: ERROR_MESSAGES["processing_failed"],
    ACTIONS.ANONYMIZE: ERROR_MESSAGES["anonymize_failed"],
    ACTIONS.CORRECT: ERROR_MESSAGES["correction_failed"],
}


def _on_clear() -> None:
    """Reset every input and the transcript in one step."""
    try:
        reset_session(StateService.get_session())
    except ValidationError:
        StateService.flash("warning", ERROR_MESSAGES["session_busy"])
        return
    StateService.bump_uploader()


def _request(action: str):
    def callback() -> None:
        StateService.request_action(action)

    return callback


def run_pending_action(action: str) -> None:
    """Execute a queued action with live progress, then queue its outcome message."""
    session = StateService.get_session()
    live = LiveProgress()
    live.update_transcript(session.transcript.text)
    reporter = ProgressReporter(callback=live.update_progress)

    try:
        gateway = StateService.get_gateway()
        if action == ACTIONS.START:
            workflow = TranscriptionOrchestrator(session, gateway, reporter)
            run_async(workflow.run(on_text=live.update_transcript))
        elif action == ACTIONS.ANONYMIZE:
            run_async(PostProcessingService(session, gateway, reporter).anonymize())
        elif action == ACTIONS.CORRECT:
            run_async(PostProcessingService(session, gateway, reporter).apply_correction())
        else:
            raise ValueError(f"Unknown action: {action}")

        StateService.flash("success", reporter.current.label)

    except ValidationError as e:
        StateService.flash("warning", str(e))
    except ServiceError as e:
        logger.error("Action failed", action=action, error=str(e))
        StateService.flash("error", FAILURE_MESSAGES[action])
    except Exception as e:
        logger.error("Action could not start", action=action, error=str(e), exc_info=True)
        StateService.flash("error", FAILURE_MESSAGES.get(action, str(e)))

    st.rerun()


def main() -> None:
    """Render the page and run a queued action, if any."""
    StateService.initialize_page_state()
    StateService.load_inputs()

    session = StateService.get_session()
    pending = st.session_state[STATE_KEYS.PENDING_ACTION]
    busy = StateService.is_busy()

    st.title(f"{UI_CONFIG.PAGE_ICON} {UI_CONFIG.PAGE_TITLE}")
    display_flash_messages(StateService.pop_flash_messages())

    if not settings.google_api_key:
        display_missing_api_key()

    files_col, output_col = st.columns([2, 3])

    with files_col:
        st.subheader("📁 Arquivos")
        render_file_intake(disabled=busy)
        render_file_list(session)

        st.text_area(
            "Informações adicionais",
            key=STATE_KEYS.NOTES_INPUT,
            height=UI_CONFIG.NOTES_HEIGHT,
            disabled=busy,
            on_change=StateService.sync_inputs,
            placeholder="Ex.: a testemunha de defesa fala a partir dos 12 minutos.",
        )

        start_col, clear_col = st.columns(2)
        with start_col:
            st.button(
                "🚀 Iniciar degravação",
                key="start_btn",
                type="primary",
                disabled=busy or not session.can_start,
                on_click=_request(ACTIONS.START),
                width="stretch",
            )
        with clear_col:
            st.button(
                "🧹 Limpar tudo",
                key="clear_btn",
                disabled=busy,
                on_click=_on_clear,
                width="stretch",
            )

    with output_col:
        st.subheader("📝 Degravação")

        if pending is not None:
            # Drawn by the running action
            progress_area = st.container()
        else:
            progress_area = None
            render_transcript_editor(session, disabled=busy)

        st.text_input(
            "Correção",
            key=STATE_KEYS.CORRECTION_INPUT,
            disabled=busy,
            on_change=StateService.sync_inputs,
            placeholder="Ex.: o nome correto do promotor é ...",
        )

        correct_col, anonymize_col, copy_col = st.columns(3)
        with correct_col:
            st.button(
                "✏️ Aplicar correção",
                key="correct_btn",
                disabled=busy,
                on_click=_request(ACTIONS.CORRECT),
                width="stretch",
            )
        with anonymize_col:
            st.button(
                "🕶️ Anonimizar",
                key="anonymize_btn",
                disabled=busy,
                on_click=_request(ACTIONS.ANONYMIZE),
                width="stretch",
            )
        with copy_col:
            render_copy_button(session.transcript.text)

        if session.transcript and not busy:
            render_export_section(session.transcript.text)

    if progress_area is not None:
        action = StateService.pop_action()
        with progress_area:
            run_pending_action(action)


if __name__ == "__main__":
    main()
