"""Error display and handling components."""

import streamlit as st

from shared.config import ERROR_MESSAGES


def display_error(error_type: str, custom_message: str | None = None) -> None:
    """Display standardized error message.

    Logic:
    1. Get appropriate error message from constants
    2. Display with consistent styling
    """
    base_message = ERROR_MESSAGES.get(error_type, "Ocorreu um erro inesperado.")
    st.error(f"❌ {custom_message or base_message}")


def display_warning(message: str, action_suggestion: str | None = None) -> None:
    """Display standardized warning message.

    Logic:
    1. Show warning with consistent styling
    2. Include action suggestion if provided
    """
    st.warning(f"⚠️ {message}")

    if action_suggestion:
        st.info(f"💡 {action_suggestion}")


def display_flash_messages(messages: list[tuple[str, str]]) -> None:
    """Show messages queued by the previous run (alerts survive st.rerun())."""
    for level, message in messages:
        if level == "error":
            display_error("processing_failed", message)
        elif level == "warning":
            display_warning(message)
        elif level == "success":
            st.success(f"✅ {message}")
        else:
            st.info(message)


def display_missing_api_key() -> None:
    """Explain how to configure the Gemini API key."""
    st.error("❌ Chave da API Gemini não encontrada. Defina GOOGLE_API_KEY em:")
    st.error("- arquivo `.env` na raiz do projeto")
    st.error("- variável de ambiente")
    st.info("Crie o arquivo `.env` com:")
    st.code("GOOGLE_API_KEY=sua-chave-aqui")
