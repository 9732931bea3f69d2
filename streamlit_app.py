"""
Streamlit entry point for the Hearing Transcriber.

Run with ``streamlit run streamlit_app.py``. The page lets the user:
- Upload the hearing minutes (PDF) and one or more hearing videos
- Transcribe every video with speakers identified from the minutes
- Anonymize or correct the resulting transcript, then copy or download it
"""

from dotenv import load_dotenv
import streamlit as st

from frontend.main import main
from frontend.utils.constants import UI_CONFIG
from transcriber.config import configure_structlog

# Load environment variables
load_dotenv()

# Configure structured logging for the entire application
configure_structlog()

# Configure page
st.set_page_config(
    page_title=UI_CONFIG.PAGE_TITLE,
    page_icon=UI_CONFIG.PAGE_ICON,
    layout="wide",
)

main()
