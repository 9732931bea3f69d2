"""Components package for reusable UI components."""

from .error_display import (
    display_error,
    display_flash_messages,
    display_missing_api_key,
    display_warning,
)
from .file_upload import render_file_intake, render_file_list
from .progress_tracker import LiveProgress
from .transcript_display import (
    render_copy_button,
    render_export_section,
    render_transcript_editor,
)

__all__ = [
    "display_error",
    "display_flash_messages",
    "display_missing_api_key",
    "display_warning",
    "render_file_intake",
    "render_file_list",
    "LiveProgress",
    "render_copy_button",
    "render_export_section",
    "render_transcript_editor",
]
