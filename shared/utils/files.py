"""File handling utilities."""

from __future__ import annotations

from datetime import datetime
import mimetypes
import re

from shared.config import MEDIA_CONSTRAINTS


def resolve_media_type(filename: str, reported_type: str | None) -> str:
    """Return the browser-reported media type, or a guess from the extension."""

    if reported_type:
        return reported_type.lower()
    guessed, _ = mimetypes.guess_type(filename)
    return guessed or ""


def is_document_type(media_type: str) -> bool:
    """True for the minutes document kind (PDF)."""

    return media_type == MEDIA_CONSTRAINTS.document_type


def is_video_type(media_type: str) -> bool:
    """True for any video kind."""

    return media_type.startswith(MEDIA_CONSTRAINTS.video_type_prefix)


def format_file_size(size_bytes: int) -> str:
    """Return a display-friendly file size."""

    if size_bytes < 1024:
        return f"{size_bytes} B"
    if size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    if size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes / (1024 * 1024):.1f} MB"
    return f"{size_bytes / (1024 * 1024 * 1024):.1f} GB"


def sanitize_filename(filename: str) -> str:
    """Remove invalid characters from filenames."""

    sanitized = re.sub(r'[<>:"/\\|?*]', "", filename)
    sanitized = sanitized.replace(" ", "_")
    if len(sanitized) > 64:
        name, ext = sanitized.rsplit(".", 1) if "." in sanitized else (sanitized, "")
        name = name[:60]
        sanitized = f"{name}.{ext}" if ext else name
    return sanitized


def generate_download_filename(original: str, suffix: str, extension: str) -> str:
    """Generate a download filename with timestamp and suffix."""
    base = original.rsplit(".", 1)[0] if "." in original else original
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    filename = f"{base}_{suffix}_{timestamp}.{extension}"
    return sanitize_filename(filename)
