"""Export helpers for the transcript text."""

from __future__ import annotations

from transcriber.prompts import SEGMENT_BEGIN_PATTERN, SEGMENT_END_PATTERN


def generate_export_content(text: str, format_type: str) -> tuple[str, str]:
    """Generate export content in the requested format."""
    format_type = format_type.lower()

    if format_type == "md":
        return _format_as_markdown(text), "text/markdown"
    if format_type == "txt":
        return text.strip() + "\n", "text/plain"

    raise ValueError(f"Unsupported export format: {format_type}")


def _format_as_markdown(text: str) -> str:
    """Turn segment begin markers into headings and drop end markers."""
    lines: list[str] = ["# Degravação", ""]

    for line in text.strip().splitlines():
        begin = SEGMENT_BEGIN_PATTERN.fullmatch(line.strip())
        if begin:
            lines.append(f"## {begin.group('name')}")
            continue
        if SEGMENT_END_PATTERN.fullmatch(line.strip()):
            continue
        lines.append(line)

    return "\n".join(lines).rstrip() + "\n"
