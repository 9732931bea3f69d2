"""Shared type definitions."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

# Standardized progress callback type: (percentage 0-100, label)
ProgressCallback = (
    Callable[[float, str], None] | Callable[[float, str], Awaitable[None]]
)

# Receives the full transcript text after every streamed fragment
TextCallback = Callable[[str], None] | Callable[[str], Awaitable[None]]
