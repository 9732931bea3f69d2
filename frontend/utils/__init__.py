"""Utilities package for helper functions and constants."""

from . import constants

__all__ = ["constants"]
