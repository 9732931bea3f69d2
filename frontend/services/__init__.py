"""Services package for Streamlit session plumbing."""

from .state_service import StateService

__all__ = ["StateService"]
