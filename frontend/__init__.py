"""Streamlit front-end for the hearing transcriber."""
