"""Streamlit host for the tag menu."""
