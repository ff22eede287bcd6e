"""Streamlit dashboard package."""

__all__ = []
