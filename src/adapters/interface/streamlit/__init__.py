"""Streamlit dashboard adapter."""

__all__ = []
